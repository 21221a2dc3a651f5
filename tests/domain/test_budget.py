"""Tests for budgetbuddy.domain.budget."""

import math

import pytest

from budgetbuddy.domain.budget import Budget, budget_from_record, budget_to_record, create_budget
from budgetbuddy.domain.errors import DecodeError, IncomeDecodeError
from budgetbuddy.domain.expense import ExpenseList
from budgetbuddy.domain.income import Commissions, IncomeList, Salary, Sales, Supplemental, Wages
from budgetbuddy.domain.models import BudgetName, BudgetSettings, ExpenseName, IncomeName
from budgetbuddy.domain.quantity import Integer, Money, Number, Percentage


def make_full_budget() -> Budget:
    """Budget with one income of every type and one expense."""
    return Budget(
        name=BudgetName("household"),
        income=IncomeList(
            {
                IncomeName("Shop"): Wages(rate=Money(10.0), hours=Number(50.0)),
                IncomeName("Office"): Salary(salary=Money(48000.0)),
                IncomeName("Lemonade"): Sales(rate=Money(1.0), items=Integer(50.0)),
                IncomeName("Realty"): Commissions(rate=Percentage(0.06), volume=(Money(25000.0), Money(75000.0))),
                IncomeName("Allowance"): Supplemental(money=Money(100.0)),
            }
        ),
        expenses=ExpenseList({ExpenseName("Rent"): Money(1200.0)}),
    )


class TestCreateBudget:
    """Tests for create_budget."""

    def test_creates_empty_budget(self) -> None:
        """Should create a named budget with empty lists."""
        budget = create_budget("household")

        assert budget.name == "household"
        assert budget.income == {}
        assert budget.expenses == {}
        assert budget.total() == Money(0.0)


class TestBudgetTotal:
    """Tests for Budget.total."""

    def test_income_minus_expenses(self) -> None:
        """Should subtract expenses from monthly income."""
        budget = make_full_budget()

        expected = 1787.5 + 3000.0 + 50.0 + 6000.0 + 100.0 - 1200.0
        assert budget.total().value == pytest.approx(expected)

    def test_uses_settings(self) -> None:
        """Should pass settings to the income calculations."""
        budget = create_budget("job")
        budget.income[IncomeName("Office")] = Salary(salary=Money(12000.0))

        assert budget.total(BudgetSettings(net_pay_fraction=1.0)) == Money(1000.0)

    def test_nan_propagates(self) -> None:
        """Should be unknown when any amount is unknown."""
        budget = create_budget("unknown")
        budget.expenses[ExpenseName("Mystery")] = Money(math.nan)

        assert budget.total().is_nan()


class TestBudgetRecord:
    """Tests for budget_to_record and budget_from_record."""

    def test_record_shape(self) -> None:
        """Should store income fields and plain expense numbers."""
        record = budget_to_record(make_full_budget())

        assert set(record) == {"income", "expenses"}
        assert record["income"]["Office"] == {"salary": 48000.0}
        assert record["expenses"] == {"Rent": 1200.0}

    def test_round_trip(self) -> None:
        """Should decode to equal records and an equal total."""
        budget = make_full_budget()

        decoded = budget_from_record(budget.name, budget_to_record(budget))

        assert decoded == budget
        assert decoded.total().value == pytest.approx(budget.total().value)

    def test_missing_lists_are_empty(self) -> None:
        """Should treat missing income or expenses as empty."""
        budget = budget_from_record("empty", {})

        assert budget.income == {}
        assert budget.expenses == {}

    def test_rejects_non_mapping(self) -> None:
        """Should reject records that are not mappings."""
        with pytest.raises(DecodeError):
            budget_from_record("bad", [])

    def test_bad_income_fails_whole_budget(self) -> None:
        """Should not load a budget with an unrecognized income."""
        with pytest.raises(IncomeDecodeError):
            budget_from_record("bad", {"income": {"Job": {"hourly": 10}}, "expenses": {}})
