"""Tests for budgetbuddy.domain.report pure functions."""

import pytest

from budgetbuddy.domain.budget import create_budget
from budgetbuddy.domain.expense import ExpenseList
from budgetbuddy.domain.income import IncomeList, Salary, Supplemental
from budgetbuddy.domain.models import BudgetSettings, ExpenseName, IncomeName
from budgetbuddy.domain.quantity import Money
from budgetbuddy.domain.report import (
    create_budget_report,
    create_expense_report,
    create_income_report,
    sort_amounts,
)


class TestSortAmounts:
    """Tests for sort_amounts."""

    def test_alpha(self) -> None:
        """Should sort by name."""
        amounts = {"b": Money(1.0), "a": Money(2.0)}

        assert [name for name, _ in sort_amounts(amounts, "alpha")] == ["a", "b"]

    def test_value(self) -> None:
        """Should sort largest first, ties by name."""
        amounts = {"a": Money(1.0), "b": Money(5.0), "c": Money(1.0)}

        assert [name for name, _ in sort_amounts(amounts, "value")] == ["b", "a", "c"]

    def test_unknown_order(self) -> None:
        """Should reject unknown sort orders."""
        with pytest.raises(ValueError, match="Unknown sort order"):
            sort_amounts({}, "random")


class TestCreateIncomeReport:
    """Tests for create_income_report."""

    def test_lines_and_total(self) -> None:
        """Should list monthly income per source, sorted and indexed."""
        income = IncomeList(
            {
                IncomeName("Office"): Salary(salary=Money(48000.0)),
                IncomeName("Allowance"): Supplemental(money=Money(100.0)),
            }
        )

        report = create_income_report(income)

        assert report.title == "Income"
        assert [(line.index, line.name, line.kind) for line in report.lines] == [
            (1, "Allowance", "Supplemental"),
            (2, "Office", "Salary"),
        ]
        assert report.lines[1].amount == Money(3000.0)
        assert report.total == Money(3100.0)

    def test_uses_settings(self) -> None:
        """Should compute amounts with the given settings."""
        income = IncomeList({IncomeName("Office"): Salary(salary=Money(12000.0))})

        report = create_income_report(income, BudgetSettings(net_pay_fraction=1.0))

        assert report.total == Money(1000.0)


class TestCreateExpenseReport:
    """Tests for create_expense_report."""

    def test_empty(self) -> None:
        """Should report no lines and a zero total."""
        report = create_expense_report(ExpenseList())

        assert report.lines == []
        assert report.total == Money(0.0)

    def test_lines_have_no_kind(self) -> None:
        """Should leave the income type empty for expenses."""
        report = create_expense_report(ExpenseList({ExpenseName("Rent"): Money(1200.0)}))

        assert report.lines[0].kind is None
        assert report.lines[0].amount == Money(1200.0)


class TestCreateBudgetReport:
    """Tests for create_budget_report."""

    def test_summary(self) -> None:
        """Should summarize income, expenses, and the remainder."""
        budget = create_budget("household")
        budget.income[IncomeName("Office")] = Salary(salary=Money(48000.0))
        budget.expenses[ExpenseName("Rent")] = Money(1200.0)
        budget.expenses[ExpenseName("Food")] = Money(400.0)

        report = create_budget_report(budget, sort_by="value")

        assert report.name == "household"
        assert [line.name for line in report.expenses.lines] == ["Rent", "Food"]
        assert report.summary.income == Money(3000.0)
        assert report.summary.expenses == Money(1600.0)
        assert report.summary.remaining == Money(1400.0)
