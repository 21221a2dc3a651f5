"""Pure functions for budget report calculations.

This module contains the functional core for reporting:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations
- Easy to test

Rendering only has to lay out the rows built here.
"""

from dataclasses import dataclass

from budgetbuddy.domain.budget import Budget
from budgetbuddy.domain.expense import ExpenseList
from budgetbuddy.domain.income import IncomeList, income_kind_of, monthly_income
from budgetbuddy.domain.models import DEFAULT_SETTINGS, BudgetSettings
from budgetbuddy.domain.quantity import Money

SORT_ORDERS = ("alpha", "value")


@dataclass(frozen=True)
class ReportLine:
    """Immutable report row."""

    index: int
    name: str
    amount: Money
    kind: str | None = None  # Income type, None for expenses


@dataclass(frozen=True)
class ListReport:
    """Immutable report for one list of income or expenses."""

    title: str
    lines: list[ReportLine]
    total: Money


@dataclass(frozen=True)
class SummaryReport:
    """Immutable summary row."""

    income: Money
    expenses: Money
    remaining: Money


@dataclass(frozen=True)
class BudgetReport:
    """Immutable full report with income, expenses, and summary."""

    name: str
    income: ListReport
    expenses: ListReport
    summary: SummaryReport


def sort_amounts(amounts: dict[str, Money], sort_by: str = "alpha") -> list[tuple[str, Money]]:
    """Sort named amounts by name, or by amount from largest to smallest.

    Args:
        amounts: Dictionary of names and amounts.
        sort_by: Sort method - "alpha" or "value".

    Returns:
        Sorted list of (name, amount) tuples.

    Raises:
        ValueError: If sort_by is not a known sort order.
    """
    if sort_by == "alpha":
        return sorted(amounts.items(), key=lambda x: x[0])
    if sort_by == "value":
        return sorted(amounts.items(), key=lambda x: (-x[1].value, x[0]))
    raise ValueError(f"Unknown sort order {sort_by!r}, expected one of {', '.join(SORT_ORDERS)}")


def create_income_report(
    income: IncomeList,
    settings: BudgetSettings = DEFAULT_SETTINGS,
    sort_by: str = "alpha",
) -> ListReport:
    """Create income report.

    Args:
        income: Named sources of income.
        settings: Settings for monthly income calculations.
        sort_by: Sort method - "alpha" or "value".

    Returns:
        ListReport with one line per source and the monthly total.
    """
    amounts = {name: monthly_income(record, settings) for name, record in income.items()}
    lines = [
        ReportLine(index=index, name=name, amount=amount, kind=income_kind_of(income[name]).name)
        for index, (name, amount) in enumerate(sort_amounts(amounts, sort_by), 1)
    ]
    return ListReport(title="Income", lines=lines, total=income.total(settings))


def create_expense_report(expenses: ExpenseList, sort_by: str = "alpha") -> ListReport:
    """Create expense report.

    Args:
        expenses: Named monthly expenses.
        sort_by: Sort method - "alpha" or "value".

    Returns:
        ListReport with one line per expense and the total.
    """
    lines = [
        ReportLine(index=index, name=name, amount=amount)
        for index, (name, amount) in enumerate(sort_amounts(dict(expenses), sort_by), 1)
    ]
    return ListReport(title="Expenses", lines=lines, total=expenses.total())


def create_budget_report(
    budget: Budget,
    settings: BudgetSettings = DEFAULT_SETTINGS,
    sort_by: str = "alpha",
) -> BudgetReport:
    """Create full report for a budget.

    Args:
        budget: Budget to report on.
        settings: Settings for monthly income calculations.
        sort_by: Sort method - "alpha" or "value".

    Returns:
        BudgetReport with all calculations.
    """
    income_report = create_income_report(budget.income, settings, sort_by)
    expense_report = create_expense_report(budget.expenses, sort_by)

    return BudgetReport(
        name=budget.name,
        income=income_report,
        expenses=expense_report,
        summary=SummaryReport(
            income=income_report.total,
            expenses=expense_report.total,
            remaining=budget.total(settings),
        ),
    )
