"""The budget aggregate: one income list and one expense list under a name.

Pure data and transformations only; reading and writing budget files
lives in budgetbuddy.store.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from budgetbuddy.domain.errors import DecodeError
from budgetbuddy.domain.expense import ExpenseList, decode_expense_list, encode_expense_list
from budgetbuddy.domain.income import IncomeList, decode_income_list, encode_income_list
from budgetbuddy.domain.models import DEFAULT_SETTINGS, BudgetName, BudgetSettings
from budgetbuddy.domain.quantity import Money


@dataclass
class Budget:
    """A named monthly budget."""

    name: BudgetName
    income: IncomeList = field(default_factory=IncomeList)
    expenses: ExpenseList = field(default_factory=ExpenseList)

    def total(self, settings: BudgetSettings = DEFAULT_SETTINGS) -> Money:
        """Income left over after expenses (may be NaN or infinite)."""
        return self.income.total(settings) - self.expenses.total()


def create_budget(name: str) -> Budget:
    """Create an empty budget."""
    return Budget(name=BudgetName(name))


def budget_to_record(budget: Budget) -> dict[str, Any]:
    """Encode a budget as its stored record. The name is not part of the record."""
    return {
        "income": encode_income_list(budget.income),
        "expenses": encode_expense_list(budget.expenses),
    }


def budget_from_record(name: str, record: Any) -> Budget:
    """Decode a stored record into a budget.

    Args:
        name: Budget name.
        record: Decoded JSON document.

    Returns:
        Budget with both lists populated. Missing lists are empty.

    Raises:
        DecodeError: If the record or any entry has the wrong shape.
    """
    if not isinstance(record, Mapping):
        raise DecodeError(f"budget record must be a mapping, not {type(record).__name__}")

    return Budget(
        name=BudgetName(name),
        income=decode_income_list(record.get("income", {})),
        expenses=decode_expense_list(record.get("expenses", {})),
    )
