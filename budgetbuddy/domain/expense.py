"""Monthly expenses: a flat mapping of names to amounts."""

from collections.abc import Mapping
from typing import Any

from budgetbuddy.domain.errors import DecodeError
from budgetbuddy.domain.models import ExpenseName
from budgetbuddy.domain.quantity import Money


class ExpenseList(dict[ExpenseName, Money]):
    """Named monthly expenses."""

    def total(self) -> Money:
        """Sum every expense (zero when empty)."""
        return sum(self.values(), Money(0.0))

    def sorted_names(self) -> list[ExpenseName]:
        return sorted(self)


def encode_expense_list(expenses: Mapping[ExpenseName, Money]) -> dict[str, float]:
    """Encode expenses as plain numbers, never as display text."""
    return {name: amount.value for name, amount in expenses.items()}


def decode_expense_list(entries: Any) -> ExpenseList:
    """Decode a stored mapping of expense amounts.

    Raises:
        DecodeError: If the mapping or any amount is not a number.
    """
    if not isinstance(entries, Mapping):
        raise DecodeError(f"expenses must be a mapping, not {type(entries).__name__}")
    expenses = ExpenseList()
    for name, amount in entries.items():
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise DecodeError(f"expense {name!r} must be a number, not {amount!r}")
        expenses[ExpenseName(name)] = Money.new(amount)
    return expenses
