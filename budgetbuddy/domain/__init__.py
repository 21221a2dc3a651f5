"""Domain models and types for budgetbuddy.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from budgetbuddy.domain.models import BudgetName, BudgetSettings, ExpenseName, IncomeName
from budgetbuddy.domain.quantity import Integer, Money, Number, Percentage, Quantity

__all__ = [
    "BudgetName",
    "BudgetSettings",
    "ExpenseName",
    "IncomeName",
    "Integer",
    "Money",
    "Number",
    "Percentage",
    "Quantity",
]
