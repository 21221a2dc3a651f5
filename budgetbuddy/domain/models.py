"""Domain type definitions for budgetbuddy.

These NewTypes provide semantic clarity and help with type checking:
- BudgetName: Name of a budget (also names its file on disk)
- IncomeName: Display name of a source of income
- ExpenseName: Display name of a monthly expense
"""

from dataclasses import dataclass
from typing import NewType

BudgetName = NewType("BudgetName", str)

IncomeName = NewType("IncomeName", str)

ExpenseName = NewType("ExpenseName", str)


@dataclass(frozen=True)
class BudgetSettings:
    """Immutable settings consumed by income calculations and validation.

    Attributes:
        overtime_threshold: Weekly hours after which wages are paid at time and a half.
        net_pay_fraction: Fraction of gross pay kept as take-home pay (wages and salary only).
        minimum_wage: Lowest hourly rate accepted when entering wages.
    """

    overtime_threshold: float = 40.0
    net_pay_fraction: float = 0.75
    minimum_wage: float = 7.25


DEFAULT_SETTINGS = BudgetSettings()
