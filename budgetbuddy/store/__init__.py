"""Budget store layer - provides persistence for the application.

This module re-exports all public store functions for easy importing.
"""

from budgetbuddy.store.files import (
    BUDGET_SUFFIX,
    budget_exists,
    get_budget_path,
    load_budget,
    save_budget,
)

__all__ = [
    "BUDGET_SUFFIX",
    "budget_exists",
    "get_budget_path",
    "load_budget",
    "save_budget",
]
