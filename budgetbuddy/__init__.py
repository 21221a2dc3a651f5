"""budgetbuddy - build and review a personal monthly budget."""

__version__ = "0.1.0"
