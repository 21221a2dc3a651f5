"""Exception hierarchy for budgetbuddy."""

from typing import Any


class BudgetError(Exception):
    """Base class for all budgetbuddy errors."""


class QuantityError(BudgetError):
    """A quantity could not be constructed from its source."""


class QuantityFormatError(QuantityError, ValueError):
    """Text does not match the grammar of a quantity kind."""

    def __init__(self, text: str, kind: str) -> None:
        self.text = text
        self.kind = kind
        super().__init__(f"failed to parse string {text!r} as {kind}: invalid format")


class QuantityTypeError(QuantityError, TypeError):
    """A quantity was constructed from an unsupported source type."""

    def __init__(self, value: Any, kind: str) -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"failed to parse {type(value).__name__} {value!r} as {kind}: invalid type")


class ValidationError(BudgetError, ValueError):
    """An answer failed validation. The message is meant for the user."""


class ValidatorConfigurationError(BudgetError):
    """A validator was built with unusable bounds."""


class DecodeError(BudgetError, ValueError):
    """A stored record does not have the expected shape."""


class IncomeDecodeError(DecodeError):
    """A stored income entry matches none of the known income shapes."""

    def __init__(self, name: str, fields: Any) -> None:
        self.name = name
        self.fields = fields
        super().__init__(f"unrecognized income record {name!r}: {fields!r}")


class BudgetFormatError(BudgetError):
    """A budget file exists but could not be decoded."""


class StorageError(BudgetError):
    """A budget file could not be read or written."""


class ConfigError(BudgetError):
    """The configuration file holds an unusable value."""
