"""Answer validators for interactive capture.

A validator takes a raw answer and raises ValidationError with a message
meant for the user. Bounded validators are built once from trusted
bounds; bad bounds are a programming error and raise
ValidatorConfigurationError at build time, never while checking answers.
"""

import math
from collections.abc import Callable
from typing import Any

from budgetbuddy.domain.errors import QuantityError, ValidationError, ValidatorConfigurationError
from budgetbuddy.domain.quantity import Integer, Money, Number, Percentage, Quantity

Validator = Callable[[Any], None]

NOT_A_KIND_MESSAGES: dict[type[Quantity], str] = {
    Number: "Value must be a number.",
    Integer: "Value must be an integer.",
    Money: "Value must be a monetary value.",
    Percentage: "Value must be a percentage.",
}


def required(answer: Any) -> None:
    """Reject missing and blank answers."""
    if answer is None or (isinstance(answer, str) and not answer.strip()):
        raise ValidationError("Value is required.")


def parse_answer(kind: type[Quantity], answer: Any) -> Quantity:
    """Parse an answer as a quantity kind, with the user-facing message on failure.

    Raises:
        ValidationError: If the answer is not of the kind.
    """
    try:
        return kind.new(answer)
    except QuantityError as e:
        raise ValidationError(NOT_A_KIND_MESSAGES[kind]) from e


def kind_validator(kind: type[Quantity]) -> Validator:
    """Build a validator accepting any answer that parses as ``kind``."""

    def validate(answer: Any) -> None:
        parse_answer(kind, answer)

    return validate


number_validator = kind_validator(Number)
integer_validator = kind_validator(Integer)
money_validator = kind_validator(Money)
percentage_validator = kind_validator(Percentage)


def _bound(kind: type[Quantity], value: Any, side: str, unbounded: float) -> Quantity:
    if value is None:
        return kind(unbounded)
    try:
        bound = kind.new(value)
    except QuantityError as e:
        raise ValidatorConfigurationError(f"{side} bound is invalid: {value!r}") from e
    if bound.is_nan():
        raise ValidatorConfigurationError(f"{side} bound is invalid: {value!r}")
    return bound


def bounded_validator(kind: type[Quantity], lower: Any = None, upper: Any = None) -> Validator:
    """Build a validator accepting answers of ``kind`` within inclusive bounds.

    Args:
        kind: Quantity kind answers must parse as.
        lower: Lowest accepted value, or None for no lower bound.
        upper: Highest accepted value, or None for no upper bound.

    Returns:
        Validator raising ValidationError that names the bound(s).

    Raises:
        ValidatorConfigurationError: If a bound is invalid, the lower bound
            exceeds the upper bound, or neither bound is set.
    """
    lower_bound = _bound(kind, lower, "lower", -math.inf)
    upper_bound = _bound(kind, upper, "upper", math.inf)

    if lower_bound > upper_bound:
        raise ValidatorConfigurationError(f"lower bound {lower_bound} exceeds upper bound {upper_bound}")
    if lower_bound.is_inf(-1) and upper_bound.is_inf(1):
        raise ValidatorConfigurationError("both bounds are unbounded")

    if upper_bound.is_inf(1):
        out_of_range = f"Value must be at least {lower_bound}."
    elif lower_bound.is_inf(-1):
        out_of_range = f"Value must be at most {upper_bound}."
    else:
        out_of_range = f"Value must be between {lower_bound} and {upper_bound}."

    def validate(answer: Any) -> None:
        quantity = parse_answer(kind, answer)
        if not lower_bound <= quantity <= upper_bound:
            raise ValidationError(out_of_range)

    return validate


def compose_validators(*validators: Validator) -> Validator:
    """Chain validators; the first failure wins."""

    def validate(answer: Any) -> None:
        for validator in validators:
            validator(answer)

    return validate


def quantity_validator(kind: type[Quantity], lower: Any = None, upper: Any = None) -> Validator:
    """Build the usual prompt validator: required, of ``kind``, and within bounds if any are set."""
    validators = [required, kind_validator(kind)]
    if lower is not None or upper is not None:
        validators.append(bounded_validator(kind, lower, upper))
    return compose_validators(*validators)
