"""Human-friendly quantities: numbers, integers, money and percentages.

Every kind wraps a single float so that infinity and NaN flow through
arithmetic untouched. Each kind:
- Parses loosely formatted text (signs, thousands separators, "$", "%")
- Accepts native ints and floats, other quantities, and None
- Renders back to en-US style text through str()

Construction goes through one fallible core, ``new``, which raises
QuantityFormatError for text outside the kind's grammar and
QuantityTypeError for unsupported sources. ``make`` wraps ``new`` for
trusted literals (defaults, hardcoded bounds) and turns failures into a
RuntimeError.
"""

import math
import operator
import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Self

from budgetbuddy.domain.errors import QuantityError, QuantityFormatError, QuantityTypeError

_SIGN = r"(?P<sign>[+\-]?)"
_PLAIN = r"\d+"
_GROUPED = r"\d{1,3}(?:,\d{3})+"


def _value_of(other: Any) -> float | None:
    """Return the float behind a quantity or real number, None for anything else."""
    if isinstance(other, Quantity):
        return other.value
    if isinstance(other, bool):
        return None
    if isinstance(other, (int, float)):
        return float(other)
    return None


def _digits(value: float) -> tuple[str, str]:
    """Split the magnitude of a finite float into integral and fractional digits.

    Uses the shortest round-tripping representation, so 0.1 yields ("0", "1")
    rather than the binary expansion.
    """
    text = format(Decimal(repr(abs(value))), "f")
    integral, _, fraction = text.partition(".")
    return integral, fraction.rstrip("0")


def _grouped(value: float) -> str:
    """Render a finite float with comma-grouped integral digits and its fraction, if any."""
    integral, fraction = _digits(value)
    sign = "-" if value < 0 else ""
    text = f"{sign}{int(integral):,}"
    if fraction:
        text += f".{fraction}"
    return text


@dataclass(frozen=True)
class Quantity:
    """A real value with text parsing and formatting.

    Instantiating a kind directly (``Money(12.5)``) wraps an already-known
    value without any parsing; use ``new`` for anything that came from a user.
    """

    value: float

    kind: ClassVar[str] = "Quantity"

    # Tried in order; each pattern captures "sign" and "amount".
    _patterns: ClassVar[tuple[re.Pattern[str], ...]] = ()

    _nan_text: ClassVar[str] = "?"
    _inf_text: ClassVar[str] = "∞"
    _neg_inf_text: ClassVar[str] = "-∞"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise QuantityTypeError(self.value, self.kind)
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def new(cls, source: Any) -> Self:
        """Build a quantity from text, a native number, another quantity or None.

        Raises:
            QuantityFormatError: If text does not match the kind's grammar.
            QuantityTypeError: If the source type is not supported.
        """
        if source is None:
            return cls.from_none()
        if isinstance(source, Quantity):
            return cls.from_quantity(source)
        if isinstance(source, bool):
            raise QuantityTypeError(source, cls.kind)
        if isinstance(source, int):
            return cls.from_int(source)
        if isinstance(source, float):
            return cls.from_float(source)
        if isinstance(source, str):
            return cls.from_text(source)
        raise QuantityTypeError(source, cls.kind)

    @classmethod
    def make(cls, source: Any) -> Self:
        """Build a quantity from a trusted literal. Never use with user input."""
        try:
            return cls.new(source)
        except QuantityError as e:
            raise RuntimeError(f"invalid {cls.kind} literal {source!r}") from e

    @classmethod
    def from_none(cls) -> Self:
        return cls(math.nan)

    @classmethod
    def from_quantity(cls, other: "Quantity") -> Self:
        return cls(other.value)

    @classmethod
    def from_int(cls, value: int) -> Self:
        return cls(float(value))

    @classmethod
    def from_float(cls, value: float) -> Self:
        return cls(value)

    @classmethod
    def from_text(cls, text: str) -> Self:
        candidate = text.strip()
        for pattern in cls._patterns:
            match = pattern.fullmatch(candidate)
            if match:
                quantity = cls._from_match(match)
                # Digit runs too long for a float overflow to infinity
                if quantity.is_inf():
                    break
                return quantity
        raise QuantityFormatError(text, cls.kind)

    @classmethod
    def _from_match(cls, match: re.Match[str]) -> Self:
        return cls(float(match["sign"] + match["amount"].replace(",", "")))

    def is_inf(self, sign: int = 0) -> bool:
        """Report infinity: any sign when sign is 0, else only the matching sign."""
        if not math.isinf(self.value):
            return False
        if sign > 0:
            return self.value > 0
        if sign < 0:
            return self.value < 0
        return True

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def _special_text(self) -> str | None:
        if math.isnan(self.value):
            return self._nan_text
        if math.isinf(self.value):
            return self._inf_text if self.value > 0 else self._neg_inf_text
        return None

    def __str__(self) -> str:
        return self._special_text() or _grouped(self.value)

    def __float__(self) -> float:
        return self.value

    def _combine(self, other: Any, op: Callable[[float, float], float], reflected: bool = False) -> Self:
        other_value = _value_of(other)
        if other_value is None:
            return NotImplemented
        if reflected:
            return type(self)(op(other_value, self.value))
        return type(self)(op(self.value, other_value))

    def __add__(self, other: Any) -> Self:
        return self._combine(other, operator.add)

    def __radd__(self, other: Any) -> Self:
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other: Any) -> Self:
        return self._combine(other, operator.sub)

    def __rsub__(self, other: Any) -> Self:
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> Self:
        return self._combine(other, operator.mul)

    def __rmul__(self, other: Any) -> Self:
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> Self:
        return self._combine(other, operator.truediv)

    def __neg__(self) -> Self:
        return type(self)(-self.value)

    def __abs__(self) -> Self:
        return type(self)(abs(self.value))

    def _compare(self, other: Any, op: Callable[[float, float], bool]) -> bool:
        other_value = _value_of(other)
        if other_value is None:
            return NotImplemented
        return op(self.value, other_value)

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)


class Number(Quantity):
    """An unrestricted real number, e.g. "12,345.5"."""

    kind = "Number"
    _patterns = (
        re.compile(rf"{_SIGN}(?P<amount>{_PLAIN}(?:\.\d+)?)"),
        re.compile(rf"{_SIGN}(?P<amount>{_GROUPED}(?:\.\d+)?)"),
    )

    @classmethod
    def from_none(cls) -> Self:
        return cls(0.0)


class Integer(Quantity):
    """A whole number. Every value is truncated toward zero; fractional text is rejected."""

    kind = "Integer"
    _patterns = (
        re.compile(rf"{_SIGN}(?P<amount>{_PLAIN})"),
        re.compile(rf"{_SIGN}(?P<amount>{_GROUPED})"),
    )

    def __post_init__(self) -> None:
        super().__post_init__()
        # modf keeps infinities and NaN intact, unlike math.trunc; adding 0.0 turns -0.0 into 0.0
        _, integral = math.modf(self.value)
        object.__setattr__(self, "value", integral + 0.0)

    def __str__(self) -> str:
        return self._special_text() or f"{self.value:,.0f}"

    def ordinal(self) -> str:
        """Render as an ordinal word ("1st", "22nd", "113th"); empty when negative."""
        if not math.isfinite(self.value) or self.value < 0:
            return ""
        number = int(self.value)
        if number % 100 in (11, 12, 13):
            suffix = "th"
        else:
            suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
        return f"{number}{suffix}"


class Money(Quantity):
    """A dollar amount, e.g. "1234.50", "-$1,234.50". Cents are optional but always two digits."""

    kind = "Money"
    _patterns = (
        re.compile(rf"{_SIGN}(?P<amount>{_PLAIN}(?:\.\d{{2}})?)"),
        re.compile(rf"{_SIGN}(?P<amount>{_GROUPED}(?:\.\d{{2}})?)"),
        re.compile(rf"{_SIGN}\$(?P<amount>{_PLAIN}(?:\.\d{{2}})?)"),
        re.compile(rf"{_SIGN}\$(?P<amount>{_GROUPED}(?:\.\d{{2}})?)"),
    )
    _nan_text = "$?"
    _inf_text = "$∞"
    _neg_inf_text = "-$∞"

    def dollars(self) -> "Money":
        """Whole dollars, truncated toward zero."""
        _, integral = math.modf(self.value)
        return Money(integral)

    def cents(self) -> "Money":
        """Fractional dollars, carrying the sign of the amount."""
        fraction, _ = math.modf(self.value)
        return Money(fraction)

    def __str__(self) -> str:
        special = self._special_text()
        if special:
            return special
        sign = "-" if self.value < 0 else ""
        return f"{sign}${abs(self.value):,.2f}"


class Percentage(Quantity):
    """A fraction shown as a percentage: "6%" is stored as 0.06.

    Native numbers are read as percentage points, so ``Percentage.new(6)``
    is also 0.06.
    """

    kind = "Percentage"
    _patterns = (
        re.compile(rf"{_SIGN}(?P<amount>{_PLAIN}(?:\.\d+)?)%"),
        re.compile(rf"{_SIGN}(?P<amount>{_GROUPED}(?:\.\d+)?)%"),
    )
    _nan_text = "?%"
    _inf_text = "∞%"
    _neg_inf_text = "-∞%"

    @classmethod
    def from_int(cls, value: int) -> Self:
        return cls(value / 100)

    @classmethod
    def from_float(cls, value: float) -> Self:
        return cls(value / 100)

    @classmethod
    def _from_match(cls, match: re.Match[str]) -> Self:
        return cls(float(match["sign"] + match["amount"].replace(",", "")) / 100)

    def __str__(self) -> str:
        special = self._special_text()
        if special:
            return special
        # Rounding hides binary noise such as 0.07 * 100 == 7.000000000000001
        return f"{_grouped(round(self.value * 100, 10))}%"


QUANTITY_KINDS: dict[str, type[Quantity]] = {
    kind.kind: kind for kind in (Number, Integer, Money, Percentage)
}
