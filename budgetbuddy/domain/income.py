"""Sources of monthly income.

Income is a closed union of five record types. Each computes its monthly
income differently:

- Wages: hourly rate and average hours per week, with time and a half
  past the overtime threshold, reduced to net pay
- Salary: annual salary reduced to net pay
- Sales: price per item times average items sold per month
- Commissions: commission rate times the total value of sales
- Supplemental: a flat monthly amount

Records are stored without a type tag. Decoding matches the stored fields
against each shape in a fixed priority order, so that order must never
change or previously saved budgets will load as the wrong type.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, assert_never

from budgetbuddy.domain.errors import IncomeDecodeError
from budgetbuddy.domain.models import DEFAULT_SETTINGS, BudgetSettings, IncomeName
from budgetbuddy.domain.quantity import Integer, Money, Number, Percentage, Quantity

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12
OVERTIME_MULTIPLIER = 1.5


@dataclass(frozen=True)
class Wages:
    """Paid a fixed rate every hour, with overtime.

    At $9 an hour for 50 hours a week with a 40 hour threshold, gross pay is
    $360 plus $135 overtime a week, or $2,145 a month before net pay.
    """

    rate: Money
    hours: Number


@dataclass(frozen=True)
class Salary:
    """Paid a fixed amount per year."""

    salary: Money


@dataclass(frozen=True)
class Sales:
    """Paid a fixed price per item sold or task completed."""

    rate: Money
    items: Integer


@dataclass(frozen=True)
class Commissions:
    """Paid a share of the value of each sale.

    At 6% on two homes sold for $25,000 and $75,000 the month earns $6,000.
    """

    rate: Percentage
    volume: tuple[Money, ...] = ()


@dataclass(frozen=True)
class Supplemental:
    """A flat amount received every month."""

    money: Money


Income = Wages | Salary | Sales | Commissions | Supplemental


def monthly_income(income: Income, settings: BudgetSettings = DEFAULT_SETTINGS) -> Money:
    """Calculate the monthly income of a single record.

    Args:
        income: Income record.
        settings: Overtime threshold and net pay fraction for wages and salary.

    Returns:
        Monthly income (NaN or infinite when any input is).
    """
    match income:
        case Wages(rate=rate, hours=hours):
            threshold = settings.overtime_threshold
            if hours.value > threshold:
                normal_hours, overtime_hours = threshold, hours.value - threshold
            else:
                normal_hours, overtime_hours = hours.value, 0.0
            weekly = rate.value * normal_hours + OVERTIME_MULTIPLIER * rate.value * overtime_hours
            return Money(settings.net_pay_fraction * WEEKS_PER_YEAR * weekly / MONTHS_PER_YEAR)
        case Salary(salary=salary):
            return Money(settings.net_pay_fraction * salary.value / MONTHS_PER_YEAR)
        case Sales(rate=rate, items=items):
            return Money(rate.value * items.value)
        case Commissions(rate=rate, volume=volume):
            return Money(rate.value * sum(sale.value for sale in volume))
        case Supplemental(money=money):
            return Money(money.value)
        case _:
            assert_never(income)


class IncomeList(dict[IncomeName, Income]):
    """Named sources of income."""

    def total(self, settings: BudgetSettings = DEFAULT_SETTINGS) -> Money:
        """Sum the monthly income of every source (zero when empty)."""
        return sum((monthly_income(income, settings) for income in self.values()), Money(0.0))

    def sorted_names(self) -> list[IncomeName]:
        return sorted(self)


# Encoding


def encode_income(income: Income) -> dict[str, Any]:
    """Encode an income record as the plain fields of its own shape."""
    match income:
        case Wages(rate=rate, hours=hours):
            return {"rate": rate.value, "hours": hours.value}
        case Salary(salary=salary):
            return {"salary": salary.value}
        case Sales(rate=rate, items=items):
            return {"rate": rate.value, "items": items.value}
        case Commissions(rate=rate, volume=volume):
            return {"rate": rate.value, "volume": [sale.value for sale in volume]}
        case Supplemental(money=money):
            return {"money": money.value}
        case _:
            assert_never(income)


def encode_income_list(incomes: Mapping[IncomeName, Income]) -> dict[str, dict[str, Any]]:
    return {name: encode_income(income) for name, income in incomes.items()}


# Decoding


def _is_real(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _has_reals(fields: Mapping[str, Any], *names: str) -> bool:
    return all(_is_real(fields.get(name)) for name in names)


def _decode_wages(fields: Mapping[str, Any]) -> Wages | None:
    if not _has_reals(fields, "rate", "hours"):
        return None
    return Wages(rate=Money.new(fields["rate"]), hours=Number.new(fields["hours"]))


def _decode_salary(fields: Mapping[str, Any]) -> Salary | None:
    if not _has_reals(fields, "salary"):
        return None
    return Salary(salary=Money.new(fields["salary"]))


def _decode_sales(fields: Mapping[str, Any]) -> Sales | None:
    if not _has_reals(fields, "rate", "items"):
        return None
    return Sales(rate=Money.new(fields["rate"]), items=Integer.new(fields["items"]))


def _decode_commissions(fields: Mapping[str, Any]) -> Commissions | None:
    volume = fields.get("volume")
    if not _has_reals(fields, "rate") or not isinstance(volume, list) or not volume:
        return None
    if not all(_is_real(sale) for sale in volume):
        return None
    # Stored rates are already fractions; Percentage.new would divide by 100 again
    return Commissions(
        rate=Percentage(fields["rate"]),
        volume=tuple(Money.new(sale) for sale in volume),
    )


def _decode_supplemental(fields: Mapping[str, Any]) -> Supplemental | None:
    if not _has_reals(fields, "money"):
        return None
    return Supplemental(money=Money.new(fields["money"]))


# Priority order is part of the file format: "rate" is shared by three shapes.
_DECODERS = (
    _decode_wages,
    _decode_salary,
    _decode_sales,
    _decode_commissions,
    _decode_supplemental,
)


def decode_income(name: str, fields: Any) -> Income:
    """Decode one stored income entry using the first shape it satisfies.

    Args:
        name: Entry name, used in the error message.
        fields: Stored fields of the entry.

    Returns:
        Decoded income record.

    Raises:
        IncomeDecodeError: If the entry matches none of the income shapes.
    """
    if isinstance(fields, Mapping):
        for decoder in _DECODERS:
            income = decoder(fields)
            if income is not None:
                return income
    raise IncomeDecodeError(name, fields)


def decode_income_list(entries: Any) -> IncomeList:
    """Decode a stored mapping of income entries. One bad entry fails the whole list.

    Raises:
        IncomeDecodeError: If the mapping or any entry is unrecognized.
    """
    if not isinstance(entries, Mapping):
        raise IncomeDecodeError("income", entries)
    incomes = IncomeList()
    for name, fields in entries.items():
        incomes[IncomeName(name)] = decode_income(name, fields)
    return incomes


# Catalog for interactive capture


@dataclass(frozen=True)
class IncomeField:
    """One field to capture for an income type.

    Attributes:
        name: Field name on the record (and in the stored form).
        label: Prompt label.
        kind: Quantity kind the answer parses as.
        lower: Smallest accepted answer, in the kind's own text or native form.
        repeated: Whether the field is a list captured one item at a time.
        at_least_minimum_wage: Whether the configured minimum wage replaces ``lower``.
    """

    name: str
    label: str
    kind: type[Quantity]
    lower: Any = None
    repeated: bool = False
    at_least_minimum_wage: bool = False

    def lower_bound(self, settings: BudgetSettings = DEFAULT_SETTINGS) -> Any:
        if self.at_least_minimum_wage:
            return settings.minimum_wage
        return self.lower


@dataclass(frozen=True)
class IncomeKind:
    """An income type and the fields needed to build it, in prompt order."""

    name: str
    record: type
    fields: tuple[IncomeField, ...] = ()

    def build(self, answers: Mapping[str, Any]) -> Income:
        """Build the record from answers keyed by field name."""
        values = {
            f.name: tuple(answers[f.name]) if f.repeated else answers[f.name] for f in self.fields
        }
        income: Income = self.record(**values)
        return income


INCOME_KINDS: dict[str, IncomeKind] = {
    kind.name: kind
    for kind in (
        IncomeKind(
            "Wages",
            Wages,
            (
                IncomeField("rate", "Hourly Rate", Money, at_least_minimum_wage=True),
                IncomeField("hours", "Average Hours Per Week", Number, lower=1),
            ),
        ),
        IncomeKind("Salary", Salary, (IncomeField("salary", "Salary", Money, lower=0.01),)),
        IncomeKind(
            "Sales",
            Sales,
            (
                IncomeField("rate", "Selling Price", Money, lower=0.01),
                IncomeField("items", "Average Number of Items Sold", Integer, lower=1),
            ),
        ),
        IncomeKind(
            "Commissions",
            Commissions,
            (
                IncomeField("rate", "Percentage", Percentage, lower=0),
                IncomeField("volume", "Item", Money, lower=0.01, repeated=True),
            ),
        ),
        IncomeKind("Supplemental", Supplemental, (IncomeField("money", "Monthly Amount", Money, lower=0.01),)),
    )
}


def income_kind_of(income: Income) -> IncomeKind:
    """Look up the catalog entry for a record."""
    for kind in INCOME_KINDS.values():
        if isinstance(income, kind.record):
            return kind
    raise TypeError(f"unknown income type {type(income).__name__}")
