"""Injectable bonus and attendance policies used by salary recalculation.

Rates, amounts and thresholds are parameters; nothing here hard-codes a
business number. The defaults pay no bonus and deduct nothing until the
payroll configuration says otherwise.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Tuple

from apps.payroll.constants import BOOK_FIELDS, BOOK_NO_BONUS_FIELD, BOOK_TERM_FIELDS
from apps.payroll.exceptions import InvalidSalaryInput
from libs.decimals import DECIMAL_ZERO, to_decimal


def _non_negative(value, name: str) -> Decimal:
    value = to_decimal(value)
    if value < 0:
        raise InvalidSalaryInput(f"{name} must not be negative")
    return value


def _frozen_mapping(values: Mapping, name: str) -> Mapping:
    return MappingProxyType({key: _non_negative(amount, f"{name}[{key}]") for key, amount in values.items()})


@dataclass(frozen=True)
class AttendanceDeductionPolicy:
    """Linear attendance deductions.

    Late hours up to ``late_grace_hours`` are free; every hour beyond costs
    ``late_hour_rate``. Each absent day costs ``absent_day_rate``.
    """

    late_hour_rate: Decimal = DECIMAL_ZERO
    absent_day_rate: Decimal = DECIMAL_ZERO
    late_grace_hours: Decimal = DECIMAL_ZERO

    def __post_init__(self):
        for name in ("late_hour_rate", "absent_day_rate", "late_grace_hours"):
            object.__setattr__(self, name, _non_negative(getattr(self, name), name))

    def late_deduction(self, hours) -> Decimal:
        billable = to_decimal(hours) - self.late_grace_hours
        if billable <= 0:
            return DECIMAL_ZERO
        return billable * self.late_hour_rate

    def absence_deduction(self, days) -> Decimal:
        days = to_decimal(days)
        if days <= 0:
            return DECIMAL_ZERO
        return days * self.absent_day_rate


@dataclass(frozen=True)
class BookBonusPolicy:
    """Bonus paid per counted account-opening book.

    ``amounts`` maps a book bucket field (``book_1_5`` ... ``book_no_bonus``)
    to the bonus paid per book in that bucket. ``thresholds`` maps an account
    term (years, as Decimal) to the minimum collection an opening must reach
    before it counts in that term's bucket instead of ``book_no_bonus``.
    """

    amounts: Mapping[str, Decimal] = field(default_factory=dict)
    thresholds: Mapping[Decimal, Decimal] = field(default_factory=dict)

    def __post_init__(self):
        unknown = set(self.amounts) - set(BOOK_FIELDS)
        if unknown:
            raise InvalidSalaryInput(f"Unknown book buckets: {', '.join(sorted(unknown))}")
        object.__setattr__(self, "amounts", _frozen_mapping(self.amounts, "amounts"))
        thresholds = {to_decimal(term): amount for term, amount in self.thresholds.items()}
        object.__setattr__(self, "thresholds", _frozen_mapping(thresholds, "thresholds"))

    def __call__(self, entry) -> Decimal:
        bonus = DECIMAL_ZERO
        for name in BOOK_FIELDS:
            bonus += getattr(entry, name) * self.amounts.get(name, DECIMAL_ZERO)
        return bonus

    def threshold_for(self, term) -> Decimal:
        return self.thresholds.get(to_decimal(term), DECIMAL_ZERO)

    def bucket_for(self, term, collection_amount) -> str:
        """Pick the book bucket an account opening is counted in."""
        term = to_decimal(term)
        bucket = BOOK_TERM_FIELDS.get(term)
        if bucket is None:
            raise InvalidSalaryInput(f"Unknown account term: {term}")
        if to_decimal(collection_amount) < self.threshold_for(term):
            return BOOK_NO_BONUS_FIELD
        return bucket


def no_bonus(entry) -> Decimal:
    return DECIMAL_ZERO


def policies_from_config(config: Mapping) -> Tuple[BookBonusPolicy, AttendanceDeductionPolicy]:
    """Build both policies from a PayrollConfig JSON document.

    Expected shape::

        {
            "attendance": {"late_hour_rate": 50, "absent_day_rate": 500, "late_grace_hours": 0},
            "book_bonus": {"amounts": {"book_3": 100}, "thresholds": {"3": 1000}}
        }

    Missing sections fall back to zero rates.
    """
    attendance = config.get("attendance") or {}
    book_bonus = config.get("book_bonus") or {}
    return (
        BookBonusPolicy(
            amounts=book_bonus.get("amounts") or {},
            thresholds=book_bonus.get("thresholds") or {},
        ),
        AttendanceDeductionPolicy(
            late_hour_rate=attendance.get("late_hour_rate", 0),
            absent_day_rate=attendance.get("absent_day_rate", 0),
            late_grace_hours=attendance.get("late_grace_hours", 0),
        ),
    )
