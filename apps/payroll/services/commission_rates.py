"""Commission rate table.

A rate table maps an open commission-type code (``"A"``, ``"B"``, ...) to the
percentages paid on own and office center collections. New tiers are added
through configuration alone, so codes are validated by lookup rather than
against a closed enumeration.
"""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from apps.payroll.constants import DEFAULT_COMMISSION_RATES
from apps.payroll.exceptions import CommissionConfigurationError, InvalidSalaryInput
from libs.decimals import to_decimal


@dataclass(frozen=True)
class CommissionStructure:
    """Commission percentages for one tier."""

    own: Decimal
    office: Decimal

    def __post_init__(self):
        own = to_decimal(self.own)
        office = to_decimal(self.office)
        if own < 0 or office < 0:
            raise InvalidSalaryInput("Commission percentages must not be negative")
        object.__setattr__(self, "own", own)
        object.__setattr__(self, "office", office)


RateTable = Mapping[str, CommissionStructure]


def build_rate_table(rates: Mapping) -> RateTable:
    """Build an immutable rate table snapshot.

    Args:
        rates: mapping of tier code to either a CommissionStructure or a
            ``{"own": ..., "office": ...}`` dict

    Returns:
        A read-only mapping that later edits of ``rates`` cannot affect.
    """
    table = {}
    for code, rate in rates.items():
        if not isinstance(rate, CommissionStructure):
            rate = CommissionStructure(own=rate["own"], office=rate["office"])
        table[str(code)] = rate
    return MappingProxyType(table)


def default_rate_table() -> RateTable:
    return build_rate_table(DEFAULT_COMMISSION_RATES)


def lookup_rate(rate_table: RateTable, commission_type: str) -> CommissionStructure:
    """Return the tier's rates or raise CommissionConfigurationError."""
    try:
        return rate_table[commission_type]
    except KeyError:
        raise CommissionConfigurationError(commission_type, rate_table.keys()) from None
