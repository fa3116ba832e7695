from decimal import ROUND_HALF_UP, Decimal
from typing import Union

DECIMAL_ZERO = Decimal("0.00")

Number = Union[Decimal, int, float, str, None]


def to_decimal(val: Number) -> Decimal:
    """Convert a number-like value to Decimal without going through binary floats."""
    if val is None:
        return DECIMAL_ZERO
    if isinstance(val, Decimal):
        return val
    return Decimal(str(val))


def quantize_decimal(val: Number) -> Decimal:
    return to_decimal(val).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
