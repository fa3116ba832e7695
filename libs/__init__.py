from .decimals import DECIMAL_ZERO, quantize_decimal, to_decimal
from .models import BaseModel
from .pagination import PageNumberWithSizePagination

__all__ = [
    "BaseModel",
    "DECIMAL_ZERO",
    "PageNumberWithSizePagination",
    "quantize_decimal",
    "to_decimal",
]
