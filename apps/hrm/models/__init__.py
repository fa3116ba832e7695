from .employee import Employee
from .organization import Branch, Center

__all__ = [
    "Branch",
    "Center",
    "Employee",
]
