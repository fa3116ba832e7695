"""Domain errors raised by the salary computation engine."""


class PayrollError(Exception):
    """Base class for payroll computation errors."""


class CommissionConfigurationError(PayrollError):
    """A commission type has no entry in the commission rate table.

    This is a master-data problem: a row must never silently fall back to a
    zero commission.
    """

    def __init__(self, commission_type, available=()):
        self.commission_type = commission_type
        self.available = tuple(sorted(available))
        super().__init__(
            f"Commission type '{commission_type}' is not configured "
            f"(configured types: {', '.join(self.available) or 'none'})"
        )


class InvalidSalaryInput(PayrollError, ValueError):
    """Negative amounts or counts, or a malformed payroll period."""


class SalarySheetConflict(PayrollError):
    """A sheet already exists for the month and one of the requested branches."""


class AccountScanError(PayrollError):
    """An account opening cannot be counted on the salary sheet."""
