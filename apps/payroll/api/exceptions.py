"""Translation of payroll domain errors into API errors."""

from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError

from apps.payroll.exceptions import (
    AccountScanError,
    CommissionConfigurationError,
    InvalidSalaryInput,
    PayrollError,
    SalarySheetConflict,
)


class PayrollConflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = _("The request conflicts with the current payroll data.")
    default_code = "conflict"


class CommissionNotConfigured(PayrollConflict):
    default_detail = _("Commission type is not configured.")
    default_code = "commission_type_not_configured"


def to_api_exception(exc: PayrollError) -> APIException:
    if isinstance(exc, CommissionConfigurationError):
        return CommissionNotConfigured(str(exc))
    if isinstance(exc, SalarySheetConflict):
        return PayrollConflict(str(exc))
    if isinstance(exc, (InvalidSalaryInput, AccountScanError)):
        return ValidationError({"detail": str(exc)})
    return APIException(str(exc))


class PayrollErrorMixin:
    """Let views raise payroll domain errors and answer with the matching API error."""

    def handle_exception(self, exc):
        if isinstance(exc, PayrollError):
            exc = to_api_exception(exc)
        return super().handle_exception(exc)
