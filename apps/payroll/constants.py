"""Payroll module constants and enums."""

from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.hrm.constants import CenterType

# Ledger records share the OWN/OFFICE classification of centers
CollectionType = CenterType

# Tier used when neither the entry nor the employee names one
FALLBACK_COMMISSION_TYPE = "A"

DEFAULT_COMMISSION_RATES = {
    "A": {"own": 8, "office": 4},
    "B": {"own": 10, "office": 6},
    "C": {"own": 8, "office": 6},
}

# Book buckets keyed by the account term (years) they count
BOOK_TERM_FIELDS = {
    Decimal("1.5"): "book_1_5",
    Decimal("3"): "book_3",
    Decimal("5"): "book_5",
    Decimal("8"): "book_8",
    Decimal("10"): "book_10",
    Decimal("12"): "book_12",
}
BOOK_NO_BONUS_FIELD = "book_no_bonus"
BOOK_FIELDS = (*BOOK_TERM_FIELDS.values(), BOOK_NO_BONUS_FIELD)

MANUAL_DEDUCTION_FIELDS = (
    "deduction_cash_advance",
    "deduction_misconduct",
    "deduction_unlawful",
    "deduction_tours",
    "deduction_others",
)
ATTENDANCE_DEDUCTION_FIELDS = ("deduction_late", "deduction_abs")
DEDUCTION_FIELDS = (
    "deduction_cash_advance",
    "deduction_late",
    "deduction_abs",
    "deduction_misconduct",
    "deduction_unlawful",
    "deduction_tours",
    "deduction_others",
)

# Salary sheet code format: SS-YYYYMM-<sequence>
SALARY_SHEET_CODE_PREFIX = "SS"

PERIOD_FORMAT = "%Y-%m"


class AccountTerm(models.TextChoices):
    """Deposit scheme terms (years) an account opening can be booked under."""

    TERM_1_5 = "1.5", _("1.5 years")
    TERM_3 = "3", _("3 years")
    TERM_5 = "5", _("5 years")
    TERM_8 = "8", _("8 years")
    TERM_10 = "10", _("10 years")
    TERM_12 = "12", _("12 years")


class LeaderboardMetric(models.TextChoices):
    """Salary row figures the top performers board can be ranked by."""

    TOTAL_COLLECTION = "total_collection", _("Total collection")
    COMMISSION = "commission", _("Commission")
    LOAN_COLLECTION = "total_loan_collection", _("Loan collection")
    TOTAL_BOOKS = "total_books", _("Total books")
    FINAL_SALARY = "final_salary", _("Final salary")
