from django.core.validators import MinValueValidator
from django.db import models
from django.db.models.functions import Lower
from django.utils import timezone

from apps.payroll.constants import AccountTerm
from libs.models import BaseModel


class AccountOpening(BaseModel):
    """Deposit account opened by an employee.

    Once scanned onto a salary sheet the account is counted as a book for
    its opener and cannot be counted again.
    """

    account_code = models.CharField(max_length=50, unique=True, verbose_name="Account Code")
    term = models.CharField(max_length=5, choices=AccountTerm.choices, verbose_name="Term (years)")
    collection_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name="Collection Amount",
    )
    opened_by = models.ForeignKey(
        "hrm.Employee",
        on_delete=models.SET_NULL,
        null=True,
        related_name="account_openings",
        verbose_name="Opened By",
    )
    branch = models.ForeignKey(
        "hrm.Branch",
        on_delete=models.CASCADE,
        related_name="account_openings",
        verbose_name="Branch",
    )
    opening_date = models.DateField(default=timezone.localdate, verbose_name="Opening Date")
    is_counted = models.BooleanField(default=False, verbose_name="Counted")
    counted_month = models.DateField(null=True, blank=True, verbose_name="Counted Month")
    salary_sheet = models.ForeignKey(
        "payroll.SalarySheet",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="counted_accounts",
        verbose_name="Salary Sheet",
    )
    counted_bucket = models.CharField(max_length=20, blank=True, default="", verbose_name="Counted Bucket")

    class Meta:
        verbose_name = "Account Opening"
        verbose_name_plural = "Account Openings"
        db_table = "payroll_account_opening"
        ordering = ["-opening_date", "account_code"]
        constraints = [
            models.UniqueConstraint(
                Lower("account_code"),
                name="payroll_account_opening_code_ci_unique",
                violation_error_message="An account with this code already exists",
            ),
        ]

    def __str__(self):
        return self.account_code

    def save(self, *args, **kwargs):
        self.account_code = self.account_code.strip()
        super().save(*args, **kwargs)
