"""Salary sheets and their per-employee entries."""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from apps.payroll.constants import SALARY_SHEET_CODE_PREFIX
from libs.models import BaseModel


class SalarySheet(BaseModel):
    """Monthly salary sheet covering a set of branches.

    Attributes:
        code: Unique code in format SS-YYYYMM-NNNN
        month: First day of the salary month
        branches: Branches whose employees have entries on the sheet
        config_snapshot: Snapshot of PayrollConfig used for this sheet
        total_employees: Count of entries created at generation
    """

    code = models.CharField(max_length=50, unique=True, blank=True, verbose_name="Code")
    month = models.DateField(db_index=True, verbose_name="Month", help_text="First day of the salary month")
    branches = models.ManyToManyField("hrm.Branch", related_name="salary_sheets", verbose_name="Branches")
    config_snapshot = models.JSONField(
        default=dict,
        verbose_name="Payroll Config Snapshot",
        help_text="Snapshot of payroll configuration for this sheet",
    )
    total_employees = models.PositiveIntegerField(default=0, verbose_name="Total Employees")
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_salary_sheets",
        verbose_name="Created By",
    )

    class Meta:
        verbose_name = "Salary Sheet"
        verbose_name_plural = "Salary Sheets"
        db_table = "payroll_salary_sheet"
        ordering = ["-month", "-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="salary_sheet_created_idx"),
        ]

    def __str__(self):
        return f"{self.code} - {self.month.strftime('%Y-%m')}"

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        if not self.code:
            self.code = f"{SALARY_SHEET_CODE_PREFIX}-{self.month.strftime('%Y%m')}-{str(self.pk).zfill(4)}"
            super().save(update_fields=["code"])


def _count_field(name):
    return models.PositiveIntegerField(default=0, verbose_name=name)


def _amount_field(name):
    return models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name=name,
    )


class SalarySheetEntry(BaseModel):
    """Stored inputs of one employee's salary line.

    Only identity and editable inputs are persisted. Collections, commission,
    bonus, deductions and the final salary are recalculated on every read.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    salary_sheet = models.ForeignKey(
        SalarySheet,
        on_delete=models.CASCADE,
        related_name="entries",
        verbose_name="Salary Sheet",
    )
    employee = models.ForeignKey(
        "hrm.Employee",
        on_delete=models.SET_NULL,
        null=True,
        related_name="salary_entries",
        verbose_name="Employee",
    )

    basic_salary = _amount_field("Basic Salary")
    commission_type = models.CharField(max_length=20, blank=True, default="", verbose_name="Commission Type")
    commission_type_override = models.CharField(
        max_length=20,
        blank=True,
        default="",
        verbose_name="Commission Type Override",
        help_text="Row-level tier that wins over the employee's tier",
    )

    book_1_5 = _count_field("Books 1.5")
    book_3 = _count_field("Books 3")
    book_5 = _count_field("Books 5")
    book_8 = _count_field("Books 8")
    book_10 = _count_field("Books 10")
    book_12 = _count_field("Books 12")
    book_no_bonus = _count_field("Books without bonus")

    input_late_hours = _amount_field("Late Hours")
    input_absent_days = _amount_field("Absent Days")

    deduction_cash_advance = _amount_field("Cash Advance")
    deduction_misconduct = _amount_field("Misconduct")
    deduction_unlawful = _amount_field("Unlawful Act")
    deduction_tours = _amount_field("Tours")
    deduction_others = _amount_field("Others")

    class Meta:
        verbose_name = "Salary Sheet Entry"
        verbose_name_plural = "Salary Sheet Entries"
        db_table = "payroll_salary_sheet_entry"
        ordering = ["employee__code"]
        constraints = [
            models.UniqueConstraint(fields=["salary_sheet", "employee"], name="payroll_entry_sheet_employee_uniq"),
        ]

    def __str__(self):
        return f"{self.salary_sheet_id} - {self.employee_id}"

    def to_salary_entry(self):
        """Convert the stored inputs into a SalaryEntry value."""
        from apps.payroll.services.salary_entry import EDITABLE_FIELDS, SalaryEntry

        return SalaryEntry(
            id=self.id,
            salary_sheet_id=self.salary_sheet_id,
            employee_id=self.employee_id,
            **{name: getattr(self, name) for name in EDITABLE_FIELDS},
        )

    @classmethod
    def from_salary_entry(cls, entry, **kwargs):
        """Build an unsaved row holding the entry's identity and editable inputs."""
        from apps.payroll.services.salary_entry import EDITABLE_FIELDS

        return cls(
            id=entry.id,
            salary_sheet_id=entry.salary_sheet_id,
            employee_id=entry.employee_id,
            **{name: getattr(entry, name) for name in EDITABLE_FIELDS},
            **kwargs,
        )
