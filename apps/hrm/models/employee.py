from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from libs.models import BaseModel

from ..constants import DEFAULT_EMPLOYEE_COMMISSION_TYPE


class Employee(BaseModel):
    """Field officer or branch staff member paid through the monthly salary sheet.

    Attributes:
        code: Unique employee code used on collection books and account openings
        fullname: Employee's full name
        branch: Branch the employee works at; rows of employees without a branch
            drop out of salary projections
        designation: Job title shown on the salary sheet
        base_salary: Default monthly basic salary, copied into new salary entries
        commission_type: Default commission tier code (open set, see CommissionRate)
        is_active: Inactive employees are skipped when generating new sheets
    """

    code = models.CharField(max_length=50, unique=True, verbose_name=_("Employee code"))
    fullname = models.CharField(max_length=200, verbose_name=_("Full name"))
    branch = models.ForeignKey(
        "hrm.Branch",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="employees",
        verbose_name=_("Branch"),
    )
    designation = models.CharField(max_length=100, blank=True, verbose_name=_("Designation"))
    base_salary = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name=_("Base salary"),
    )
    commission_type = models.CharField(
        max_length=20,
        default=DEFAULT_EMPLOYEE_COMMISSION_TYPE,
        verbose_name=_("Commission type"),
    )
    is_active = models.BooleanField(default=True, verbose_name=_("Active"))

    class Meta:
        verbose_name = _("Employee")
        verbose_name_plural = _("Employees")
        db_table = "hrm_employee"
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} - {self.fullname}"
