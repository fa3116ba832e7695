from django.db import models
from django.utils.translation import gettext_lazy as _

from libs.models import BaseModel

from ..constants import CenterType


class Branch(BaseModel):
    """Microfinance branch office"""

    name = models.CharField(max_length=200, verbose_name=_("Branch name"))
    code = models.CharField(max_length=50, unique=True, verbose_name=_("Branch code"))
    address = models.TextField(blank=True, verbose_name=_("Address"))
    phone = models.CharField(max_length=20, blank=True, verbose_name=_("Phone number"))
    is_active = models.BooleanField(default=True, verbose_name=_("Active"))

    class Meta:
        verbose_name = _("Branch")
        verbose_name_plural = _("Branches")
        db_table = "hrm_branch"
        ordering = ["name"]

    def __str__(self):
        return f"{self.code} - {self.name}"


class Center(BaseModel):
    """Somity (savings group) where field staff collect savings and loan installments.

    Attributes:
        center_code: Numeric code printed on the center's collection book, unique per branch
        center_name: Display name of the somity
        branch: Branch the center belongs to
        assigned_employee: Field officer currently responsible for the center
        center_type: Whether the center is managed as OWN or OFFICE; optional for
            centers imported before the classification existed
    """

    center_code = models.PositiveIntegerField(verbose_name=_("Center code"))
    center_name = models.CharField(max_length=200, verbose_name=_("Center name"))
    branch = models.ForeignKey(
        Branch,
        on_delete=models.CASCADE,
        related_name="centers",
        verbose_name=_("Branch"),
    )
    assigned_employee = models.ForeignKey(
        "hrm.Employee",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assigned_centers",
        verbose_name=_("Assigned employee"),
    )
    center_type = models.CharField(
        max_length=10,
        choices=CenterType.choices,
        blank=True,
        verbose_name=_("Center type"),
    )

    class Meta:
        verbose_name = _("Center")
        verbose_name_plural = _("Centers")
        db_table = "hrm_center"
        ordering = ["branch", "center_code"]
        constraints = [
            models.UniqueConstraint(fields=["branch", "center_code"], name="hrm_center_branch_code_uniq"),
        ]

    def __str__(self):
        return f"{self.center_code} - {self.center_name}"
