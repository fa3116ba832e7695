from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.payroll.constants import CollectionType
from libs.models import BaseModel


class CenterCollectionRecordQuerySet(models.QuerySet):
    def for_period(self, start, end):
        return self.filter(collected_at__gte=start, collected_at__lt=end)

    def as_ledger(self):
        """Convert to CollectionRecord values for aggregation."""
        from apps.payroll.services.ledger_aggregation import CollectionRecord

        return [
            CollectionRecord(
                id=record.pk,
                branch_id=record.branch_id,
                employee_id=record.employee_id,
                center_code=record.center_code,
                amount=record.amount,
                collection_type=record.collection_type,
                loan_amount=record.loan_amount,
                collected_at=record.collected_at,
            )
            for record in self
        ]


class CenterCollectionRecord(BaseModel):
    """Savings (and optional loan) amount collected at a center by an employee.

    Records are the ledger behind the somity figures of salary rows. Editing
    or deleting one changes the next projection of the sheet.
    """

    branch = models.ForeignKey(
        "hrm.Branch",
        on_delete=models.CASCADE,
        related_name="collection_records",
        verbose_name="Branch",
    )
    employee = models.ForeignKey(
        "hrm.Employee",
        on_delete=models.SET_NULL,
        null=True,
        related_name="collection_records",
        verbose_name="Employee",
    )
    center_code = models.PositiveIntegerField(db_index=True, verbose_name="Center Code")
    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="Savings Collection",
    )
    loan_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        verbose_name="Loan Collection",
    )
    collection_type = models.CharField(max_length=10, choices=CollectionType.choices, verbose_name="Type")
    collected_at = models.DateTimeField(default=timezone.now, db_index=True, verbose_name="Collected At")

    objects = CenterCollectionRecordQuerySet.as_manager()

    class Meta:
        verbose_name = "Center Collection Record"
        verbose_name_plural = "Center Collection Records"
        db_table = "payroll_center_collection_record"
        ordering = ["-collected_at"]
        indexes = [
            models.Index(fields=["employee", "collected_at"], name="collection_employee_date_idx"),
        ]

    def __str__(self):
        return f"{self.center_code} {self.collection_type} {self.amount}"
