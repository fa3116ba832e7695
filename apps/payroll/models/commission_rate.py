from django.core.validators import MinValueValidator
from django.db import models

from libs.models import BaseModel


class CommissionRateQuerySet(models.QuerySet):
    def as_rate_table(self):
        """Snapshot the tiers as an immutable rate table."""
        from apps.payroll.services.commission_rates import CommissionStructure, build_rate_table

        return build_rate_table(
            {rate.code: CommissionStructure(own=rate.own_percent, office=rate.office_percent) for rate in self}
        )


class CommissionRate(BaseModel):
    """Commission tier: percentages paid on own and office center collections.

    Tier codes are free text so new tiers can be added from the admin without
    a code change.
    """

    code = models.CharField(max_length=20, unique=True, verbose_name="Code")
    own_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="Own center commission (%)",
    )
    office_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name="Office center commission (%)",
    )
    description = models.CharField(max_length=255, blank=True, default="", verbose_name="Description")

    objects = CommissionRateQuerySet.as_manager()

    class Meta:
        verbose_name = "Commission Rate"
        verbose_name_plural = "Commission Rates"
        db_table = "payroll_commission_rate"
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} ({self.own_percent}% / {self.office_percent}%)"

    def save(self, *args, **kwargs):
        self.code = self.code.strip()
        super().save(*args, **kwargs)
