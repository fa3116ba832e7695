from django.db import models

from libs.models import BaseModel


class PayrollConfig(BaseModel):
    """Versioned payroll parameters.

    The JSON document holds the attendance deduction rates, the book bonus
    table and the fallback commission tier. A new row is written for every
    change and the highest version is the active one. Each salary sheet keeps
    a snapshot of the config it was generated with.

    Attributes:
        config: JSON document with the payroll rules
        version: Auto-incrementing version number for tracking changes
    """

    config = models.JSONField(verbose_name="Payroll Configuration")
    version = models.PositiveIntegerField(default=1, verbose_name="Version")

    class Meta:
        verbose_name = "Payroll Configuration"
        verbose_name_plural = "Payroll Configurations"
        db_table = "payroll_config"
        ordering = ["-version"]

    def __str__(self):
        return f"PayrollConfig v{self.version}"

    def save(self, *args, **kwargs):
        if not self.pk:
            latest = PayrollConfig.objects.order_by("-version").first()
            if latest:
                self.version = latest.version + 1
        super().save(*args, **kwargs)

    @classmethod
    def get_active(cls):
        return cls.objects.order_by("-version").first()
