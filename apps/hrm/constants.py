# HRM Module Constants
from django.db import models
from django.utils.translation import gettext_lazy as _

# Commission tier assigned to new employees when none is chosen
DEFAULT_EMPLOYEE_COMMISSION_TYPE = "A"


class CenterType(models.TextChoices):
    """Collection class of a somity/center."""

    OWN = "OWN", _("Own")
    OFFICE = "OFFICE", _("Office")
