"""Payroll period helpers. A period is a calendar month written as ``YYYY-MM``."""

import re
from datetime import date, datetime, time
from typing import Tuple

from dateutil.relativedelta import relativedelta
from django.utils import timezone

from apps.payroll.constants import PERIOD_FORMAT
from apps.payroll.exceptions import InvalidSalaryInput

PERIOD_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_period(value: str) -> date:
    """Parse ``YYYY-MM`` into the first day of that month.

    Raises:
        InvalidSalaryInput: the value is not a valid year-month
    """
    match = PERIOD_RE.match(str(value or "").strip())
    if not match:
        raise InvalidSalaryInput(f"Invalid period '{value}', expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise InvalidSalaryInput(f"Invalid period '{value}', month must be 01-12")
    return date(year, month, 1)


def format_period(month: date) -> str:
    return month.strftime(PERIOD_FORMAT)


def period_bounds(month: date) -> Tuple[datetime, datetime]:
    """Half-open [start, end) aware datetime range covering the month."""
    start = month.replace(day=1)
    end = start + relativedelta(months=1)
    tz = timezone.get_current_timezone()
    return (
        timezone.make_aware(datetime.combine(start, time.min), tz),
        timezone.make_aware(datetime.combine(end, time.min), tz),
    )
