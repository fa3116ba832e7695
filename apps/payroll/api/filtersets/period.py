from apps.payroll.exceptions import InvalidSalaryInput
from apps.payroll.utils.period import parse_period


def filter_by_period(queryset, field_name, value):
    """Filter a date field by month in YYYY-MM format; malformed values match nothing."""
    if not value:
        return queryset
    try:
        month = parse_period(value)
    except InvalidSalaryInput:
        return queryset.none()
    return queryset.filter(**{f"{field_name}__year": month.year, f"{field_name}__month": month.month})
