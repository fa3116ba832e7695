"""Per-center collection totals for a month."""

from django.db.models import Count, DecimalField, Sum, Value
from django.db.models.functions import Coalesce

from apps.hrm.models import Center
from apps.payroll.models import CenterCollectionRecord
from apps.payroll.utils.period import period_bounds

ZERO = Value(0, output_field=DecimalField(max_digits=14, decimal_places=2))


def summarize_centers(month, branch_id=None) -> list:
    """Totals per (branch, center code, collection type) for the month.

    Args:
        month: first day of the month
        branch_id: restrict to one branch

    Returns:
        list of dicts with ``branch_id``, ``center_code``, ``center_name``,
        ``collection_type``, ``total_amount``, ``total_loan_amount`` and
        ``visit_count``, ordered by branch then center code
    """
    start, end = period_bounds(month)
    records = CenterCollectionRecord.objects.for_period(start, end)
    if branch_id is not None:
        records = records.filter(branch_id=branch_id)

    totals = (
        records.values("branch_id", "center_code", "collection_type")
        .annotate(
            total_amount=Coalesce(Sum("amount"), ZERO),
            total_loan_amount=Coalesce(Sum("loan_amount"), ZERO),
            visit_count=Count("id"),
        )
        .order_by("branch_id", "center_code", "collection_type")
    )

    names = {
        (center.branch_id, center.center_code): center.center_name
        for center in Center.objects.filter(branch_id__in={row["branch_id"] for row in totals})
    }
    return [{**row, "center_name": names.get((row["branch_id"], row["center_code"]), "")} for row in totals]
