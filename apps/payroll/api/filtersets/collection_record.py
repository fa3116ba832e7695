import django_filters

from apps.payroll.constants import CollectionType
from apps.payroll.models import CenterCollectionRecord

from .period import filter_by_period


class CenterCollectionRecordFilterSet(django_filters.FilterSet):
    """FilterSet for CenterCollectionRecord model.

    Provides filtering by branch, employee, center code, collection type,
    month (YYYY-MM of ``collected_at``) and a collected_at range.
    """

    branch = django_filters.NumberFilter(field_name="branch_id")
    employee = django_filters.NumberFilter(field_name="employee_id")
    center_code = django_filters.NumberFilter(field_name="center_code")
    collection_type = django_filters.ChoiceFilter(choices=CollectionType.choices)
    month = django_filters.CharFilter(method="filter_month")
    collected_at__gte = django_filters.DateTimeFilter(field_name="collected_at", lookup_expr="gte")
    collected_at__lte = django_filters.DateTimeFilter(field_name="collected_at", lookup_expr="lte")

    class Meta:
        model = CenterCollectionRecord
        fields = [
            "branch",
            "employee",
            "center_code",
            "collection_type",
            "month",
            "collected_at__gte",
            "collected_at__lte",
        ]

    def filter_month(self, queryset, name, value):
        return filter_by_period(queryset, "collected_at", value)
