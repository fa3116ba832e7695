import django_filters

from apps.payroll.models import SalarySheet

from .period import filter_by_period


class SalarySheetFilterSet(django_filters.FilterSet):
    """FilterSet for SalarySheet model.

    Provides filtering by:
    - month (year-month format YYYY-MM)
    - branch (sheets covering the branch)
    - code (exact match, icontains for partial match)
    """

    month = django_filters.CharFilter(method="filter_month")
    branch = django_filters.NumberFilter(field_name="branches", distinct=True)
    code = django_filters.CharFilter(field_name="code", lookup_expr="exact")
    code__icontains = django_filters.CharFilter(field_name="code", lookup_expr="icontains")

    class Meta:
        model = SalarySheet
        fields = ["month", "branch", "code", "code__icontains"]

    def filter_month(self, queryset, name, value):
        return filter_by_period(queryset, "month", value)
