import django_filters

from apps.payroll.constants import AccountTerm
from apps.payroll.models import AccountOpening

from .period import filter_by_period


class AccountOpeningFilterSet(django_filters.FilterSet):
    """FilterSet for AccountOpening model."""

    branch = django_filters.NumberFilter(field_name="branch_id")
    opened_by = django_filters.NumberFilter(field_name="opened_by_id")
    term = django_filters.ChoiceFilter(choices=AccountTerm.choices)
    is_counted = django_filters.BooleanFilter()
    account_code__icontains = django_filters.CharFilter(field_name="account_code", lookup_expr="icontains")
    opening_month = django_filters.CharFilter(method="filter_opening_month")

    class Meta:
        model = AccountOpening
        fields = ["branch", "opened_by", "term", "is_counted", "account_code__icontains", "opening_month"]

    def filter_opening_month(self, queryset, name, value):
        return filter_by_period(queryset, "opening_date", value)
