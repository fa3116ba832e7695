from django.db import transaction
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.filters import OrderingFilter, SearchFilter

from apps.payroll.api.filtersets import AccountOpeningFilterSet
from apps.payroll.api.serializers import AccountOpeningSerializer
from apps.payroll.models import AccountOpening
from apps.payroll.services.account_scanning import release_account_opening

TAGS = ["Payroll: Account Openings"]


@extend_schema_view(
    list=extend_schema(summary="List account openings", tags=TAGS),
    retrieve=extend_schema(summary="Get account opening", tags=TAGS),
    create=extend_schema(summary="Register account opening", tags=TAGS),
    update=extend_schema(summary="Update account opening", tags=TAGS),
    partial_update=extend_schema(summary="Partially update account opening", tags=TAGS),
    destroy=extend_schema(
        summary="Delete account opening",
        description="A counted account is first removed from its opener's book count on the salary sheet",
        tags=TAGS,
    ),
)
class AccountOpeningViewSet(viewsets.ModelViewSet):
    queryset = AccountOpening.objects.all()
    serializer_class = AccountOpeningSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter, SearchFilter]
    filterset_class = AccountOpeningFilterSet
    ordering_fields = ["opening_date", "account_code", "collection_amount"]
    ordering = ["-opening_date", "account_code"]
    search_fields = ["account_code"]

    def perform_destroy(self, instance):
        with transaction.atomic():
            release_account_opening(instance)
            instance.delete()
