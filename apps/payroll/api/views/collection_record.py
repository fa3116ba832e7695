from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiExample, extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.payroll.api.exceptions import PayrollErrorMixin
from apps.payroll.api.filtersets import CenterCollectionRecordFilterSet
from apps.payroll.api.serializers import (
    CenterCollectionRecordSerializer,
    CenterReportQuerySerializer,
    CenterReportRowSerializer,
)
from apps.payroll.models import CenterCollectionRecord
from apps.payroll.services.center_report import summarize_centers
from apps.payroll.utils.period import parse_period

TAGS = ["Payroll: Center Collections"]


@extend_schema_view(
    list=extend_schema(summary="List center collection records", tags=TAGS),
    retrieve=extend_schema(summary="Get center collection record", tags=TAGS),
    create=extend_schema(
        summary="Record a center collection",
        tags=TAGS,
        examples=[
            OpenApiExample(
                "Request - Own center collection",
                value={
                    "branch": 1,
                    "employee": 7,
                    "center_code": 12,
                    "amount": "1500.00",
                    "loan_amount": "300.00",
                    "collection_type": "OWN",
                    "collected_at": "2025-01-15T10:00:00+06:00",
                },
                request_only=True,
            ),
        ],
    ),
    update=extend_schema(summary="Update center collection record", tags=TAGS),
    partial_update=extend_schema(summary="Partially update center collection record", tags=TAGS),
    destroy=extend_schema(summary="Delete center collection record", tags=TAGS),
)
class CenterCollectionRecordViewSet(PayrollErrorMixin, viewsets.ModelViewSet):
    """Collection ledger. Salary rows pick up changes on their next read."""

    queryset = CenterCollectionRecord.objects.select_related("employee")
    serializer_class = CenterCollectionRecordSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = CenterCollectionRecordFilterSet
    ordering_fields = ["collected_at", "center_code", "amount"]
    ordering = ["-collected_at"]

    @extend_schema(
        summary="Get center report",
        description="Savings, loan and visit totals per branch, center and collection type for a month",
        tags=TAGS,
        parameters=[CenterReportQuerySerializer],
        responses={200: CenterReportRowSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="center-report")
    def center_report(self, request):
        query = CenterReportQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        month = parse_period(query.validated_data["month"])
        rows = summarize_centers(month, branch_id=query.validated_data.get("branch"))
        return Response(CenterReportRowSerializer(rows, many=True).data)
