from drf_spectacular.utils import OpenApiExample, extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.filters import OrderingFilter, SearchFilter

from apps.payroll.api.serializers import CommissionRateSerializer
from apps.payroll.models import CommissionRate


@extend_schema_view(
    list=extend_schema(
        summary="List commission tiers",
        tags=["Payroll: Configuration"],
        examples=[
            OpenApiExample(
                "Success - Commission tiers",
                value={
                    "success": True,
                    "data": {
                        "count": 1,
                        "next": None,
                        "previous": None,
                        "results": [
                            {
                                "id": 1,
                                "code": "A",
                                "own_percent": "8.00",
                                "office_percent": "4.00",
                                "description": "",
                                "created_at": "2025-01-01T00:00:00Z",
                                "updated_at": "2025-01-01T00:00:00Z",
                            }
                        ],
                    },
                    "error": None,
                },
                response_only=True,
                status_codes=["200"],
            ),
        ],
    ),
    retrieve=extend_schema(summary="Get commission tier", tags=["Payroll: Configuration"]),
    create=extend_schema(summary="Create commission tier", tags=["Payroll: Configuration"]),
    update=extend_schema(summary="Update commission tier", tags=["Payroll: Configuration"]),
    partial_update=extend_schema(summary="Partially update commission tier", tags=["Payroll: Configuration"]),
    destroy=extend_schema(summary="Delete commission tier", tags=["Payroll: Configuration"]),
)
class CommissionRateViewSet(viewsets.ModelViewSet):
    """Commission tiers, addressed by their code.

    Changes take effect on the next read of any salary sheet since rows are
    recalculated against the live tiers.
    """

    queryset = CommissionRate.objects.all()
    serializer_class = CommissionRateSerializer
    lookup_field = "code"
    filter_backends = [SearchFilter, OrderingFilter]
    search_fields = ["code", "description"]
    ordering_fields = ["code", "created_at"]
    ordering = ["code"]
