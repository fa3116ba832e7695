from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.payroll.api.serializers import PayrollConfigSerializer
from apps.payroll.models import PayrollConfig


class CurrentPayrollConfigView(APIView):
    """API view to retrieve the current payroll configuration.

    This endpoint is read-only. Configuration editing is done through Django Admin.
    """

    @extend_schema(
        summary="Get current payroll configuration",
        description="Retrieve the active payroll configuration: attendance deduction rates, book bonus table and the fallback commission type",
        tags=["Payroll: Configuration"],
        responses={200: PayrollConfigSerializer},
        examples=[
            OpenApiExample(
                "Success - Current Config",
                value={
                    "success": True,
                    "data": {
                        "id": 1,
                        "version": 1,
                        "config": {
                            "default_commission_type": "A",
                            "attendance": {"late_hour_rate": 50, "absent_day_rate": 500, "late_grace_hours": 0},
                            "book_bonus": {"amounts": {"book_3": 100}, "thresholds": {"3": 1000}},
                        },
                        "created_at": "2025-01-01T00:00:00Z",
                        "updated_at": "2025-01-01T00:00:00Z",
                    },
                    "error": None,
                },
                response_only=True,
                status_codes=["200"],
            ),
            OpenApiExample(
                "Error - No Config Found",
                value={"success": False, "data": None, "error": {"detail": "No payroll configuration found"}},
                response_only=True,
                status_codes=["404"],
            ),
        ],
    )
    def get(self, request):
        config = PayrollConfig.get_active()

        if not config:
            return Response({"detail": "No payroll configuration found"}, status=status.HTTP_404_NOT_FOUND)

        serializer = PayrollConfigSerializer(config)
        return Response(serializer.data, status=status.HTTP_200_OK)
