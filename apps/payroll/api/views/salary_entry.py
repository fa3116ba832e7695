from django.db import transaction
from django.http import Http404
from drf_spectacular.utils import OpenApiExample, extend_schema, extend_schema_view
from rest_framework import mixins, viewsets
from rest_framework.response import Response

from apps.payroll.api.exceptions import PayrollErrorMixin
from apps.payroll.api.serializers import SalaryEntryUpdateSerializer, SalaryRowSerializer
from apps.payroll.models import SalarySheetEntry
from apps.payroll.services.salary_sheet import SalarySheetService


@extend_schema_view(
    retrieve=extend_schema(
        summary="Get salary row",
        description="Recalculated salary row of one entry",
        tags=["Payroll: Salary Sheets"],
        responses={200: SalaryRowSerializer},
    ),
    partial_update=extend_schema(
        summary="Edit salary entry inputs",
        description="Update editable inputs (basic salary, commission type override, book counts, attendance and "
        "manual deductions) and return the recalculated row. Derived fields cannot be written.",
        tags=["Payroll: Salary Sheets"],
        request=SalaryEntryUpdateSerializer,
        responses={200: SalaryRowSerializer},
        examples=[
            OpenApiExample(
                "Request - Re-tier and deduct",
                value={"commission_type_override": "B", "deduction_cash_advance": "500.00", "input_late_hours": "2"},
                request_only=True,
            ),
        ],
    ),
)
class SalaryEntryViewSet(PayrollErrorMixin, mixins.RetrieveModelMixin, mixins.UpdateModelMixin, viewsets.GenericViewSet):
    """Single salary entries. Reading always returns the recalculated row."""

    queryset = SalarySheetEntry.objects.select_related("salary_sheet")
    serializer_class = SalaryEntryUpdateSerializer
    http_method_names = ["get", "patch"]

    def _row_response(self, entry):
        row = SalarySheetService.build_row(entry)
        if row is None:
            # Employee or branch was removed
            raise Http404
        return Response(SalaryRowSerializer(row).data)

    def retrieve(self, request, *args, **kwargs):
        return self._row_response(self.get_object())

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = SalaryEntryUpdateSerializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            serializer.save()
            return self._row_response(instance)
