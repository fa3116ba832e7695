"""ViewSet for SalarySheet model."""

from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.payroll.api.exceptions import PayrollErrorMixin
from apps.payroll.api.filtersets import SalarySheetFilterSet
from apps.payroll.api.serializers import (
    AccountScanSerializer,
    AccountOpeningSerializer,
    BranchSummarySerializer,
    LeaderboardQuerySerializer,
    RowsQuerySerializer,
    SalaryRowSerializer,
    SalarySheetCreateSerializer,
    SalarySheetListSerializer,
    SalarySheetSerializer,
)
from apps.payroll.models import AccountOpening, SalarySheet
from apps.payroll.services.account_scanning import scan_account_opening
from apps.payroll.services.reports import rank_top_performers, summarize_branches
from apps.payroll.services.salary_sheet import SalarySheetService

TAGS = ["Payroll: Salary Sheets"]

ROW_EXAMPLE = {
    "id": "0b0e7c1e-8f59-4a51-9d43-3f8f1ac9b4a1",
    "salary_sheet": 1,
    "employee": 7,
    "employee_code": "E007",
    "employee_name": "Rahim Uddin",
    "designation": "Field Officer",
    "branch": 2,
    "branch_code": "DHK",
    "branch_name": "Dhaka",
    "basic_salary": "20000.00",
    "commission_type": "A",
    "commission_type_override": "",
    "applied_commission_type": "A",
    "own_somity_count": 2,
    "own_somity_collection": "1000.00",
    "office_somity_count": 1,
    "office_somity_collection": "500.00",
    "total_collection": "1500.00",
    "commission": "100.00",
    "bonus": "0.00",
    "total_deductions": "500.00",
    "final_salary": "19600.00",
}


@extend_schema_view(
    list=extend_schema(summary="List salary sheets", tags=TAGS),
    retrieve=extend_schema(summary="Get salary sheet details", tags=TAGS),
    destroy=extend_schema(summary="Delete salary sheet", tags=TAGS),
    create=extend_schema(
        summary="Generate salary sheet",
        description="Create a salary sheet for a month with one entry per active employee of the selected branches. "
        "With override, existing sheets of the month covering any of the branches are replaced.",
        tags=TAGS,
        request=SalarySheetCreateSerializer,
        responses={201: SalarySheetSerializer},
        examples=[
            OpenApiExample(
                "Request - Generate sheet",
                value={"month": "2025-01", "branch_ids": [1, 2], "override": False},
                request_only=True,
            ),
            OpenApiExample(
                "Error - Sheet already exists",
                value={
                    "success": False,
                    "data": None,
                    "error": {
                        "type": "client_error",
                        "errors": [
                            {
                                "code": "conflict",
                                "detail": "A salary sheet for 2025-01 already covers one of the branches",
                                "attr": None,
                            }
                        ],
                    },
                },
                response_only=True,
                status_codes=["409"],
            ),
        ],
    ),
)
class SalarySheetViewSet(
    PayrollErrorMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Salary sheets with their projected rows and reports.

    Rows are recalculated on every request from the stored inputs, the
    month's collection ledger and the current commission tiers.
    """

    queryset = SalarySheet.objects.prefetch_related("branches")
    serializer_class = SalarySheetSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = SalarySheetFilterSet
    ordering_fields = ["month", "created_at", "total_employees"]
    ordering = ["-month"]

    def filter_queryset(self, queryset):
        # Query params of detail actions (e.g. rows?branch=) are not sheet filters
        if self.action != "list":
            return queryset
        return super().filter_queryset(queryset)

    def get_serializer_class(self):
        if self.action == "list":
            return SalarySheetListSerializer
        elif self.action == "create":
            return SalarySheetCreateSerializer
        return SalarySheetSerializer

    def create(self, request, *args, **kwargs):
        serializer = SalarySheetCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        sheet = SalarySheetService.generate(
            serializer.validated_data["month"],
            serializer.validated_data["branch_ids"],
            override=serializer.validated_data["override"],
            user=request.user,
        )
        return Response(SalarySheetSerializer(sheet).data, status=status.HTTP_201_CREATED)

    def perform_destroy(self, instance):
        instance.counted_accounts.update(is_counted=False, counted_month=None, salary_sheet=None, counted_bucket="")
        instance.delete()

    def _build_rows(self, sheet, branch=None):
        return SalarySheetService.build_rows(sheet, branch_ids=None if branch is None else [branch])

    @extend_schema(
        summary="Get salary rows",
        description="Recalculated salary rows of the sheet, optionally limited to one branch",
        tags=TAGS,
        parameters=[OpenApiParameter("branch", int, description="Branch ID to limit the rows to")],
        responses={200: SalaryRowSerializer(many=True)},
        examples=[
            OpenApiExample(
                "Success - Salary rows",
                value={"success": True, "data": [ROW_EXAMPLE], "error": None},
                response_only=True,
                status_codes=["200"],
            ),
        ],
    )
    @action(detail=True, methods=["get"])
    def rows(self, request, pk=None):
        sheet = self.get_object()
        query = RowsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        rows = self._build_rows(sheet, query.validated_data.get("branch"))
        return Response(SalaryRowSerializer(rows, many=True).data)

    @extend_schema(
        summary="Get branch summary",
        description="Per-branch employee count and totals of collection, commission, bonus, deductions and final salary",
        tags=TAGS,
        responses={200: BranchSummarySerializer(many=True)},
    )
    @action(detail=True, methods=["get"])
    def summary(self, request, pk=None):
        sheet = self.get_object()
        return Response(BranchSummarySerializer(summarize_branches(self._build_rows(sheet)), many=True).data)

    @extend_schema(
        summary="Get top performers",
        tags=TAGS,
        parameters=[LeaderboardQuerySerializer],
        responses={200: SalaryRowSerializer(many=True)},
    )
    @action(detail=True, methods=["get"])
    def leaderboard(self, request, pk=None):
        sheet = self.get_object()
        query = LeaderboardQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        rows = self._build_rows(sheet, query.validated_data.get("branch"))
        top = rank_top_performers(rows, query.validated_data["metric"], query.validated_data["limit"])
        return Response(SalaryRowSerializer(top, many=True).data)

    @extend_schema(
        summary="Scan account opening",
        description="Count an account opening as a book for its opener on this sheet. "
        "Accounts below their term's collection threshold are counted without bonus.",
        tags=TAGS,
        request=AccountScanSerializer,
        responses={200: AccountOpeningSerializer},
        examples=[
            OpenApiExample("Request - Scan", value={"account_code": "ACC-1001"}, request_only=True),
            OpenApiExample(
                "Error - Already counted",
                value={
                    "success": False,
                    "data": None,
                    "error": {
                        "type": "validation_error",
                        "errors": [
                            {"code": "invalid", "detail": "Account ACC-1001 is already counted", "attr": "detail"}
                        ],
                    },
                },
                response_only=True,
                status_codes=["400"],
            ),
        ],
    )
    @action(detail=True, methods=["post"], url_path="scan-account")
    def scan_account(self, request, pk=None):
        sheet = self.get_object()
        serializer = AccountScanSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account_code = serializer.validated_data["account_code"]
        get_object_or_404(AccountOpening, account_code__iexact=account_code)
        result = scan_account_opening(sheet, account_code)
        return Response(AccountOpeningSerializer(result.account).data)
