"""Serializers for projected salary rows and editable entry inputs."""

from rest_framework import serializers

from apps.payroll.models import CommissionRate, SalarySheetEntry
from apps.payroll.services.salary_entry import EDITABLE_FIELDS


def money():
    return serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)


class SalaryRowSerializer(serializers.Serializer):
    """Read-only serializer for a recalculated salary row."""

    id = serializers.UUIDField(read_only=True)
    salary_sheet = serializers.IntegerField(source="salary_sheet_id", read_only=True)
    employee = serializers.IntegerField(source="employee_id", read_only=True)
    employee_code = serializers.CharField(source="employee.code", read_only=True)
    employee_name = serializers.CharField(source="employee.fullname", read_only=True)
    designation = serializers.CharField(source="employee.designation", read_only=True)
    branch = serializers.IntegerField(source="branch.id", read_only=True)
    branch_code = serializers.CharField(source="branch.code", read_only=True)
    branch_name = serializers.CharField(source="branch.name", read_only=True)

    # Inputs
    basic_salary = money()
    commission_type = serializers.CharField(read_only=True)
    commission_type_override = serializers.CharField(read_only=True)
    applied_commission_type = serializers.CharField(read_only=True)
    book_1_5 = serializers.IntegerField(read_only=True)
    book_3 = serializers.IntegerField(read_only=True)
    book_5 = serializers.IntegerField(read_only=True)
    book_8 = serializers.IntegerField(read_only=True)
    book_10 = serializers.IntegerField(read_only=True)
    book_12 = serializers.IntegerField(read_only=True)
    book_no_bonus = serializers.IntegerField(read_only=True)
    input_late_hours = money()
    input_absent_days = money()
    deduction_cash_advance = money()
    deduction_misconduct = money()
    deduction_unlawful = money()
    deduction_tours = money()
    deduction_others = money()

    # Ledger totals
    own_somity_count = serializers.IntegerField(read_only=True)
    own_somity_collection = money()
    office_somity_count = serializers.IntegerField(read_only=True)
    office_somity_collection = money()
    center_count = serializers.IntegerField(read_only=True)
    center_collection = money()
    total_loan_collection = money()

    # Derived
    total_books = serializers.IntegerField(read_only=True)
    total_collection = money()
    deduction_late = money()
    deduction_abs = money()
    total_deductions = money()
    commission = money()
    bonus = money()
    final_salary = money()


class SalaryEntryUpdateSerializer(serializers.ModelSerializer):
    """Update serializer for the editable inputs of a salary entry.

    Amounts and counts must be zero or positive. A commission type override
    and a stored commission type must name a configured tier. An empty
    override clears it.
    """

    class Meta:
        model = SalarySheetEntry
        fields = list(EDITABLE_FIELDS)

    def _configured_tier(self, value):
        value = (value or "").strip()
        if value and not CommissionRate.objects.filter(code=value).exists():
            raise serializers.ValidationError(f"Commission type '{value}' is not configured")
        return value

    def validate_commission_type_override(self, value):
        return self._configured_tier(value)

    def validate_commission_type(self, value):
        return self._configured_tier(value)
