"""Serializers for SalarySheet model."""

from rest_framework import serializers

from apps.hrm.models import Branch
from apps.payroll.exceptions import InvalidSalaryInput
from apps.payroll.models import SalarySheet
from apps.payroll.utils.period import format_period, parse_period


class BranchNestedSerializer(serializers.ModelSerializer):
    class Meta:
        model = Branch
        fields = ["id", "code", "name"]
        read_only_fields = fields


class SalarySheetListSerializer(serializers.ModelSerializer):
    """List serializer for SalarySheet."""

    month = serializers.SerializerMethodField()
    branches = BranchNestedSerializer(many=True, read_only=True)

    class Meta:
        model = SalarySheet
        fields = ["id", "code", "month", "branches", "total_employees", "created_at", "updated_at"]
        read_only_fields = fields

    def get_month(self, obj):
        """Return month in YYYY-MM format."""
        return format_period(obj.month)


class SalarySheetSerializer(SalarySheetListSerializer):
    """Detail serializer for SalarySheet including the config snapshot."""

    class Meta(SalarySheetListSerializer.Meta):
        fields = [
            "id",
            "code",
            "month",
            "branches",
            "config_snapshot",
            "total_employees",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class SalarySheetCreateSerializer(serializers.Serializer):
    """Input for generating a salary sheet."""

    month = serializers.CharField(help_text="Month in YYYY-MM format")
    branch_ids = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=False)
    override = serializers.BooleanField(default=False)

    def validate_month(self, value):
        try:
            return parse_period(value)
        except InvalidSalaryInput as exc:
            raise serializers.ValidationError(str(exc)) from exc

    def validate_branch_ids(self, value):
        value = sorted(set(value))
        found = set(Branch.objects.filter(pk__in=value).values_list("pk", flat=True))
        missing = [pk for pk in value if pk not in found]
        if missing:
            raise serializers.ValidationError(f"Unknown branches: {', '.join(str(pk) for pk in missing)}")
        return value


class AccountScanSerializer(serializers.Serializer):
    account_code = serializers.CharField(max_length=50, trim_whitespace=True)
