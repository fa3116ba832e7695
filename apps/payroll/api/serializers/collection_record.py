from rest_framework import serializers

from apps.payroll.models import CenterCollectionRecord


class CenterCollectionRecordSerializer(serializers.ModelSerializer):
    """Serializer for ledger records of center collections."""

    employee_code = serializers.CharField(source="employee.code", read_only=True, default=None)

    class Meta:
        model = CenterCollectionRecord
        fields = [
            "id",
            "branch",
            "employee",
            "employee_code",
            "center_code",
            "amount",
            "loan_amount",
            "collection_type",
            "collected_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "employee_code", "created_at", "updated_at"]
        extra_kwargs = {"employee": {"required": True, "allow_null": False}}

    def validate(self, attrs):
        branch = attrs.get("branch", getattr(self.instance, "branch", None))
        employee = attrs.get("employee", getattr(self.instance, "employee", None))
        if employee is not None and branch is not None and employee.branch_id != branch.pk:
            raise serializers.ValidationError({"employee": "Employee does not belong to the selected branch"})
        return attrs


class CenterReportQuerySerializer(serializers.Serializer):
    month = serializers.CharField(help_text="Month in YYYY-MM format")
    branch = serializers.IntegerField(required=False, min_value=1)


class CenterReportRowSerializer(serializers.Serializer):
    branch_id = serializers.IntegerField()
    center_code = serializers.IntegerField()
    center_name = serializers.CharField()
    collection_type = serializers.CharField()
    total_amount = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_loan_amount = serializers.DecimalField(max_digits=16, decimal_places=2)
    visit_count = serializers.IntegerField()
