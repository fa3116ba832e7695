from rest_framework import serializers

from apps.payroll.constants import LeaderboardMetric


class BranchSummarySerializer(serializers.Serializer):
    branch_id = serializers.IntegerField()
    branch_code = serializers.CharField()
    branch_name = serializers.CharField()
    employee_count = serializers.IntegerField()
    total_collection = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_loan_collection = serializers.DecimalField(max_digits=16, decimal_places=2)
    commission = serializers.DecimalField(max_digits=16, decimal_places=2)
    bonus = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_deductions = serializers.DecimalField(max_digits=16, decimal_places=2)
    final_salary = serializers.DecimalField(max_digits=16, decimal_places=2)


class LeaderboardQuerySerializer(serializers.Serializer):
    metric = serializers.ChoiceField(choices=LeaderboardMetric.choices, default=LeaderboardMetric.TOTAL_COLLECTION)
    limit = serializers.IntegerField(min_value=1, max_value=100, default=10)
    branch = serializers.IntegerField(required=False, min_value=1)


class RowsQuerySerializer(serializers.Serializer):
    branch = serializers.IntegerField(required=False, min_value=1)
