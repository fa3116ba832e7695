from rest_framework import serializers

from apps.payroll.models import CommissionRate


class CommissionRateSerializer(serializers.ModelSerializer):
    """Serializer for commission tiers. Percentages must be zero or positive."""

    class Meta:
        model = CommissionRate
        fields = ["id", "code", "own_percent", "office_percent", "description", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_code(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Commission type code cannot be blank")
        return value
