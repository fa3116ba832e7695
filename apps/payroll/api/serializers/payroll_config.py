from rest_framework import serializers

from apps.payroll.models import PayrollConfig


class PayrollConfigSerializer(serializers.ModelSerializer):
    """Read-only serializer for the current payroll configuration.

    ``config`` holds ``default_commission_type``, the ``attendance`` rates
    and the ``book_bonus`` amounts and thresholds.
    """

    class Meta:
        model = PayrollConfig
        fields = ["id", "version", "config", "created_at", "updated_at"]
        read_only_fields = fields
