from rest_framework import serializers

from apps.payroll.models import AccountOpening


class AccountOpeningSerializer(serializers.ModelSerializer):
    """Serializer for account openings. Counting state is set by scanning only."""

    class Meta:
        model = AccountOpening
        fields = [
            "id",
            "account_code",
            "term",
            "collection_amount",
            "opened_by",
            "branch",
            "opening_date",
            "is_counted",
            "counted_month",
            "salary_sheet",
            "counted_bucket",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "is_counted",
            "counted_month",
            "salary_sheet",
            "counted_bucket",
            "created_at",
            "updated_at",
        ]
        extra_kwargs = {"opened_by": {"required": True, "allow_null": False}}

    def validate_account_code(self, value):
        value = value.strip()
        duplicates = AccountOpening.objects.filter(account_code__iexact=value)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError("An account with this code already exists")
        return value

    def validate(self, attrs):
        if self.instance is not None and self.instance.is_counted:
            changed = {"term", "collection_amount", "opened_by"} & set(attrs)
            if any(attrs[name] != getattr(self.instance, name) for name in changed):
                raise serializers.ValidationError("A counted account cannot change its term, collection or opener")
        return attrs
