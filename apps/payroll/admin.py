from django.contrib import admin

from .models import AccountOpening, CenterCollectionRecord, CommissionRate, PayrollConfig, SalarySheet, SalarySheetEntry
from .services.account_scanning import release_account_opening


@admin.register(PayrollConfig)
class PayrollConfigAdmin(admin.ModelAdmin):
    """Admin configuration for PayrollConfig model.

    Configuration editing is done through Django Admin.
    Version field is read-only and auto-incremented.
    """

    list_display = ["version", "updated_at", "created_at"]
    readonly_fields = ["version", "created_at", "updated_at"]
    fieldsets = [
        (
            None,
            {
                "fields": ["version", "config"],
                "description": "Edit the payroll configuration JSON. Version is auto-incremented on save.",
            },
        ),
        ("Timestamps", {"fields": ["created_at", "updated_at"], "classes": ["collapse"]}),
    ]

    def has_delete_permission(self, request, obj=None):
        """Prevent deletion through admin to maintain history."""
        return False


@admin.register(CommissionRate)
class CommissionRateAdmin(admin.ModelAdmin):
    list_display = ["code", "own_percent", "office_percent", "description", "updated_at"]
    search_fields = ["code", "description"]


class SalarySheetEntryInline(admin.TabularInline):
    model = SalarySheetEntry
    extra = 0
    fields = ["employee", "basic_salary", "commission_type", "commission_type_override"]
    raw_id_fields = ["employee"]
    show_change_link = True


@admin.register(SalarySheet)
class SalarySheetAdmin(admin.ModelAdmin):
    list_display = ["code", "month", "total_employees", "created_by", "created_at"]
    list_filter = ["month"]
    search_fields = ["code"]
    readonly_fields = ["code", "config_snapshot", "total_employees", "created_at", "updated_at"]
    filter_horizontal = ["branches"]
    inlines = [SalarySheetEntryInline]


@admin.register(SalarySheetEntry)
class SalarySheetEntryAdmin(admin.ModelAdmin):
    list_display = ["salary_sheet", "employee", "basic_salary", "commission_type", "commission_type_override"]
    list_filter = ["salary_sheet"]
    search_fields = ["employee__code", "employee__fullname"]
    list_select_related = ["salary_sheet", "employee"]
    raw_id_fields = ["employee"]


@admin.register(CenterCollectionRecord)
class CenterCollectionRecordAdmin(admin.ModelAdmin):
    list_display = ["center_code", "collection_type", "branch", "employee", "amount", "loan_amount", "collected_at"]
    list_filter = ["branch", "collection_type"]
    search_fields = ["=center_code", "employee__code"]
    date_hierarchy = "collected_at"
    list_select_related = ["branch", "employee"]


@admin.register(AccountOpening)
class AccountOpeningAdmin(admin.ModelAdmin):
    list_display = ["account_code", "term", "collection_amount", "opened_by", "branch", "opening_date", "is_counted"]
    list_filter = ["branch", "term", "is_counted"]
    search_fields = ["account_code", "opened_by__code"]
    readonly_fields = ["is_counted", "counted_month", "salary_sheet", "counted_bucket"]
    list_select_related = ["branch", "opened_by"]

    def delete_model(self, request, obj):
        release_account_opening(obj)
        super().delete_model(request, obj)

    def delete_queryset(self, request, queryset):
        for account in queryset.filter(is_counted=True):
            release_account_opening(account)
        super().delete_queryset(request, queryset)
