from django.contrib import admin

from .models import Branch, Center, Employee


@admin.register(Branch)
class BranchAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "phone", "is_active"]
    list_filter = ["is_active"]
    search_fields = ["code", "name"]


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    """Employee master data is maintained through Django Admin."""

    list_display = ["code", "fullname", "branch", "designation", "base_salary", "commission_type", "is_active"]
    list_filter = ["branch", "commission_type", "is_active"]
    search_fields = ["code", "fullname"]
    list_select_related = ["branch"]


@admin.register(Center)
class CenterAdmin(admin.ModelAdmin):
    list_display = ["center_code", "center_name", "branch", "assigned_employee", "center_type"]
    list_filter = ["branch", "center_type"]
    search_fields = ["center_name", "=center_code"]
    list_select_related = ["branch", "assigned_employee"]
