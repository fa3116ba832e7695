# Generated manually

import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


def amount_field(verbose_name):
    return models.DecimalField(
        decimal_places=2,
        default=0,
        max_digits=12,
        validators=[django.core.validators.MinValueValidator(0)],
        verbose_name=verbose_name,
    )


def count_field(verbose_name):
    return models.PositiveIntegerField(default=0, verbose_name=verbose_name)


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("hrm", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CommissionRate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("code", models.CharField(max_length=20, unique=True, verbose_name="Code")),
                (
                    "own_percent",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=5,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Own center commission (%)",
                    ),
                ),
                (
                    "office_percent",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=5,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Office center commission (%)",
                    ),
                ),
                ("description", models.CharField(blank=True, default="", max_length=255, verbose_name="Description")),
            ],
            options={
                "verbose_name": "Commission Rate",
                "verbose_name_plural": "Commission Rates",
                "db_table": "payroll_commission_rate",
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="PayrollConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("config", models.JSONField(verbose_name="Payroll Configuration")),
                ("version", models.PositiveIntegerField(default=1, verbose_name="Version")),
            ],
            options={
                "verbose_name": "Payroll Configuration",
                "verbose_name_plural": "Payroll Configurations",
                "db_table": "payroll_config",
                "ordering": ["-version"],
            },
        ),
        migrations.CreateModel(
            name="SalarySheet",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("code", models.CharField(blank=True, max_length=50, unique=True, verbose_name="Code")),
                (
                    "month",
                    models.DateField(db_index=True, help_text="First day of the salary month", verbose_name="Month"),
                ),
                (
                    "config_snapshot",
                    models.JSONField(
                        default=dict,
                        help_text="Snapshot of payroll configuration for this sheet",
                        verbose_name="Payroll Config Snapshot",
                    ),
                ),
                ("total_employees", models.PositiveIntegerField(default=0, verbose_name="Total Employees")),
                (
                    "branches",
                    models.ManyToManyField(related_name="salary_sheets", to="hrm.branch", verbose_name="Branches"),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="created_salary_sheets",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Created By",
                    ),
                ),
            ],
            options={
                "verbose_name": "Salary Sheet",
                "verbose_name_plural": "Salary Sheets",
                "db_table": "payroll_salary_sheet",
                "ordering": ["-month", "-created_at"],
                "indexes": [models.Index(fields=["-created_at"], name="salary_sheet_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="SalarySheetEntry",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("basic_salary", amount_field("Basic Salary")),
                ("commission_type", models.CharField(blank=True, default="", max_length=20, verbose_name="Commission Type")),
                (
                    "commission_type_override",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Row-level tier that wins over the employee's tier",
                        max_length=20,
                        verbose_name="Commission Type Override",
                    ),
                ),
                ("book_1_5", count_field("Books 1.5")),
                ("book_3", count_field("Books 3")),
                ("book_5", count_field("Books 5")),
                ("book_8", count_field("Books 8")),
                ("book_10", count_field("Books 10")),
                ("book_12", count_field("Books 12")),
                ("book_no_bonus", count_field("Books without bonus")),
                ("input_late_hours", amount_field("Late Hours")),
                ("input_absent_days", amount_field("Absent Days")),
                ("deduction_cash_advance", amount_field("Cash Advance")),
                ("deduction_misconduct", amount_field("Misconduct")),
                ("deduction_unlawful", amount_field("Unlawful Act")),
                ("deduction_tours", amount_field("Tours")),
                ("deduction_others", amount_field("Others")),
                (
                    "employee",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="salary_entries",
                        to="hrm.employee",
                        verbose_name="Employee",
                    ),
                ),
                (
                    "salary_sheet",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="entries",
                        to="payroll.salarysheet",
                        verbose_name="Salary Sheet",
                    ),
                ),
            ],
            options={
                "verbose_name": "Salary Sheet Entry",
                "verbose_name_plural": "Salary Sheet Entries",
                "db_table": "payroll_salary_sheet_entry",
                "ordering": ["employee__code"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("salary_sheet", "employee"), name="payroll_entry_sheet_employee_uniq"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="CenterCollectionRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("center_code", models.PositiveIntegerField(db_index=True, verbose_name="Center Code")),
                (
                    "amount",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=14,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Savings Collection",
                    ),
                ),
                (
                    "loan_amount",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=14,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Loan Collection",
                    ),
                ),
                (
                    "collection_type",
                    models.CharField(
                        choices=[("OWN", "Own"), ("OFFICE", "Office")], max_length=10, verbose_name="Type"
                    ),
                ),
                (
                    "collected_at",
                    models.DateTimeField(
                        db_index=True, default=django.utils.timezone.now, verbose_name="Collected At"
                    ),
                ),
                (
                    "branch",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="collection_records",
                        to="hrm.branch",
                        verbose_name="Branch",
                    ),
                ),
                (
                    "employee",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="collection_records",
                        to="hrm.employee",
                        verbose_name="Employee",
                    ),
                ),
            ],
            options={
                "verbose_name": "Center Collection Record",
                "verbose_name_plural": "Center Collection Records",
                "db_table": "payroll_center_collection_record",
                "ordering": ["-collected_at"],
                "indexes": [
                    models.Index(fields=["employee", "collected_at"], name="collection_employee_date_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="AccountOpening",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("account_code", models.CharField(max_length=50, unique=True, verbose_name="Account Code")),
                (
                    "term",
                    models.CharField(
                        choices=[
                            ("1.5", "1.5 years"),
                            ("3", "3 years"),
                            ("5", "5 years"),
                            ("8", "8 years"),
                            ("10", "10 years"),
                            ("12", "12 years"),
                        ],
                        max_length=5,
                        verbose_name="Term (years)",
                    ),
                ),
                (
                    "collection_amount",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=14,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Collection Amount",
                    ),
                ),
                (
                    "opening_date",
                    models.DateField(default=django.utils.timezone.localdate, verbose_name="Opening Date"),
                ),
                ("is_counted", models.BooleanField(default=False, verbose_name="Counted")),
                ("counted_month", models.DateField(blank=True, null=True, verbose_name="Counted Month")),
                (
                    "counted_bucket",
                    models.CharField(blank=True, default="", max_length=20, verbose_name="Counted Bucket"),
                ),
                (
                    "branch",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="account_openings",
                        to="hrm.branch",
                        verbose_name="Branch",
                    ),
                ),
                (
                    "opened_by",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="account_openings",
                        to="hrm.employee",
                        verbose_name="Opened By",
                    ),
                ),
                (
                    "salary_sheet",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="counted_accounts",
                        to="payroll.salarysheet",
                        verbose_name="Salary Sheet",
                    ),
                ),
            ],
            options={
                "verbose_name": "Account Opening",
                "verbose_name_plural": "Account Openings",
                "db_table": "payroll_account_opening",
                "ordering": ["-opening_date", "account_code"],
            },
        ),
    ]
