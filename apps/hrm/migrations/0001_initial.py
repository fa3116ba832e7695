# Generated manually

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Branch",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200, verbose_name="Branch name")),
                ("code", models.CharField(max_length=50, unique=True, verbose_name="Branch code")),
                ("address", models.TextField(blank=True, verbose_name="Address")),
                ("phone", models.CharField(blank=True, max_length=20, verbose_name="Phone number")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
            ],
            options={
                "verbose_name": "Branch",
                "verbose_name_plural": "Branches",
                "db_table": "hrm_branch",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Employee",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("code", models.CharField(max_length=50, unique=True, verbose_name="Employee code")),
                ("fullname", models.CharField(max_length=200, verbose_name="Full name")),
                ("designation", models.CharField(blank=True, max_length=100, verbose_name="Designation")),
                (
                    "base_salary",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(0)],
                        verbose_name="Base salary",
                    ),
                ),
                ("commission_type", models.CharField(default="A", max_length=20, verbose_name="Commission type")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                (
                    "branch",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="employees",
                        to="hrm.branch",
                        verbose_name="Branch",
                    ),
                ),
            ],
            options={
                "verbose_name": "Employee",
                "verbose_name_plural": "Employees",
                "db_table": "hrm_employee",
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="Center",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("center_code", models.PositiveIntegerField(verbose_name="Center code")),
                ("center_name", models.CharField(max_length=200, verbose_name="Center name")),
                (
                    "center_type",
                    models.CharField(
                        blank=True,
                        choices=[("OWN", "Own"), ("OFFICE", "Office")],
                        max_length=10,
                        verbose_name="Center type",
                    ),
                ),
                (
                    "assigned_employee",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="assigned_centers",
                        to="hrm.employee",
                        verbose_name="Assigned employee",
                    ),
                ),
                (
                    "branch",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="centers",
                        to="hrm.branch",
                        verbose_name="Branch",
                    ),
                ),
            ],
            options={
                "verbose_name": "Center",
                "verbose_name_plural": "Centers",
                "db_table": "hrm_center",
                "ordering": ["branch", "center_code"],
            },
        ),
        migrations.AddConstraint(
            model_name="center",
            constraint=models.UniqueConstraint(fields=("branch", "center_code"), name="hrm_center_branch_code_uniq"),
        ),
    ]
