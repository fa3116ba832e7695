import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("payroll", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="accountopening",
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower("account_code"),
                name="payroll_account_opening_code_ci_unique",
                violation_error_message="An account with this code already exists",
            ),
        ),
    ]
