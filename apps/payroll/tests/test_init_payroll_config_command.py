from io import StringIO

import pytest
from django.core.management import call_command
from django.test import TestCase

from apps.payroll.models import CommissionRate, PayrollConfig


@pytest.mark.django_db
class InitPayrollConfigCommandTest(TestCase):
    """Test cases for init_payroll_config management command"""

    def test_command_creates_config_and_tiers(self):
        out = StringIO()

        call_command("init_payroll_config", stdout=out)

        self.assertEqual(PayrollConfig.objects.count(), 1)
        config = PayrollConfig.objects.first()
        self.assertEqual(config.version, 1)
        self.assertIn("attendance", config.config)
        self.assertIn("book_bonus", config.config)
        self.assertNotIn("commission_rates", config.config)
        self.assertEqual(config.config["default_commission_type"], "A")

        self.assertEqual(
            sorted(CommissionRate.objects.values_list("code", "own_percent", "office_percent")),
            [("A", 8, 4), ("B", 10, 6), ("C", 8, 6)],
        )
        self.assertIn("Successfully created payroll configuration v1", out.getvalue())

    def test_command_without_reset_keeps_edited_tiers(self):
        PayrollConfig.objects.create(config={"test": "data"})
        CommissionRate.objects.create(code="A", own_percent=9, office_percent=5)

        call_command("init_payroll_config", stdout=StringIO())

        self.assertEqual(PayrollConfig.objects.count(), 2)
        self.assertEqual(PayrollConfig.get_active().version, 2)
        self.assertEqual(CommissionRate.objects.get(code="A").own_percent, 9)
        self.assertEqual(CommissionRate.objects.count(), 3)

    def test_command_with_reset(self):
        PayrollConfig.objects.create(config={"test": "data"})
        PayrollConfig.objects.create(config={"test": "data2"})
        CommissionRate.objects.create(code="A", own_percent=9, office_percent=5)
        CommissionRate.objects.create(code="Z", own_percent=1, office_percent=1)

        call_command("init_payroll_config", reset=True, stdout=StringIO())

        self.assertEqual(PayrollConfig.objects.count(), 1)
        self.assertEqual(PayrollConfig.objects.first().version, 1)
        self.assertEqual(CommissionRate.objects.get(code="A").own_percent, 8)
        self.assertFalse(CommissionRate.objects.filter(code="Z").exists())
