import json
from pathlib import Path

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.payroll.models import CommissionRate, PayrollConfig


def load_default_initial_data():
    """Load default payroll configuration from initial_data file."""
    initial_data_path = Path(__file__).parent.parent.parent / "initial_data" / "default_payroll_config.json"
    with open(initial_data_path, "r") as f:
        return json.load(f)


class Command(BaseCommand):
    help = "Initialize payroll configuration and commission tiers with default initial_data"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete all existing configurations and commission tiers before creating new ones",
        )

    def handle(self, *args, **options):
        reset = options.get("reset", False)

        default_config = load_default_initial_data()
        commission_rates = default_config.pop("commission_rates", {})

        with transaction.atomic():
            if reset:
                count = PayrollConfig.objects.count()
                if count > 0:
                    PayrollConfig.objects.all().delete()
                    self.stdout.write(self.style.WARNING(f"Deleted {count} existing payroll configuration(s)"))
                deleted, _ = CommissionRate.objects.all().delete()
                if deleted:
                    self.stdout.write(self.style.WARNING(f"Deleted {deleted} existing commission tier(s)"))

            config = PayrollConfig.objects.create(config=default_config)

            # Existing tiers keep their admin-edited percentages
            created_tiers = 0
            for code, rate in commission_rates.items():
                _, created = CommissionRate.objects.get_or_create(
                    code=code,
                    defaults={"own_percent": rate["own"], "office_percent": rate["office"]},
                )
                created_tiers += int(created)

        self.stdout.write(
            self.style.SUCCESS(f"Successfully created payroll configuration v{config.version} with default initial_data")
        )

        self.stdout.write("\nConfiguration summary:")
        self.stdout.write(f"  - Commission tiers created: {created_tiers} of {len(commission_rates)}")
        self.stdout.write(f"  - Default commission type: {default_config.get('default_commission_type')}")
        self.stdout.write(f"  - Book bonus buckets: {len(default_config['book_bonus']['amounts'])}")
