"""Management command to generate a salary sheet for a month."""

from datetime import date

from dateutil.relativedelta import relativedelta
from django.core.management.base import BaseCommand, CommandError

from apps.hrm.models import Branch
from apps.payroll.exceptions import PayrollError, SalarySheetConflict
from apps.payroll.services.salary_sheet import SalarySheetService
from apps.payroll.utils.period import format_period, parse_period


class Command(BaseCommand):
    """Management command to generate a salary sheet."""

    help = "Generate a salary sheet for a month and a set of branches"

    def add_arguments(self, parser):
        parser.add_argument(
            "--month",
            type=str,
            help="Month in YYYY-MM format (e.g., 2024-01). If not provided, generates for the current month.",
        )
        parser.add_argument(
            "--branch",
            action="append",
            dest="branches",
            default=[],
            help="Branch code to include; repeat for several branches. Defaults to all active branches.",
        )
        parser.add_argument(
            "--override",
            action="store_true",
            help="Delete existing salary sheets of this month that cover the branches and regenerate",
        )

    def handle(self, *args, **options):
        month_str = options.get("month")
        override = options.get("override", False)

        if month_str:
            try:
                target_month = parse_period(month_str)
            except PayrollError:
                raise CommandError("Invalid month format. Use YYYY-MM (e.g., 2024-01)")
        else:
            target_month = date.today() + relativedelta(day=1)

        codes = options.get("branches") or []
        if codes:
            branches = Branch.objects.filter(code__in=codes)
            unknown = set(codes) - set(branches.values_list("code", flat=True))
            if unknown:
                raise CommandError(f"Unknown branch code(s): {', '.join(sorted(unknown))}")
        else:
            branches = Branch.objects.filter(is_active=True)

        branch_ids = list(branches.values_list("id", flat=True))
        if not branch_ids:
            raise CommandError("No branches to generate a salary sheet for.")

        self.stdout.write(f"Target month: {format_period(target_month)}")

        try:
            sheet = SalarySheetService.generate(target_month, branch_ids, override=override)
        except SalarySheetConflict as exc:
            raise CommandError(f"{exc}. Use --override flag to delete and regenerate.") from exc
        except PayrollError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(
            self.style.SUCCESS(
                f"\nSuccessfully generated salary sheet for {format_period(target_month)}:\n"
                f"  - Sheet code: {sheet.code}\n"
                f"  - Branches: {len(branch_ids)}\n"
                f"  - Total employees: {sheet.total_employees}"
            )
        )
