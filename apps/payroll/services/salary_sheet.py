"""Salary sheet generation and projection."""

import logging
from typing import Iterable, List, Optional

from django.db import transaction

from apps.hrm.models import Branch, Employee
from apps.payroll.exceptions import InvalidSalaryInput, SalarySheetConflict
from apps.payroll.models import CenterCollectionRecord, SalarySheet, SalarySheetEntry
from apps.payroll.utils.period import format_period, period_bounds

from .grid_projection import BranchSnapshot, EmployeeSnapshot, SalaryRow, project_rows
from .payroll_rules import PayrollRules, active_config, load_payroll_rules
from .salary_entry import create_entry

logger = logging.getLogger(__name__)


def employee_snapshot(employee: Employee) -> EmployeeSnapshot:
    return EmployeeSnapshot(
        id=employee.pk,
        code=employee.code,
        fullname=employee.fullname,
        branch_id=employee.branch_id,
        base_salary=employee.base_salary,
        commission_type=employee.commission_type,
        designation=employee.designation,
    )


def branch_snapshot(branch: Branch) -> BranchSnapshot:
    return BranchSnapshot(id=branch.pk, code=branch.code, name=branch.name)


class SalarySheetService:
    """Creates salary sheets and projects their entries into salary rows."""

    @classmethod
    def generate(cls, month, branch_ids: Iterable[int], *, override: bool = False, user=None) -> SalarySheet:
        """Generate a sheet for ``month`` with one entry per active employee of the branches.

        Args:
            month: first day of the salary month
            branch_ids: branches covered by the sheet
            override: replace existing sheets of the month that share a branch
            user: user recorded as the creator

        Raises:
            InvalidSalaryInput: no branch given, or unknown branches
            SalarySheetConflict: a sheet exists and ``override`` is False
        """
        branch_ids = sorted(set(branch_ids))
        if not branch_ids:
            raise InvalidSalaryInput("At least one branch is required")
        branches = list(Branch.objects.filter(pk__in=branch_ids))
        missing = set(branch_ids) - {branch.pk for branch in branches}
        if missing:
            raise InvalidSalaryInput(f"Unknown branches: {', '.join(str(pk) for pk in sorted(missing))}")

        with transaction.atomic():
            existing = SalarySheet.objects.filter(month=month, branches__in=branch_ids).distinct()
            if existing.exists():
                if not override:
                    raise SalarySheetConflict(
                        f"A salary sheet for {format_period(month)} already covers one of the branches"
                    )
                codes = list(existing.values_list("code", flat=True))
                # Counted accounts are released with the sheet they were booked on
                for sheet in existing:
                    sheet.counted_accounts.update(
                        is_counted=False, counted_month=None, salary_sheet=None, counted_bucket=""
                    )
                SalarySheet.objects.filter(code__in=codes).delete()
                logger.info("Replaced salary sheets %s for %s", ", ".join(codes), format_period(month))

            sheet = SalarySheet.objects.create(month=month, config_snapshot=active_config(), created_by=user)
            sheet.branches.set(branches)

            employees = Employee.objects.filter(branch_id__in=branch_ids, is_active=True).order_by("code")
            rows = [
                SalarySheetEntry.from_salary_entry(
                    create_entry(sheet.pk, employee.pk, employee.base_salary, employee.commission_type)
                )
                for employee in employees
            ]
            SalarySheetEntry.objects.bulk_create(rows)
            sheet.total_employees = len(rows)
            sheet.save(update_fields=["total_employees", "updated_at"])

        logger.info(
            "Generated salary sheet %s for %s with %d entries", sheet.code, format_period(month), len(rows)
        )
        return sheet

    @classmethod
    def build_rows(
        cls,
        sheet: SalarySheet,
        *,
        branch_ids: Optional[Iterable[int]] = None,
        entries: Optional[Iterable[SalarySheetEntry]] = None,
        rules: Optional[PayrollRules] = None,
    ) -> List[SalaryRow]:
        """Recalculate the sheet's entries against the month's ledger.

        Args:
            sheet: sheet to project
            branch_ids: keep only employees of these branches
            entries: project only these entries of the sheet
            rules: rules to use instead of the sheet's snapshot and live tiers

        Raises:
            CommissionConfigurationError: an entry's tier is not configured
        """
        if entries is None:
            entries = sheet.entries.all()
        entries = list(entries)
        if rules is None:
            rules = load_payroll_rules(sheet.config_snapshot)

        employee_ids = {entry.employee_id for entry in entries if entry.employee_id is not None}
        employees = {employee.pk: employee_snapshot(employee) for employee in Employee.objects.filter(pk__in=employee_ids)}
        branches = {
            branch.pk: branch_snapshot(branch)
            for branch in Branch.objects.filter(pk__in={e.branch_id for e in employees.values()})
        }
        start, end = period_bounds(sheet.month)
        records = CenterCollectionRecord.objects.filter(employee_id__in=employee_ids).for_period(start, end).as_ledger()

        in_scope = None
        if branch_ids is not None:
            scope = set(branch_ids)
            in_scope = lambda employee: employee.branch_id in scope  # noqa: E731

        return project_rows(
            [entry.to_salary_entry() for entry in entries],
            records,
            employees,
            branches,
            rules.rate_table,
            in_scope=in_scope,
            **rules.policy_kwargs(),
        )

    @classmethod
    def build_row(cls, entry: SalarySheetEntry, rules: Optional[PayrollRules] = None) -> Optional[SalaryRow]:
        """Project a single entry; None when its employee or branch is gone."""
        rows = cls.build_rows(entry.salary_sheet, entries=[entry], rules=rules)
        return rows[0] if rows else None
