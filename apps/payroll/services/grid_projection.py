"""Projection of stored salary entries into read-only salary rows."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable, List, Mapping, Optional

from apps.payroll.constants import FALLBACK_COMMISSION_TYPE
from apps.payroll.utils.payroll_policies import AttendanceDeductionPolicy, no_bonus

from .commission_rates import RateTable
from .ledger_aggregation import EMPTY_AGGREGATE, CollectionRecord, aggregate_by_employee
from .salary_entry import SalaryEntry
from .salary_recalculation import DEFAULT_ATTENDANCE_POLICY, recalculate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeSnapshot:
    id: object
    code: str
    fullname: str
    branch_id: object
    base_salary: Decimal
    commission_type: str = ""
    designation: str = ""


@dataclass(frozen=True)
class BranchSnapshot:
    id: object
    code: str
    name: str


@dataclass(frozen=True)
class SalaryRow:
    """A fully recalculated entry with its employee and branch, never persisted."""

    entry: SalaryEntry
    employee: EmployeeSnapshot
    branch: BranchSnapshot

    def __getattr__(self, name):
        # Derived figures are read straight off the entry
        if name.startswith("_") or name in ("entry", "employee", "branch"):
            raise AttributeError(name)
        return getattr(self.entry, name)

    def as_dict(self) -> dict:
        data = self.entry.as_dict()
        data.update(
            employee_code=self.employee.code,
            employee_name=self.employee.fullname,
            designation=self.employee.designation,
            branch_id=self.branch.id,
            branch_code=self.branch.code,
            branch_name=self.branch.name,
        )
        return data


def project_rows(
    entries: Iterable[SalaryEntry],
    records: Iterable[CollectionRecord],
    employees: Mapping[object, EmployeeSnapshot],
    branches: Mapping[object, BranchSnapshot],
    rate_table: RateTable,
    *,
    in_scope: Optional[Callable[[EmployeeSnapshot], bool]] = None,
    bonus_policy: Callable[[SalaryEntry], Decimal] = no_bonus,
    attendance_policy: AttendanceDeductionPolicy = DEFAULT_ATTENDANCE_POLICY,
    fallback_commission_type: str = FALLBACK_COMMISSION_TYPE,
) -> List[SalaryRow]:
    """Aggregate, merge and recalculate every entry, attaching master data.

    Entries whose employee or branch no longer exists, or whose employee is
    rejected by ``in_scope``, are left out of the result.

    Raises:
        CommissionConfigurationError: an entry resolves to an unknown tier
    """
    aggregates = aggregate_by_employee(records)
    rows = []
    for entry in entries:
        employee = employees.get(entry.employee_id)
        if employee is None:
            logger.debug("Skipping salary entry %s: employee %s not found", entry.id, entry.employee_id)
            continue
        branch = branches.get(employee.branch_id)
        if branch is None:
            logger.debug("Skipping salary entry %s: branch %s not found", entry.id, employee.branch_id)
            continue
        if in_scope is not None and not in_scope(employee):
            continue

        merged = entry.with_aggregate(aggregates.get(entry.employee_id, EMPTY_AGGREGATE))
        calculated = recalculate(
            merged,
            employee.base_salary,
            rate_table,
            employee.commission_type or None,
            bonus_policy=bonus_policy,
            attendance_policy=attendance_policy,
            fallback_commission_type=fallback_commission_type,
        )
        rows.append(SalaryRow(entry=calculated, employee=employee, branch=branch))
    return rows
