"""Full recalculation of a salary entry's derived fields.

Every derived value is recomputed from the editable inputs, the ledger
totals already merged onto the entry and the rate table. Previously derived
values are never read, so recalculating twice gives the same entry.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Callable, Optional

from apps.payroll.constants import BOOK_FIELDS, DEDUCTION_FIELDS, FALLBACK_COMMISSION_TYPE
from apps.payroll.utils.payroll_policies import AttendanceDeductionPolicy, no_bonus
from libs.decimals import quantize_decimal, to_decimal

from .commission_rates import RateTable, lookup_rate
from .salary_entry import SalaryEntry

DEFAULT_ATTENDANCE_POLICY = AttendanceDeductionPolicy()

HUNDRED = Decimal("100")


def resolve_commission_type(
    entry: SalaryEntry,
    effective_commission_type: Optional[str] = None,
    fallback_commission_type: str = FALLBACK_COMMISSION_TYPE,
) -> str:
    """Pick the tier for a row.

    A row-level override wins, then the tier stored on the entry at
    generation, then the caller's tier (usually the employee's), then the
    fallback.
    """
    for candidate in (
        entry.commission_type_override,
        entry.commission_type,
        effective_commission_type,
    ):
        if candidate and str(candidate).strip():
            return str(candidate).strip()
    return fallback_commission_type


def recalculate(
    entry: SalaryEntry,
    base_salary,
    rate_table: RateTable,
    effective_commission_type: Optional[str] = None,
    *,
    bonus_policy: Callable[[SalaryEntry], Decimal] = no_bonus,
    attendance_policy: AttendanceDeductionPolicy = DEFAULT_ATTENDANCE_POLICY,
    fallback_commission_type: str = FALLBACK_COMMISSION_TYPE,
) -> SalaryEntry:
    """Return a new entry with every derived field recomputed.

    Args:
        entry: entry whose ledger totals are already merged (``with_aggregate``)
        base_salary: used when the entry carries no basic salary
        rate_table: commission tiers snapshot
        effective_commission_type: tier to use when the entry names none
        bonus_policy: callable returning the bonus for the entry's books
        attendance_policy: converts late hours and absent days to deductions
        fallback_commission_type: last-resort tier

    Raises:
        CommissionConfigurationError: the resolved tier is not in ``rate_table``
    """
    commission_type = resolve_commission_type(entry, effective_commission_type, fallback_commission_type)
    rate = lookup_rate(rate_table, commission_type)

    basic_salary = quantize_decimal(base_salary if entry.basic_salary is None else entry.basic_salary)
    own = to_decimal(entry.own_somity_collection)
    office = to_decimal(entry.office_somity_collection)

    total_collection = quantize_decimal(own + office)
    commission = quantize_decimal(own * rate.own / HUNDRED + office * rate.office / HUNDRED)
    total_books = sum(int(getattr(entry, name)) for name in BOOK_FIELDS)
    bonus = quantize_decimal(bonus_policy(entry))

    attendance = {
        "deduction_late": quantize_decimal(attendance_policy.late_deduction(entry.input_late_hours)),
        "deduction_abs": quantize_decimal(attendance_policy.absence_deduction(entry.input_absent_days)),
    }
    total_deductions = quantize_decimal(
        sum(
            attendance[name] if name in attendance else to_decimal(getattr(entry, name))
            for name in DEDUCTION_FIELDS
        )
    )

    return replace(
        entry,
        basic_salary=basic_salary,
        applied_commission_type=commission_type,
        total_collection=total_collection,
        commission=commission,
        total_books=total_books,
        bonus=bonus,
        total_deductions=total_deductions,
        final_salary=basic_salary + commission + bonus - total_deductions,
        **attendance,
    )
