"""Salary entry value type and factory."""

import uuid
from dataclasses import dataclass, fields, replace
from decimal import Decimal
from typing import Optional

from apps.payroll.constants import ATTENDANCE_DEDUCTION_FIELDS, BOOK_FIELDS, MANUAL_DEDUCTION_FIELDS
from apps.payroll.exceptions import InvalidSalaryInput
from libs.decimals import DECIMAL_ZERO, to_decimal

from .ledger_aggregation import LedgerAggregate

EDITABLE_FIELDS = (
    "basic_salary",
    "commission_type_override",
    "commission_type",
    *BOOK_FIELDS,
    "input_late_hours",
    "input_absent_days",
    *MANUAL_DEDUCTION_FIELDS,
)

# Inputs that must be zero or positive
NON_NEGATIVE_FIELDS = (
    "basic_salary",
    *BOOK_FIELDS,
    "input_late_hours",
    "input_absent_days",
    *MANUAL_DEDUCTION_FIELDS,
)

AGGREGATE_FIELDS = (
    "own_somity_count",
    "own_somity_collection",
    "office_somity_count",
    "office_somity_collection",
    "center_count",
    "center_collection",
    "total_loan_collection",
)

DERIVED_FIELDS = (
    *AGGREGATE_FIELDS,
    "applied_commission_type",
    "total_books",
    "total_collection",
    *ATTENDANCE_DEDUCTION_FIELDS,
    "total_deductions",
    "commission",
    "bonus",
    "final_salary",
)


@dataclass(frozen=True)
class SalaryEntry:
    """One employee's payroll line within a salary sheet.

    Only identity and editable inputs are meaningful on their own. Derived
    fields are zero until :func:`recalculate` fills them and are overwritten
    on every recalculation.
    """

    id: object
    salary_sheet_id: object
    employee_id: object

    # editable inputs
    basic_salary: Optional[Decimal] = None
    commission_type_override: str = ""
    commission_type: str = ""
    book_1_5: int = 0
    book_3: int = 0
    book_5: int = 0
    book_8: int = 0
    book_10: int = 0
    book_12: int = 0
    book_no_bonus: int = 0
    input_late_hours: Decimal = DECIMAL_ZERO
    input_absent_days: Decimal = DECIMAL_ZERO
    deduction_cash_advance: Decimal = DECIMAL_ZERO
    deduction_misconduct: Decimal = DECIMAL_ZERO
    deduction_unlawful: Decimal = DECIMAL_ZERO
    deduction_tours: Decimal = DECIMAL_ZERO
    deduction_others: Decimal = DECIMAL_ZERO

    # ledger aggregate
    own_somity_count: int = 0
    own_somity_collection: Decimal = DECIMAL_ZERO
    office_somity_count: int = 0
    office_somity_collection: Decimal = DECIMAL_ZERO
    center_count: int = 0
    center_collection: Decimal = DECIMAL_ZERO
    total_loan_collection: Decimal = DECIMAL_ZERO

    # derived
    applied_commission_type: str = ""
    total_books: int = 0
    total_collection: Decimal = DECIMAL_ZERO
    deduction_late: Decimal = DECIMAL_ZERO
    deduction_abs: Decimal = DECIMAL_ZERO
    total_deductions: Decimal = DECIMAL_ZERO
    commission: Decimal = DECIMAL_ZERO
    bonus: Decimal = DECIMAL_ZERO
    final_salary: Decimal = DECIMAL_ZERO

    def with_aggregate(self, agg: LedgerAggregate) -> "SalaryEntry":
        """Return a copy carrying the given ledger totals."""
        return replace(
            self,
            own_somity_count=agg.own_count,
            own_somity_collection=agg.own_amount,
            office_somity_count=agg.office_count,
            office_somity_collection=agg.office_amount,
            center_count=agg.center_count,
            center_collection=agg.center_collection,
            total_loan_collection=agg.loan_total,
        )

    def with_inputs(self, **changes) -> "SalaryEntry":
        """Return a copy with editable inputs changed; derived fields are rejected."""
        not_editable = set(changes) - set(EDITABLE_FIELDS)
        if not_editable:
            raise InvalidSalaryInput(f"Fields are not editable: {', '.join(sorted(not_editable))}")
        validate_entry_inputs(changes)
        return replace(self, **changes)

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def validate_entry_inputs(values) -> None:
    """Reject negative amounts and counts among editable inputs.

    Args:
        values: mapping of field name to value, or a SalaryEntry

    Raises:
        InvalidSalaryInput: listing every negative field
    """
    if isinstance(values, SalaryEntry):
        values = values.as_dict()
    negative = [
        name
        for name in NON_NEGATIVE_FIELDS
        if values.get(name) is not None and to_decimal(values[name]) < 0
    ]
    if negative:
        raise InvalidSalaryInput(f"Negative values are not allowed: {', '.join(negative)}")


def create_entry(sheet_id, employee_id, base_salary, commission_type: str = "") -> SalaryEntry:
    """Create a fresh salary entry for an employee.

    The basic salary starts at the employee's base salary and every other
    input and derived field starts at zero.
    """
    base_salary = to_decimal(base_salary)
    if base_salary < 0:
        raise InvalidSalaryInput("Base salary must not be negative")
    return SalaryEntry(
        id=uuid.uuid4(),
        salary_sheet_id=sheet_id,
        employee_id=employee_id,
        basic_salary=base_salary,
        commission_type=commission_type or "",
    )
