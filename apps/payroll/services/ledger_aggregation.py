"""Collection ledger aggregation.

Totals are always derived from the full set of ledger records; nothing is
cached on the records themselves, so an edited or deleted record is picked up
by simply aggregating again.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, Optional

from apps.payroll.constants import CollectionType
from libs.decimals import DECIMAL_ZERO, to_decimal


@dataclass(frozen=True)
class CollectionRecord:
    """One ledger line: an amount collected at a center by an employee."""

    id: object
    branch_id: object
    employee_id: object
    center_code: int
    amount: Decimal
    collection_type: str
    loan_amount: Optional[Decimal] = None
    collected_at: Optional[datetime] = None


@dataclass(frozen=True)
class LedgerAggregate:
    """Per-employee ledger totals merged into a salary entry before recalculation."""

    own_count: int = 0
    own_amount: Decimal = DECIMAL_ZERO
    office_count: int = 0
    office_amount: Decimal = DECIMAL_ZERO
    loan_total: Decimal = DECIMAL_ZERO
    center_count: int = 0
    center_collection: Decimal = DECIMAL_ZERO


EMPTY_AGGREGATE = LedgerAggregate()


def _summarize(records) -> LedgerAggregate:
    own_centers = set()
    office_centers = set()
    own_amount = DECIMAL_ZERO
    office_amount = DECIMAL_ZERO
    loan_total = DECIMAL_ZERO

    for record in records:
        amount = to_decimal(record.amount)
        if record.collection_type == CollectionType.OWN:
            own_centers.add(record.center_code)
            own_amount += amount
        elif record.collection_type == CollectionType.OFFICE:
            office_centers.add(record.center_code)
            office_amount += amount
        else:
            continue
        loan_total += to_decimal(record.loan_amount)

    return LedgerAggregate(
        own_count=len(own_centers),
        own_amount=own_amount,
        office_count=len(office_centers),
        office_amount=office_amount,
        loan_total=loan_total,
        center_count=len(own_centers | office_centers),
        center_collection=own_amount + office_amount,
    )


def aggregate(records: Iterable[CollectionRecord], employee_id) -> LedgerAggregate:
    """Aggregate one employee's ledger records.

    Args:
        records: ledger records, possibly for many employees
        employee_id: employee whose records are summed

    Returns:
        LedgerAggregate: distinct center counts and amount sums per class.
        An employee without records gets an all-zero aggregate.
    """
    return _summarize(record for record in records if record.employee_id == employee_id)


def aggregate_by_employee(records: Iterable[CollectionRecord]) -> Dict[object, LedgerAggregate]:
    """Group the ledger once and aggregate every employee found in it."""
    grouped = defaultdict(list)
    for record in records:
        grouped[record.employee_id].append(record)
    return {employee_id: _summarize(items) for employee_id, items in grouped.items()}
