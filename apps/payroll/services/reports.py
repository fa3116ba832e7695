"""Read-only reports built from projected salary rows."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from apps.payroll.constants import LeaderboardMetric
from apps.payroll.exceptions import InvalidSalaryInput
from libs.decimals import DECIMAL_ZERO

from .grid_projection import SalaryRow


@dataclass(frozen=True)
class BranchSummary:
    branch_id: object
    branch_code: str
    branch_name: str
    employee_count: int
    total_collection: Decimal
    total_loan_collection: Decimal
    commission: Decimal
    bonus: Decimal
    total_deductions: Decimal
    final_salary: Decimal


def rank_top_performers(rows: Iterable[SalaryRow], metric: str = LeaderboardMetric.TOTAL_COLLECTION, limit: int = 10) -> List[SalaryRow]:
    """Return the best ``limit`` rows by ``metric``, highest first.

    Equal values are ordered by employee name, then code.
    """
    if metric not in LeaderboardMetric.values:
        raise InvalidSalaryInput(f"Unknown leaderboard metric '{metric}'")
    if limit < 1:
        raise InvalidSalaryInput("Leaderboard limit must be at least 1")
    metric = str(metric)
    ranked = sorted(
        rows,
        key=lambda row: (-getattr(row.entry, metric), row.employee.fullname, row.employee.code),
    )
    return ranked[:limit]


def summarize_branches(rows: Iterable[SalaryRow]) -> List[BranchSummary]:
    """Per-branch totals, ordered by branch code."""
    totals = {}
    for row in rows:
        branch = row.branch
        bucket = totals.setdefault(
            branch.id,
            {
                "branch": branch,
                "employee_count": 0,
                "total_collection": DECIMAL_ZERO,
                "total_loan_collection": DECIMAL_ZERO,
                "commission": DECIMAL_ZERO,
                "bonus": DECIMAL_ZERO,
                "total_deductions": DECIMAL_ZERO,
                "final_salary": DECIMAL_ZERO,
            },
        )
        bucket["employee_count"] += 1
        for name in ("total_collection", "total_loan_collection", "commission", "bonus", "total_deductions", "final_salary"):
            bucket[name] += getattr(row.entry, name)

    summaries = []
    for bucket in totals.values():
        branch = bucket.pop("branch")
        summaries.append(
            BranchSummary(branch_id=branch.id, branch_code=branch.code, branch_name=branch.name, **bucket)
        )
    return sorted(summaries, key=lambda summary: summary.branch_code)
