from .payroll_policies import AttendanceDeductionPolicy, BookBonusPolicy, no_bonus, policies_from_config
from .period import format_period, parse_period, period_bounds

__all__ = [
    "AttendanceDeductionPolicy",
    "BookBonusPolicy",
    "no_bonus",
    "policies_from_config",
    "format_period",
    "parse_period",
    "period_bounds",
]
