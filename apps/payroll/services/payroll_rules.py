"""Loading of the payroll rules the projection runs with."""

from dataclasses import dataclass
from typing import Mapping, Optional

from apps.payroll.constants import FALLBACK_COMMISSION_TYPE
from apps.payroll.models import CommissionRate, PayrollConfig
from apps.payroll.utils.payroll_policies import AttendanceDeductionPolicy, BookBonusPolicy, policies_from_config

from .commission_rates import RateTable


@dataclass(frozen=True)
class PayrollRules:
    """Everything recalculation needs besides the entry itself, read once per projection."""

    rate_table: RateTable
    bonus_policy: BookBonusPolicy
    attendance_policy: AttendanceDeductionPolicy
    fallback_commission_type: str = FALLBACK_COMMISSION_TYPE

    def policy_kwargs(self) -> dict:
        return {
            "bonus_policy": self.bonus_policy,
            "attendance_policy": self.attendance_policy,
            "fallback_commission_type": self.fallback_commission_type,
        }


def active_config() -> dict:
    """Return the latest PayrollConfig document, or an empty one."""
    config = PayrollConfig.get_active()
    return dict(config.config) if config else {}


def load_payroll_rules(config: Optional[Mapping] = None) -> PayrollRules:
    """Snapshot the commission tiers and payroll config.

    Args:
        config: a config document, typically a sheet's ``config_snapshot``;
            the active PayrollConfig is used when omitted
    """
    if config is None:
        config = active_config()
    bonus_policy, attendance_policy = policies_from_config(config)
    return PayrollRules(
        rate_table=CommissionRate.objects.all().as_rate_table(),
        bonus_policy=bonus_policy,
        attendance_policy=attendance_policy,
        fallback_commission_type=config.get("default_commission_type") or FALLBACK_COMMISSION_TYPE,
    )
