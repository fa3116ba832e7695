from .account_opening import AccountOpening
from .collection_record import CenterCollectionRecord
from .commission_rate import CommissionRate
from .payroll_config import PayrollConfig
from .salary_sheet import SalarySheet, SalarySheetEntry

__all__ = [
    "AccountOpening",
    "CenterCollectionRecord",
    "CommissionRate",
    "PayrollConfig",
    "SalarySheet",
    "SalarySheetEntry",
]
