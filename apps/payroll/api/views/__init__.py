from .account_opening import AccountOpeningViewSet
from .collection_record import CenterCollectionRecordViewSet
from .commission_rate import CommissionRateViewSet
from .payroll_config import CurrentPayrollConfigView
from .salary_entry import SalaryEntryViewSet
from .salary_sheet import SalarySheetViewSet

__all__ = [
    "AccountOpeningViewSet",
    "CenterCollectionRecordViewSet",
    "CommissionRateViewSet",
    "CurrentPayrollConfigView",
    "SalaryEntryViewSet",
    "SalarySheetViewSet",
]
