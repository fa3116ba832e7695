from .account_opening import AccountOpeningSerializer
from .collection_record import CenterCollectionRecordSerializer, CenterReportQuerySerializer, CenterReportRowSerializer
from .commission_rate import CommissionRateSerializer
from .payroll_config import PayrollConfigSerializer
from .reports import BranchSummarySerializer, LeaderboardQuerySerializer, RowsQuerySerializer
from .salary_row import SalaryEntryUpdateSerializer, SalaryRowSerializer
from .salary_sheet import (
    AccountScanSerializer,
    SalarySheetCreateSerializer,
    SalarySheetListSerializer,
    SalarySheetSerializer,
)

__all__ = [
    "AccountOpeningSerializer",
    "AccountScanSerializer",
    "BranchSummarySerializer",
    "CenterCollectionRecordSerializer",
    "CenterReportQuerySerializer",
    "CenterReportRowSerializer",
    "CommissionRateSerializer",
    "LeaderboardQuerySerializer",
    "PayrollConfigSerializer",
    "RowsQuerySerializer",
    "SalaryEntryUpdateSerializer",
    "SalaryRowSerializer",
    "SalarySheetCreateSerializer",
    "SalarySheetListSerializer",
    "SalarySheetSerializer",
]
