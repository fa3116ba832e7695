from .account_opening import AccountOpeningFilterSet
from .collection_record import CenterCollectionRecordFilterSet
from .salary_sheet import SalarySheetFilterSet

__all__ = [
    "AccountOpeningFilterSet",
    "CenterCollectionRecordFilterSet",
    "SalarySheetFilterSet",
]
