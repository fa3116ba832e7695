from django.urls import path
from rest_framework.routers import DefaultRouter

from apps.payroll.api.views import (
    AccountOpeningViewSet,
    CenterCollectionRecordViewSet,
    CommissionRateViewSet,
    CurrentPayrollConfigView,
    SalaryEntryViewSet,
    SalarySheetViewSet,
)

app_name = "payroll"

router = DefaultRouter()
router.register(r"commission-rates", CommissionRateViewSet, basename="commission-rates")
router.register(r"salary-sheets", SalarySheetViewSet, basename="salary-sheets")
router.register(r"salary-entries", SalaryEntryViewSet, basename="salary-entries")
router.register(r"collection-records", CenterCollectionRecordViewSet, basename="collection-records")
router.register(r"account-openings", AccountOpeningViewSet, basename="account-openings")

urlpatterns = [
    path("payroll-config/", CurrentPayrollConfigView.as_view(), name="payroll-config-current"),
]

urlpatterns += router.urls
