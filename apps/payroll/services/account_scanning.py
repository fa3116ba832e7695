"""Counting account openings as books on a salary sheet."""

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import transaction
from django.db.models import F

from apps.payroll.exceptions import AccountScanError
from apps.payroll.models import AccountOpening, SalarySheet, SalarySheetEntry
from apps.payroll.utils.payroll_policies import BookBonusPolicy, policies_from_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountScanResult:
    account: AccountOpening
    entry: SalarySheetEntry
    bucket: str


def scan_account_opening(
    sheet: SalarySheet, account_code: str, bonus_policy: Optional[BookBonusPolicy] = None
) -> AccountScanResult:
    """Count an account opening toward its opener's entry on ``sheet``.

    The opening lands in its term's book bucket when its collection reaches
    the term threshold, otherwise in ``book_no_bonus``.

    Raises:
        AccountOpening.DoesNotExist: no account with that code
        AccountScanError: already counted, or the opener has no entry on the sheet
    """
    if bonus_policy is None:
        bonus_policy, _ = policies_from_config(sheet.config_snapshot)

    code = (account_code or "").strip()
    with transaction.atomic():
        account = AccountOpening.objects.select_for_update().get(account_code__iexact=code)
        if account.is_counted:
            raise AccountScanError(f"Account {account.account_code} is already counted")

        entry = (
            SalarySheetEntry.objects.select_for_update()
            .filter(salary_sheet=sheet, employee_id=account.opened_by_id)
            .first()
        )
        if entry is None or account.opened_by_id is None:
            raise AccountScanError(f"Opener of account {account.account_code} has no entry on sheet {sheet.code}")

        bucket = bonus_policy.bucket_for(account.term, account.collection_amount)
        SalarySheetEntry.objects.filter(pk=entry.pk).update(**{bucket: F(bucket) + 1})
        entry.refresh_from_db()

        account.is_counted = True
        account.counted_month = sheet.month
        account.salary_sheet = sheet
        account.counted_bucket = bucket
        account.save(update_fields=["is_counted", "counted_month", "salary_sheet", "counted_bucket", "updated_at"])

    logger.info("Counted account %s as %s on sheet %s", account.account_code, bucket, sheet.code)
    return AccountScanResult(account=account, entry=entry, bucket=bucket)


def release_account_opening(account: AccountOpening) -> None:
    """Undo the book counted for ``account`` on its salary sheet."""
    if not account.is_counted:
        return
    bucket = account.counted_bucket
    with transaction.atomic():
        if account.salary_sheet_id and account.opened_by_id and bucket:
            SalarySheetEntry.objects.filter(
                salary_sheet_id=account.salary_sheet_id,
                employee_id=account.opened_by_id,
                **{f"{bucket}__gt": 0},
            ).update(**{bucket: F(bucket) - 1})
        account.is_counted = False
        account.counted_month = None
        account.salary_sheet = None
        account.counted_bucket = ""
        account.save(update_fields=["is_counted", "counted_month", "salary_sheet", "counted_bucket", "updated_at"])

    logger.info("Released account %s from bucket %s", account.account_code, bucket)
