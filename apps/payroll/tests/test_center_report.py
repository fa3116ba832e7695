from datetime import date
from decimal import Decimal

import pytest

from apps.hrm.models import Center
from apps.payroll.services.center_report import summarize_centers

from .conftest import aware


@pytest.mark.django_db
class TestCenterReport:
    def test_totals_per_center_and_type(self, branch, employee, make_record):
        Center.objects.create(branch=branch, center_code=7, center_name="Padma Somity")
        make_record(employee, 7, 100, loan_amount=40)
        make_record(employee, 7, 150)
        make_record(employee, 7, 50, collection_type="OFFICE")
        make_record(employee, 9, 80)
        make_record(employee, 7, 999, collected_at=aware(2025, 2, 3))

        rows = summarize_centers(date(2025, 1, 1))

        assert [(row["center_code"], row["collection_type"]) for row in rows] == [(7, "OFFICE"), (7, "OWN"), (9, "OWN")]
        own = rows[1]
        assert own["center_name"] == "Padma Somity"
        assert own["total_amount"] == Decimal("250")
        assert own["total_loan_amount"] == Decimal("40")
        assert own["visit_count"] == 2
        assert rows[2]["center_name"] == ""
        assert rows[2]["total_loan_amount"] == Decimal("0")

    def test_branch_filter(self, branch, other_branch, employee, make_employee, make_record):
        make_record(employee, 1, 100)
        make_record(make_employee(branch=other_branch), 1, 200)

        rows = summarize_centers(date(2025, 1, 1), branch_id=other_branch.pk)

        assert len(rows) == 1
        assert rows[0]["branch_id"] == other_branch.pk
        assert rows[0]["total_amount"] == Decimal("200")

    def test_empty_month(self, db):
        assert summarize_centers(date(2030, 1, 1)) == []
