"""Shared pytest fixtures for payroll tests."""

import random
import string
from datetime import date, datetime
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.hrm.models import Branch, Employee
from apps.payroll.models import CenterCollectionRecord, CommissionRate, SalarySheet


def random_code(prefix: str = "", length: int = 6):
    """Generate a random code."""
    suffix = "".join(random.choices(string.ascii_uppercase + string.digits, k=length))
    return f"{prefix}{suffix}"


def aware(year, month, day, hour=10):
    return timezone.make_aware(datetime(year, month, day, hour), timezone.get_current_timezone())


@pytest.fixture
def branch(db):
    """Create a test branch."""
    return Branch.objects.create(name=f"Test Branch {random_code()}", code=random_code("BR"))


@pytest.fixture
def other_branch(db):
    return Branch.objects.create(name=f"Other Branch {random_code()}", code=random_code("BR"))


@pytest.fixture
def commission_rates(db):
    """Create the standard A, B and C commission tiers."""
    return {
        code: CommissionRate.objects.create(code=code, own_percent=own, office_percent=office)
        for code, own, office in [("A", 8, 4), ("B", 10, 6), ("C", 8, 6)]
    }


@pytest.fixture
def make_employee(db, branch):
    """Factory for employees of the test branch unless another branch is given."""

    def _make(**kwargs):
        defaults = {
            "code": random_code("E"),
            "fullname": f"Employee {random_code()}",
            "branch": branch,
            "designation": "Field Officer",
            "base_salary": Decimal("20000"),
            "commission_type": "A",
        }
        defaults.update(kwargs)
        return Employee.objects.create(**defaults)

    return _make


@pytest.fixture
def employee(make_employee):
    return make_employee(fullname="Rahim Uddin")


@pytest.fixture
def salary_month():
    return date(2025, 1, 1)


@pytest.fixture
def make_record(db):
    """Factory for center collection records collected in January 2025 by default."""

    def _make(employee, center_code, amount, collection_type="OWN", loan_amount=None, collected_at=None):
        return CenterCollectionRecord.objects.create(
            branch_id=employee.branch_id,
            employee=employee,
            center_code=center_code,
            amount=Decimal(str(amount)),
            loan_amount=None if loan_amount is None else Decimal(str(loan_amount)),
            collection_type=collection_type,
            collected_at=collected_at or aware(2025, 1, 15),
        )

    return _make


@pytest.fixture
def salary_sheet(db, branch, employee, commission_rates, salary_month):
    """Generated sheet for the test branch in January 2025."""
    from apps.payroll.services.salary_sheet import SalarySheetService

    return SalarySheetService.generate(salary_month, [branch.pk])


@pytest.fixture
def empty_sheet(db, branch, salary_month):
    sheet = SalarySheet.objects.create(month=salary_month)
    sheet.branches.set([branch])
    return sheet
