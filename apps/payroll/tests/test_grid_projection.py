from decimal import Decimal

import pytest

from apps.payroll.exceptions import CommissionConfigurationError
from apps.payroll.services.commission_rates import build_rate_table, default_rate_table
from apps.payroll.services.grid_projection import BranchSnapshot, EmployeeSnapshot, project_rows
from apps.payroll.services.ledger_aggregation import CollectionRecord
from apps.payroll.services.salary_entry import create_entry


def employee(pk, branch_id=1, base_salary="20000", commission_type="A", fullname=None):
    return EmployeeSnapshot(
        id=pk,
        code=f"E{pk:03d}",
        fullname=fullname or f"Employee {pk}",
        branch_id=branch_id,
        base_salary=Decimal(base_salary),
        commission_type=commission_type,
    )


def record(employee_id, center_code, amount, collection_type="OWN"):
    return CollectionRecord(
        id=None,
        branch_id=1,
        employee_id=employee_id,
        center_code=center_code,
        amount=Decimal(str(amount)),
        collection_type=collection_type,
    )


@pytest.fixture
def branches():
    return {1: BranchSnapshot(id=1, code="BR1", name="Sadar"), 2: BranchSnapshot(id=2, code="BR2", name="Mirpur")}


class TestProjectRows:
    """Tests for projecting salary entries into rows."""

    def test_rows_are_recalculated_from_the_ledger(self, branches):
        entries = [create_entry(1, 10, Decimal("20000"), "A")]
        records = [record(10, "C1", 1000), record(10, "C2", 500, "OFFICE"), record(11, "C1", 999)]

        rows = project_rows(entries, records, {10: employee(10)}, branches, default_rate_table())

        assert len(rows) == 1
        row = rows[0]
        assert row.own_somity_collection == Decimal("1000")
        assert row.office_somity_count == 1
        assert row.commission == Decimal("100.00")
        assert row.final_salary == Decimal("20100.00")
        assert row.branch.code == "BR1"
        assert row.employee.code == "E010"

    def test_employee_without_records_gets_zero_totals(self, branches):
        entries = [create_entry(1, 10, Decimal("20000"), "A")]

        row = project_rows(entries, [], {10: employee(10)}, branches, default_rate_table())[0]

        assert row.own_somity_count == 0
        assert row.total_collection == Decimal("0")
        assert row.commission == Decimal("0")
        assert row.final_salary == Decimal("20000.00")

    def test_missing_employee_or_branch_is_dropped(self, branches):
        entries = [
            create_entry(1, 10, Decimal("20000"), "A"),
            create_entry(1, 11, Decimal("20000"), "A"),
            create_entry(1, 12, Decimal("20000"), "A"),
        ]
        employees = {10: employee(10), 12: employee(12, branch_id=99)}

        rows = project_rows(entries, [], employees, branches, default_rate_table())

        assert [row.employee_id for row in rows] == [10]

    def test_scope_predicate_filters_rows(self, branches):
        entries = [create_entry(1, 10, Decimal("20000")), create_entry(1, 20, Decimal("20000"))]
        employees = {10: employee(10, branch_id=1), 20: employee(20, branch_id=2)}

        rows = project_rows(
            entries, [], employees, branches, default_rate_table(), in_scope=lambda emp: emp.branch_id == 2
        )

        assert [row.employee_id for row in rows] == [20]

    def test_master_tier_is_used_when_entry_has_none(self, branches):
        entries = [create_entry(1, 10, Decimal("20000"), "")]
        records = [record(10, "C1", 1000), record(10, "C2", 500, "OFFICE")]

        row = project_rows(entries, records, {10: employee(10, commission_type="B")}, branches, default_rate_table())[0]

        assert row.applied_commission_type == "B"
        assert row.commission == Decimal("130.00")

    def test_unknown_tier_propagates(self, branches):
        entries = [create_entry(1, 10, Decimal("20000"), "Z")]

        with pytest.raises(CommissionConfigurationError):
            project_rows(entries, [], {10: employee(10)}, branches, default_rate_table())

    def test_rate_table_is_read_per_projection(self, branches):
        entries = [create_entry(1, 10, Decimal("20000"), "A")]
        records = [record(10, "C1", 1000)]
        employees = {10: employee(10)}

        before = project_rows(entries, records, employees, branches, default_rate_table())[0]
        after = project_rows(
            entries, records, employees, branches, build_rate_table({"A": {"own": 12, "office": 4}})
        )[0]

        assert before.commission == Decimal("80.00")
        assert after.commission == Decimal("120.00")

    def test_row_as_dict_includes_master_data(self, branches):
        entries = [create_entry(1, 10, Decimal("20000"), "A")]

        data = project_rows(entries, [], {10: employee(10, fullname="Karim")}, branches, default_rate_table())[0].as_dict()

        assert data["employee_name"] == "Karim"
        assert data["branch_code"] == "BR1"
        assert data["final_salary"] == Decimal("20000.00")
