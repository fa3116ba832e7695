from decimal import Decimal

from apps.payroll.services.ledger_aggregation import (
    CollectionRecord,
    LedgerAggregate,
    aggregate,
    aggregate_by_employee,
)


def record(employee_id, center_code, amount, collection_type="OWN", loan_amount=None, pk=None):
    return CollectionRecord(
        id=pk,
        branch_id=1,
        employee_id=employee_id,
        center_code=center_code,
        amount=Decimal(str(amount)),
        collection_type=collection_type,
        loan_amount=None if loan_amount is None else Decimal(str(loan_amount)),
    )


class TestAggregate:
    """Tests for per-employee ledger aggregation."""

    def test_distinct_center_count_and_amount_sum(self):
        records = [record(1, 1, 100), record(1, 1, 50), record(1, 2, 30)]

        result = aggregate(records, 1)

        assert result.own_count == 2
        assert result.own_amount == Decimal("180")
        assert result.office_count == 0
        assert result.office_amount == Decimal("0")

    def test_classes_are_counted_separately(self):
        records = [
            record(1, 1, 100, "OWN"),
            record(1, 1, 40, "OFFICE"),
            record(1, 3, 60, "OFFICE"),
        ]

        result = aggregate(records, 1)

        assert (result.own_count, result.own_amount) == (1, Decimal("100"))
        assert (result.office_count, result.office_amount) == (2, Decimal("100"))
        assert result.center_count == 2
        assert result.center_collection == Decimal("200")

    def test_loan_total_treats_missing_as_zero(self):
        records = [
            record(1, 1, 100, "OWN", loan_amount=25),
            record(1, 2, 100, "OFFICE", loan_amount=None),
            record(1, 3, 100, "OFFICE", loan_amount="12.50"),
        ]

        assert aggregate(records, 1).loan_total == Decimal("37.50")

    def test_other_employees_are_ignored(self):
        records = [record(1, 1, 100), record(2, 1, 999), record(2, 5, 1, "OFFICE")]

        result = aggregate(records, 1)

        assert result.own_amount == Decimal("100")
        assert result.office_count == 0

    def test_employee_without_records_gets_zero_aggregate(self):
        assert aggregate([record(2, 1, 100)], 1) == LedgerAggregate()
        assert aggregate([], 1) == LedgerAggregate()

    def test_reaggregation_reflects_edits(self):
        records = [record(1, 1, 100, pk="r1"), record(1, 2, 30, pk="r2")]
        assert aggregate(records, 1).own_amount == Decimal("130")

        # edit one record and delete the other
        edited = [record(1, 1, 70, pk="r1")]

        result = aggregate(edited, 1)
        assert result.own_amount == Decimal("70")
        assert result.own_count == 1

    def test_aggregate_by_employee_matches_aggregate(self):
        records = [record(1, 1, 100), record(2, 1, 50, "OFFICE", loan_amount=5), record(1, 2, 30, "OFFICE")]

        grouped = aggregate_by_employee(records)

        assert set(grouped) == {1, 2}
        assert grouped[1] == aggregate(records, 1)
        assert grouped[2] == aggregate(records, 2)
