"""Tests for salary entry recalculation."""

from decimal import Decimal

import pytest

from apps.payroll.exceptions import CommissionConfigurationError
from apps.payroll.services.commission_rates import build_rate_table, default_rate_table
from apps.payroll.services.ledger_aggregation import LedgerAggregate
from apps.payroll.services.salary_entry import SalaryEntry, create_entry
from apps.payroll.services.salary_recalculation import recalculate, resolve_commission_type
from apps.payroll.utils.payroll_policies import AttendanceDeductionPolicy, BookBonusPolicy

RATES = default_rate_table()


def entry_with(own="0", office="0", **inputs):
    entry = create_entry(1, 10, Decimal("20000"), inputs.pop("commission_type", "A"))
    entry = entry.with_aggregate(
        LedgerAggregate(own_count=1, own_amount=Decimal(own), office_count=1, office_amount=Decimal(office))
    )
    return entry.with_inputs(**inputs) if inputs else entry


class TestCommission:
    """Commission is paid on collected amounts at the tier's percentages."""

    def test_commission_formula(self):
        result = recalculate(entry_with(own="1000", office="500"), Decimal("20000"), RATES)

        assert result.commission == Decimal("100.00")
        assert result.total_collection == Decimal("1500.00")
        assert result.applied_commission_type == "A"

    def test_commission_uses_amounts_not_counts(self):
        entry = create_entry(1, 10, Decimal("0"), "A").with_aggregate(
            LedgerAggregate(own_count=50, own_amount=Decimal("0"), office_count=30, office_amount=Decimal("0"))
        )

        assert recalculate(entry, Decimal("0"), RATES).commission == Decimal("0.00")

    def test_commission_rounds_half_up(self):
        rates = build_rate_table({"X": {"own": "2.5", "office": "0"}})
        entry = entry_with(own="0.30", commission_type="X")

        # 0.30 * 2.5% = 0.0075
        assert recalculate(entry, Decimal("0"), rates).commission == Decimal("0.01")

    def test_zero_record_employee(self):
        entry = create_entry(1, 10, Decimal("15000"), "A").with_aggregate(LedgerAggregate())

        result = recalculate(entry, Decimal("15000"), RATES)

        assert result.commission == Decimal("0.00")
        assert result.total_collection == Decimal("0.00")
        assert result.final_salary == Decimal("15000.00")


class TestCommissionTypeResolution:
    """Row-level intent wins over the employee's master tier."""

    def test_stored_tier_wins_over_employee_tier(self):
        entry = entry_with(own="1000", office="500", commission_type="B")

        result = recalculate(entry, Decimal("20000"), RATES, "A")

        assert result.applied_commission_type == "B"
        # 1000 * 10% + 500 * 6%
        assert result.commission == Decimal("130.00")

    def test_override_wins_over_stored_tier(self):
        entry = entry_with(own="1000", office="500", commission_type="A", commission_type_override="C")

        result = recalculate(entry, Decimal("20000"), RATES, "B")

        assert result.applied_commission_type == "C"
        assert result.commission == Decimal("110.00")

    def test_blank_override_is_ignored(self):
        entry = entry_with(commission_type="B", commission_type_override="  ")

        assert resolve_commission_type(entry, "A") == "B"

    def test_caller_tier_used_when_entry_has_none(self):
        entry = entry_with(commission_type="")

        assert resolve_commission_type(entry, "C") == "C"

    def test_fallback_tier(self):
        entry = entry_with(commission_type="")

        assert resolve_commission_type(entry) == "A"
        assert resolve_commission_type(entry, None, "B") == "B"


class TestMissingTier:
    def test_unknown_tier_raises_configuration_error(self):
        entry = entry_with(own="1000", commission_type="Z")

        with pytest.raises(CommissionConfigurationError) as exc_info:
            recalculate(entry, Decimal("20000"), RATES)

        assert exc_info.value.commission_type == "Z"
        assert "Z" in str(exc_info.value)

    def test_unknown_tier_raises_even_without_collections(self):
        entry = entry_with(commission_type="Z")

        with pytest.raises(CommissionConfigurationError):
            recalculate(entry, Decimal("20000"), RATES)


class TestDeductionsAndFinalSalary:
    def test_final_salary_end_to_end(self):
        entry = entry_with(own="1000", office="500", deduction_cash_advance=Decimal("500"))

        result = recalculate(entry, Decimal("20000"), RATES)

        assert result.commission == Decimal("100.00")
        assert result.bonus == Decimal("0.00")
        assert result.total_deductions == Decimal("500.00")
        assert result.final_salary == Decimal("19600.00")

    def test_all_deductions_are_summed(self):
        entry = entry_with(
            deduction_cash_advance=Decimal("100"),
            deduction_misconduct=Decimal("20"),
            deduction_unlawful=Decimal("30"),
            deduction_tours=Decimal("40"),
            deduction_others=Decimal("10"),
            input_late_hours=Decimal("3"),
            input_absent_days=Decimal("2"),
        )
        policy = AttendanceDeductionPolicy(late_hour_rate=Decimal("50"), absent_day_rate=Decimal("500"))

        result = recalculate(entry, Decimal("20000"), RATES, attendance_policy=policy)

        assert result.deduction_late == Decimal("150.00")
        assert result.deduction_abs == Decimal("1000.00")
        assert result.total_deductions == Decimal("1350.00")
        assert result.final_salary == Decimal("18650.00")

    def test_attendance_inputs_cost_nothing_without_rates(self):
        entry = entry_with(input_late_hours=Decimal("8"), input_absent_days=Decimal("3"))

        result = recalculate(entry, Decimal("20000"), RATES)

        assert result.deduction_late == Decimal("0.00")
        assert result.deduction_abs == Decimal("0.00")

    def test_final_salary_can_go_negative(self):
        entry = entry_with(deduction_cash_advance=Decimal("25000"))

        assert recalculate(entry, Decimal("20000"), RATES).final_salary == Decimal("-5000.00")

    def test_basic_salary_falls_back_to_base_salary(self):
        entry = SalaryEntry(id="e1", salary_sheet_id=1, employee_id=10, commission_type="A")

        result = recalculate(entry, Decimal("12000"), RATES)

        assert result.basic_salary == Decimal("12000.00")
        assert result.final_salary == Decimal("12000.00")

    def test_edited_basic_salary_wins_over_base_salary(self):
        entry = entry_with(basic_salary=Decimal("25000"))

        assert recalculate(entry, Decimal("20000"), RATES).final_salary == Decimal("25000.00")


class TestBooksAndBonus:
    def test_total_books_is_a_plain_count(self):
        entry = entry_with(book_1_5=1, book_3=2, book_5=3, book_8=1, book_10=1, book_12=2, book_no_bonus=4)

        assert recalculate(entry, Decimal("20000"), RATES).total_books == 14

    def test_bonus_policy_is_applied(self):
        entry = entry_with(book_3=2, book_12=1, book_no_bonus=5)
        policy = BookBonusPolicy(amounts={"book_3": 100, "book_12": 400})

        result = recalculate(entry, Decimal("20000"), RATES, bonus_policy=policy)

        assert result.bonus == Decimal("600.00")
        assert result.final_salary == Decimal("20600.00")

    def test_custom_bonus_callable(self):
        entry = entry_with(book_5=3)

        result = recalculate(entry, Decimal("20000"), RATES, bonus_policy=lambda e: e.book_5 * Decimal("10.005"))

        assert result.bonus == Decimal("30.02")


class TestRecalculationProperties:
    def _inputs(self):
        return entry_with(
            own="1234.56",
            office="789.01",
            commission_type_override="B",
            book_3=2,
            deduction_cash_advance=Decimal("120.50"),
            input_late_hours=Decimal("1.5"),
        )

    def test_idempotent(self):
        policy = AttendanceDeductionPolicy(late_hour_rate=Decimal("33.33"))
        once = recalculate(self._inputs(), Decimal("20000"), RATES, attendance_policy=policy)
        twice = recalculate(once, Decimal("20000"), RATES, attendance_policy=policy)

        assert twice == once

    def test_deterministic(self):
        entry = self._inputs()

        first = recalculate(entry, Decimal("20000"), RATES, "A")
        second = recalculate(entry, Decimal("20000"), RATES, "A")

        assert first == second

    def test_stale_derived_fields_are_ignored(self):
        entry = self._inputs()
        fresh = recalculate(entry, Decimal("20000"), RATES)
        stale = SalaryEntry(
            **{
                **entry.as_dict(),
                "commission": Decimal("99999"),
                "bonus": Decimal("5"),
                "total_deductions": Decimal("77"),
                "final_salary": Decimal("1"),
                "total_books": 42,
            }
        )

        assert recalculate(stale, Decimal("20000"), RATES) == fresh

    def test_input_entry_is_not_mutated(self):
        entry = self._inputs()

        recalculate(entry, Decimal("20000"), RATES)

        assert entry.commission == Decimal("0.00")
        assert entry.final_salary == Decimal("0.00")
