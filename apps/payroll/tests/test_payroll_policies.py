from decimal import Decimal

import pytest

from apps.payroll.exceptions import InvalidSalaryInput
from apps.payroll.services.salary_entry import create_entry
from apps.payroll.utils import AttendanceDeductionPolicy, BookBonusPolicy, no_bonus, policies_from_config


class TestAttendanceDeductionPolicy:
    def test_default_policy_deducts_nothing(self):
        policy = AttendanceDeductionPolicy()

        assert policy.late_deduction(10) == Decimal("0")
        assert policy.absence_deduction(3) == Decimal("0")

    def test_linear_rates(self):
        policy = AttendanceDeductionPolicy(late_hour_rate=50, absent_day_rate=500)

        assert policy.late_deduction(Decimal("2.5")) == Decimal("125.0")
        assert policy.absence_deduction(2) == Decimal("1000")

    def test_grace_hours_are_free(self):
        policy = AttendanceDeductionPolicy(late_hour_rate=50, late_grace_hours=2)

        assert policy.late_deduction(1) == Decimal("0")
        assert policy.late_deduction(2) == Decimal("0")
        assert policy.late_deduction(5) == Decimal("150")

    def test_deductions_never_decrease_with_more_input(self):
        policy = AttendanceDeductionPolicy(late_hour_rate=40, absent_day_rate=300, late_grace_hours=1)

        late = [policy.late_deduction(hours) for hours in range(0, 8)]
        absences = [policy.absence_deduction(days) for days in range(0, 8)]

        assert late == sorted(late)
        assert absences == sorted(absences)

    def test_negative_rate_is_rejected(self):
        with pytest.raises(InvalidSalaryInput):
            AttendanceDeductionPolicy(absent_day_rate=-1)


class TestBookBonusPolicy:
    def test_bonus_sums_bucket_counts_times_amounts(self):
        policy = BookBonusPolicy(amounts={"book_3": 100, "book_12": 250})
        entry = create_entry(1, 1, Decimal("1000")).with_inputs(book_3=2, book_12=1, book_5=9)

        assert policy(entry) == Decimal("450")

    def test_no_bonus_policy(self):
        entry = create_entry(1, 1, Decimal("1000")).with_inputs(book_3=2)

        assert no_bonus(entry) == Decimal("0")
        assert BookBonusPolicy()(entry) == Decimal("0")

    def test_unknown_bucket_is_rejected(self):
        with pytest.raises(InvalidSalaryInput):
            BookBonusPolicy(amounts={"book_7": 100})

    def test_amounts_are_read_only(self):
        policy = BookBonusPolicy(amounts={"book_3": 100})

        with pytest.raises(TypeError):
            policy.amounts["book_3"] = 1

    @pytest.mark.parametrize(
        "term, amount, expected",
        [
            ("3", 1000, "book_3"),
            ("3", 999, "book_no_bonus"),
            ("1.5", 0, "book_1_5"),
            (Decimal("12"), 5000, "book_12"),
        ],
    )
    def test_bucket_for_term_threshold(self, term, amount, expected):
        policy = BookBonusPolicy(thresholds={"3": 1000, "12": 5000})

        assert policy.bucket_for(term, amount) == expected

    def test_bucket_for_unknown_term(self):
        with pytest.raises(InvalidSalaryInput):
            BookBonusPolicy().bucket_for("4", 100)


class TestPoliciesFromConfig:
    def test_empty_config_gives_zero_policies(self):
        bonus, attendance = policies_from_config({})

        assert bonus.amounts == {}
        assert attendance == AttendanceDeductionPolicy()

    def test_reads_both_sections(self):
        bonus, attendance = policies_from_config(
            {
                "attendance": {"late_hour_rate": 50, "absent_day_rate": 500, "late_grace_hours": 1},
                "book_bonus": {"amounts": {"book_5": 200}, "thresholds": {"5": 2000}},
            }
        )

        assert bonus.amounts["book_5"] == Decimal("200")
        assert bonus.threshold_for("5") == Decimal("2000")
        assert attendance.late_hour_rate == Decimal("50")
        assert attendance.late_grace_hours == Decimal("1")
