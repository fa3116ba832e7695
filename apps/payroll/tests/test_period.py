from datetime import date, timedelta

import pytest

from apps.payroll.exceptions import InvalidSalaryInput
from apps.payroll.utils import format_period, parse_period, period_bounds


class TestPeriod:
    def test_parse_period(self):
        assert parse_period("2025-01") == date(2025, 1, 1)
        assert parse_period(" 2024-12 ") == date(2024, 12, 1)

    @pytest.mark.parametrize("value", ["", None, "2025-13", "2025-00", "2025/01", "25-01", "2025-1", "January"])
    def test_malformed_period_is_rejected(self, value):
        with pytest.raises(InvalidSalaryInput):
            parse_period(value)

    def test_format_period(self):
        assert format_period(date(2025, 3, 1)) == "2025-03"

    def test_period_bounds_cover_the_month(self):
        start, end = period_bounds(date(2024, 2, 1))

        assert start.tzinfo is not None
        assert start.date() == date(2024, 2, 1)
        assert end.date() == date(2024, 3, 1)
        assert end - start == timedelta(days=29)

    def test_period_bounds_cross_year_end(self):
        start, end = period_bounds(date(2024, 12, 1))

        assert end.date() == date(2025, 1, 1)
