"""
Unit tests for the individual format parsers (xldt_parse.parsers.*).

Each parser is exercised on its own, outside the dispatcher, so the
specific exception it raises can be asserted.
"""

from datetime import timedelta

import pytest

from xldt_parse.config import ParseOptions
from xldt_parse.exceptions import (
    DateOutOfRangeError,
    InvalidDatePartError,
    InvalidNumericLiteralError,
    WrongFragmentCountError,
)
from xldt_parse.parsers.base import split_fragments
from xldt_parse.parsers.dash_datetime import DashDateTimeParser
from xldt_parse.parsers.serial import SerialParser
from xldt_parse.parsers.short_year import ShortYearDashParser
from xldt_parse.parsers.slash import SlashFullYearParser
from xldt_parse.parts import EXCEL_EPOCH
from tests.conftest import (
    DASH_DATETIME_SAMPLE,
    SERIAL_SAMPLE,
    SHORT_YEAR_SAMPLE,
    SLASH_SAMPLE,
    utc,
)

OPTIONS = ParseOptions()
POSITIONAL = ParseOptions(time_fragments="positional")


class TestSplitFragments:
    """Tests for split_fragments() helper."""

    def test_exact_count(self):
        assert split_fragments("a-b-c", "-", 3) == ["a", "b", "c"]

    def test_too_few(self):
        with pytest.raises(WrongFragmentCountError):
            split_fragments("a-b", "-", 3)

    def test_too_many(self):
        with pytest.raises(WrongFragmentCountError):
            split_fragments("a-b-c-d", "-", 3)

    def test_empty_fragments_count(self):
        assert split_fragments("--", "-", 3) == ["", "", ""]


class TestSerialParser:
    """Tests for SerialParser (days since 1899-12-30)."""

    def _parse(self, text):
        return SerialParser().parse(text, OPTIONS)

    # -----------------------------------------------------------------
    # Accepted values
    # -----------------------------------------------------------------

    def test_sample_with_fraction(self):
        result = self._parse(SERIAL_SAMPLE)
        assert (result.year, result.month, result.day) == (2020, 7, 3)
        assert (result.hour, result.minute) == (22, 24)

    def test_zero_is_epoch(self):
        assert self._parse("0") == EXCEL_EPOCH

    def test_integer_days(self):
        assert self._parse("44015") == utc(2020, 7, 3)

    def test_half_day(self):
        assert self._parse("1.5") == utc(1899, 12, 31, 12)

    def test_negative_moves_before_epoch(self):
        assert self._parse("-1") == utc(1899, 12, 29)
        assert self._parse("-0.5") == utc(1899, 12, 29, 12)

    def test_exponent_and_sign(self):
        assert self._parse("1.5e2") == utc(1900, 5, 29)
        assert self._parse("+2") == utc(1900, 1, 1)

    def test_leading_dot(self):
        assert self._parse(".25") == utc(1899, 12, 30, 6)

    def test_far_future_is_pure_duration_arithmetic(self):
        result = self._parse("1000000")
        assert result == EXCEL_EPOCH + timedelta(days=1_000_000)
        assert result.year == 4637

    def test_sub_second_fraction_truncated(self):
        """Seconds are truncated toward zero, never rounded up."""
        one_and_a_half_seconds = 1.5 / 86400
        assert self._parse(repr(one_and_a_half_seconds)) == utc(1899, 12, 30, 0, 0, 1)

    # -----------------------------------------------------------------
    # Rejected values
    # -----------------------------------------------------------------

    @pytest.mark.parametrize(
        "text", ["", "abc", " 5", "5 ", "1_000", "1,5", "01-22-20", "0x10", "١٢"]
    )
    def test_not_a_numeric_literal(self, text):
        with pytest.raises(InvalidNumericLiteralError):
            self._parse(text)

    @pytest.mark.parametrize("text", ["nan", "inf", "-Infinity"])
    def test_non_finite_rejected(self, text):
        with pytest.raises(InvalidNumericLiteralError):
            self._parse(text)

    def test_overflowing_float_rejected(self):
        """1e400 parses to inf and is rejected as non-finite."""
        with pytest.raises(InvalidNumericLiteralError):
            self._parse("1e400")

    @pytest.mark.parametrize("text", ["3e6", "1e10", "-1e6", "1e307"])
    def test_outside_datetime_range(self, text):
        with pytest.raises(DateOutOfRangeError):
            self._parse(text)


class TestShortYearDashParser:
    """Tests for ShortYearDashParser (MM-DD-YY)."""

    def _parse(self, text):
        return ShortYearDashParser().parse(text, OPTIONS)

    def test_sample(self):
        assert self._parse(SHORT_YEAR_SAMPLE) == utc(2020, 1, 22)

    @pytest.mark.parametrize(
        "text, year",
        [("01-01-00", 2000), ("01-01-69", 2069), ("01-01-70", 2060), ("01-01-99", 2089)],
    )
    def test_century_inference_boundaries(self, text, year):
        assert self._parse(text).year == year

    def test_no_days_in_month_check(self):
        assert self._parse("02-31-20") == utc(2020, 3, 2)

    def test_wrong_fragment_count(self):
        with pytest.raises(WrongFragmentCountError):
            self._parse("01-22")

    @pytest.mark.parametrize(
        "text", ["13-01-20", "00-01-20", "01-32-20", "01-00-20", "1-22-20", "01-22-2020"]
    )
    def test_invalid_parts(self, text):
        with pytest.raises(InvalidDatePartError):
            self._parse(text)


class TestSlashFullYearParser:
    """Tests for SlashFullYearParser (MM/DD/YYYY)."""

    def _parse(self, text):
        return SlashFullYearParser().parse(text, OPTIONS)

    def test_sample(self):
        assert self._parse(SLASH_SAMPLE) == utc(2019, 12, 25)

    @pytest.mark.parametrize("year", [1899, 1970, 2069, 9999])
    def test_four_digit_years_unchanged(self, year):
        assert self._parse(f"06/15/{year}").year == year

    def test_no_days_in_month_check(self):
        assert self._parse("04/31/2021") == utc(2021, 5, 1)

    def test_wrong_fragment_count(self):
        with pytest.raises(WrongFragmentCountError):
            self._parse("2020/01")

    @pytest.mark.parametrize(
        "text", ["13/01/2020", "01/32/2020", "01/01/1898", "01/01/20", "1/1/2020"]
    )
    def test_invalid_parts(self, text):
        with pytest.raises(InvalidDatePartError):
            self._parse(text)


class TestDashDateTimeParser:
    """Tests for DashDateTimeParser (YYYY-MM-DD HH:MM:SS)."""

    def _parse(self, text, options=OPTIONS):
        return DashDateTimeParser().parse(text, options)

    # -----------------------------------------------------------------
    # Default: every time field read from the hour fragment
    # -----------------------------------------------------------------

    def test_sample_uses_hour_fragment_for_all_fields(self):
        assert self._parse(DASH_DATETIME_SAMPLE) == utc(2017, 2, 13, 14, 14, 14)

    def test_minute_and_second_fragments_never_read(self):
        assert self._parse("2017-02-13 09:xx:yyy") == utc(2017, 2, 13, 9, 9, 9)

    def test_hour_out_of_range(self):
        with pytest.raises(InvalidDatePartError):
            self._parse("2017-02-13 24:00:00")

    def test_midnight(self):
        assert self._parse("2017-02-13 00:59:59") == utc(2017, 2, 13)

    # -----------------------------------------------------------------
    # Positional mode
    # -----------------------------------------------------------------

    def test_positional_reads_each_fragment(self):
        assert self._parse(DASH_DATETIME_SAMPLE, POSITIONAL) == utc(2017, 2, 13, 14, 5, 22)

    @pytest.mark.parametrize("time_text", ["14:60:00", "14:00:60", "14:5:22", "14:xx:22"])
    def test_positional_validates_minute_and_second(self, time_text):
        with pytest.raises(InvalidDatePartError):
            self._parse(f"2017-02-13 {time_text}", POSITIONAL)

    # -----------------------------------------------------------------
    # Structure and date part
    # -----------------------------------------------------------------

    @pytest.mark.parametrize(
        "text",
        ["2017-02-13", "2017-02-13  14:05:22", "2017-02-13 14:05:22 UTC", "2017-02-13T14:05:22"],
    )
    def test_wrong_space_fragment_count(self, text):
        with pytest.raises(WrongFragmentCountError):
            self._parse(text)

    @pytest.mark.parametrize("text", ["2017-02 14:05:22", "2017-02-13 14:05"])
    def test_wrong_date_or_time_fragment_count(self, text):
        with pytest.raises(WrongFragmentCountError):
            self._parse(text)

    @pytest.mark.parametrize(
        "text",
        ["1898-12-31 00:00:00", "2017-13-01 00:00:00", "2017-02-32 00:00:00", "17-02-13 00:00:00"],
    )
    def test_invalid_date_parts(self, text):
        with pytest.raises(InvalidDatePartError):
            self._parse(text)

    def test_day_overflow_then_time(self):
        assert self._parse("2019-02-30 23:00:00") == utc(2019, 3, 2, 23, 23, 23)


class TestSlashYearWidth:
    """Four-digit years are never shifted by the two-digit century rule."""

    @pytest.mark.parametrize("year", [2020, 8009, 9999])
    def test_years_at_or_above_70_not_offset(self, year):
        assert SlashFullYearParser().parse(f"01/01/{year}", OPTIONS).year == year
