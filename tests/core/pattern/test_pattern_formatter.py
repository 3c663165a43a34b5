"""Tests for PatternFormatter."""

import datetime

import pytest

from datekit.core.pattern import PatternFormatter
from datekit.exceptions import DateParseError, InvalidInputError, PatternError


class TestFormat:
    """Tests for formatting dates and datetimes."""

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("d MMM uuuu", "3 Jan 2024"),
            ("dd/MM/uuuu", "03/01/2024"),
            ("MM-dd-yyyy", "01-03-2024"),
            ("EEEE, MMMM d, yyyy", "Wednesday, January 3, 2024"),
            ("EEE dd.MM.yy", "Wed 03.01.24"),
            ("'Day' d", "Day 3"),
        ],
        ids=["default", "numeric", "us", "long", "short", "literal"],
    )
    def test_format_date(self, pattern, expected):
        """Test formatting a date with various patterns."""
        assert PatternFormatter(pattern).format(datetime.date(2024, 1, 3)) == expected

    def test_format_datetime(self):
        """Test formatting a datetime with time fields."""
        formatter = PatternFormatter("uuuu-MM-dd HH:mm:ss")
        value = datetime.datetime(2024, 1, 3, 9, 5, 7)
        assert formatter.format(value) == "2024-01-03 09:05:07"

    @pytest.mark.parametrize(
        "hour,minute,expected",
        [
            (0, 30, "12:30 AM"),
            (11, 59, "11:59 AM"),
            (12, 0, "12:00 PM"),
            (13, 5, "1:05 PM"),
        ],
        ids=["midnight", "morning", "noon", "afternoon"],
    )
    def test_format_clock_hour(self, hour, minute, expected):
        """Test formatting a twelve hour clock."""
        value = datetime.datetime(2024, 1, 3, hour, minute)
        assert PatternFormatter("h:mm a").format(value) == expected

    def test_format_datetime_with_date_pattern(self):
        """Test that the time part is ignored by a date-only pattern."""
        value = datetime.datetime(2024, 1, 3, 23, 59)
        assert PatternFormatter("d MMM uuuu").format(value) == "3 Jan 2024"

    def test_time_field_on_plain_date(self):
        """Test that time fields cannot be rendered from a date."""
        with pytest.raises(PatternError, match="field 'HH' requires a time value"):
            PatternFormatter("uuuu-MM-dd HH:mm").format(datetime.date(2024, 1, 3))

    @pytest.mark.parametrize(
        "pattern, symbol",
        [("h a", "h"), ("a", "a"), ("mm", "mm"), ("ss", "ss")],
        ids=["clock-hour", "am-pm", "minute", "second"],
    )
    def test_every_time_field_on_plain_date(self, pattern, symbol):
        """Test that each time field reports itself when given a date."""
        with pytest.raises(PatternError, match=f"field '{symbol}' requires"):
            PatternFormatter(pattern).format(datetime.date(2024, 1, 3))

    def test_format_rejects_non_dates(self):
        """Test that non date values are rejected."""
        with pytest.raises(InvalidInputError):
            PatternFormatter("d MMM uuuu").format("2024-01-03")
        with pytest.raises(InvalidInputError):
            PatternFormatter("d MMM uuuu").format(None)


class TestParseDate:
    """Tests for parsing dates."""

    @pytest.mark.parametrize(
        "pattern,text,expected",
        [
            ("d MMM uuuu", "3 Jan 2024", datetime.date(2024, 1, 3)),
            ("d MMM uuuu", "15 Jan 2024", datetime.date(2024, 1, 15)),
            ("MM-dd-uuuu", "01-15-2024", datetime.date(2024, 1, 15)),
            ("dd.MM.yy", "03.01.24", datetime.date(2024, 1, 3)),
            ("MMMM d, uuuu", "February 29, 2024", datetime.date(2024, 2, 29)),
            ("EEE MM-dd-uuuu", "Thu 01-04-2024", datetime.date(2024, 1, 4)),
            ("uuuuMMdd", "20240115", datetime.date(2024, 1, 15)),
        ],
        ids=["default", "two-digit-day", "us", "short-year", "leap", "dow", "compact"],
    )
    def test_parse_date(self, pattern, text, expected):
        """Test parsing well formed text."""
        assert PatternFormatter(pattern).parse_date(text) == expected

    @pytest.mark.parametrize(
        "pattern,text",
        [
            ("dd/MM/uuuu", "3/01/2024"),
            ("d MMM uuuu", "3 jan 2024"),
            ("d MMM uuuu", "3 Jan 2024x"),
            ("MM-dd-uuuu", "01/15/2024"),
            ("MM-dd-uuuu", ""),
        ],
        ids=["short-field", "case", "trailing", "separator", "empty"],
    )
    def test_parse_mismatch(self, pattern, text):
        """Test that text not matching the pattern is rejected."""
        with pytest.raises(DateParseError, match="could not be parsed"):
            PatternFormatter(pattern).parse_date(text)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("02-30-2024", datetime.date(2024, 2, 29)),
            ("02-31-2020", datetime.date(2020, 2, 29)),
            ("02-29-2023", datetime.date(2023, 2, 28)),
            ("04-31-2021", datetime.date(2021, 4, 30)),
            ("12-31-2021", datetime.date(2021, 12, 31)),
        ],
        ids=["leap-30", "leap-31", "non-leap-29", "april-31", "december-31"],
    )
    def test_parse_day_past_month_end(self, text, expected):
        """Test that days past the end of the month resolve to its last day."""
        assert PatternFormatter("MM-dd-uuuu").parse_date(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["02-00-2024", "02-32-2024", "13-15-2024", "00-15-2024"],
        ids=["day-00", "day-32", "month-13", "month-00"],
    )
    def test_parse_out_of_range_fields(self, text):
        """Test that day and month values outside their ranges are rejected."""
        with pytest.raises(DateParseError, match="not a valid date"):
            PatternFormatter("MM-dd-uuuu").parse_date(text)

    def test_parse_non_ascii_digits(self):
        """Test that only ASCII digits are read as numbers."""
        with pytest.raises(DateParseError, match="could not be parsed"):
            PatternFormatter("MM-dd-uuuu").parse_date("01-15-19\u0669\u0669")

    def test_parse_missing_year(self):
        """Test that a pattern without a year cannot produce a date."""
        with pytest.raises(DateParseError, match="does not provide: year"):
            PatternFormatter("MM-dd").parse_date("01-15")

    def test_parse_wrong_day_of_week(self):
        """Test that the day of week must agree with the date."""
        with pytest.raises(DateParseError, match="names Friday"):
            PatternFormatter("EEE MM-dd-uuuu").parse_date("Fri 01-04-2024")

    def test_parse_conflicting_fields(self):
        """Test that repeated fields must agree."""
        with pytest.raises(DateParseError, match="conflicting values"):
            PatternFormatter("MM-dd-uuuu (MM)").parse_date("01-15-2024 (02)")

    def test_parse_error_attributes(self):
        """Test that the parse error carries the input and pattern."""
        with pytest.raises(DateParseError) as exc_info:
            PatternFormatter("MM-dd-uuuu").parse_date("nope")
        assert exc_info.value.input_value == "nope"
        assert exc_info.value.pattern == "MM-dd-uuuu"


class TestParseDatetime:
    """Tests for parsing datetimes."""

    def test_parse_datetime(self):
        """Test parsing a full datetime."""
        formatter = PatternFormatter("uuuu-MM-dd HH:mm:ss")
        assert formatter.parse_datetime("2024-01-03 09:05:07") == datetime.datetime(
            2024, 1, 3, 9, 5, 7
        )

    def test_parse_datetime_defaults_time(self):
        """Test that missing time fields default to midnight."""
        formatter = PatternFormatter("MM-dd-uuuu")
        assert formatter.parse_datetime("01-15-2024") == datetime.datetime(2024, 1, 15)

    @pytest.mark.parametrize(
        "text,expected_hour,expected_minute",
        [("12:30 AM", 0, 30), ("1:05 PM", 13, 5), ("12:00 PM", 12, 0)],
        ids=["midnight", "afternoon", "noon"],
    )
    def test_parse_clock_hour(self, text, expected_hour, expected_minute):
        """Test parsing a twelve hour clock."""
        formatter = PatternFormatter("uuuu-MM-dd h:mm a")
        parsed = formatter.parse_datetime(f"2024-01-03 {text}")
        assert parsed.hour == expected_hour
        assert parsed.minute == expected_minute

    def test_parse_clock_hour_without_am_pm(self):
        """Test that a clock hour needs an AM/PM marker."""
        with pytest.raises(DateParseError, match="without AM/PM"):
            PatternFormatter("uuuu-MM-dd hh:mm").parse_datetime("2024-01-03 01:05")

    def test_parse_invalid_time(self):
        """Test that out of range hours are rejected."""
        with pytest.raises(DateParseError, match="not a valid time"):
            PatternFormatter("uuuu-MM-dd HH:mm").parse_datetime("2024-01-03 25:00")

    def test_parse_date_discards_time(self):
        """Test that parse_date drops matched time fields."""
        formatter = PatternFormatter("uuuu-MM-dd HH:mm")
        assert formatter.parse_date("2024-01-03 10:30") == datetime.date(2024, 1, 3)


class TestPatternFormatter:
    """Tests for construction and identity."""

    @pytest.mark.parametrize("pattern", [None, ""], ids=["none", "empty"])
    def test_requires_pattern(self, pattern):
        """Test that a pattern must be provided."""
        with pytest.raises(PatternError, match="non-empty pattern"):
            PatternFormatter(pattern)

    def test_equality(self):
        """Test that formatters are compared by pattern."""
        assert PatternFormatter("d MMM uuuu") == PatternFormatter("d MMM uuuu")
        assert PatternFormatter("d MMM uuuu") != PatternFormatter("MM-dd-uuuu")
        assert len({PatternFormatter("dd"), PatternFormatter("dd")}) == 1

    def test_repr(self):
        """Test the formatter representation."""
        assert repr(PatternFormatter("dd")) == "PatternFormatter('dd')"

    def test_has_time(self):
        """Test detection of time fields."""
        assert PatternFormatter("uuuu-MM-dd HH:mm").has_time is True
        assert PatternFormatter("d MMM uuuu").has_time is False
