"""Tests for deletion_date.py."""

import re
from datetime import datetime, timezone

import pytest

from graphql_deprecation_lint.deletion_date import (
    DAY_FIRST_PATTERN,
    DeletionDate,
    _year_first_pattern,
    is_valid_deletion_date,
)
from graphql_deprecation_lint.errors import DeletionDateFormatError, InvalidDeletionDateError


class TestDeletionDateParse:
    """Tests for DeletionDate.parse."""

    def test_day_first_layout(self) -> None:
        """DD/MM/YYYY is read as day, month, year."""
        parsed = DeletionDate.parse("25/12/2022")
        assert (parsed.year, parsed.month, parsed.day) == (2022, 12, 25)
        assert parsed.raw == "25/12/2022"
        assert parsed.value == datetime(2022, 12, 25, tzinfo=timezone.utc)
        assert parsed.isoformat() == "2022-12-25"

    def test_year_first_layout(self) -> None:
        """YYYY-MM-DD is read as year, month, day."""
        parsed = DeletionDate.parse("2022-03-04")
        assert (parsed.year, parsed.month, parsed.day) == (2022, 3, 4)
        assert parsed.raw == "2022-03-04"

    def test_ambiguous_day_month_is_day_first(self) -> None:
        """01/02/2022 is the first of February."""
        parsed = DeletionDate.parse("01/02/2022")
        assert parsed.isoformat() == "2022-02-01"

    def test_custom_separator(self) -> None:
        """The year-first separator can be changed."""
        parsed = DeletionDate.parse("2022.12.25", separator=".")
        assert parsed.isoformat() == "2022-12-25"

        # "." is matched literally, not as a regex wildcard
        with pytest.raises(DeletionDateFormatError):
            DeletionDate.parse("2022x12x25", separator=".")

    def test_separator_change_rejects_default(self) -> None:
        """Once changed, the hyphen layout is no longer recognized."""
        with pytest.raises(DeletionDateFormatError):
            DeletionDate.parse("2022-12-25", separator=".")

    def test_empty_separator(self) -> None:
        """An empty separator is a caller error."""
        with pytest.raises(ValueError):
            DeletionDate.parse("20221225", separator="")

    @pytest.mark.parametrize(
        "raw",
        [
            "2022",
            "25-12-2022",
            "2022/12/25",
            "2022-1-05",
            "5/12/2022",
            "25/12/2022\n",
            "\t2022-12-25",
            "٢٥/١٢/٢٠٢٢",
            "",
        ],
    )
    def test_unrecognized_layout(self, raw: str) -> None:
        """Anything but an exact layout match is a format error."""
        with pytest.raises(DeletionDateFormatError) as exc_info:
            DeletionDate.parse(raw)
        assert exc_info.value.raw == raw

    @pytest.mark.parametrize("raw", [None, 20221225, 1.5, ["25/12/2022"], {"date": "25/12/2022"}])
    def test_non_string(self, raw: object) -> None:
        """Non-string values never match a layout."""
        with pytest.raises(DeletionDateFormatError):
            DeletionDate.parse(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "31/02/2022",
            "30/02/2024",
            "29/02/2023",
            "31/06/2022",
            "01/13/2022",
            "00/12/2022",
            "12/00/2022",
            "01/01/0000",
            "2022-02-29",
            "2022-00-10",
        ],
    )
    def test_invalid_calendar_date(self, raw: str) -> None:
        """Recognized layouts that denote no real day."""
        with pytest.raises(InvalidDeletionDateError) as exc_info:
            DeletionDate.parse(raw)
        assert exc_info.value.raw == raw

    @pytest.mark.parametrize("raw", ["29/02/2024", "29/02/2000", "2024-02-29", "31/12/9999", "01/01/0001"])
    def test_edge_dates(self, raw: str) -> None:
        """Leap days and range limits that do exist."""
        assert is_valid_deletion_date(raw)


class TestLayoutConsistency:
    """Every recognized string splits with the delimiter it was tested for."""

    @pytest.mark.parametrize("separator", ["-", "/", ".", "_"])
    def test_recognizer_and_splitter_agree(self, separator: str) -> None:
        """Year-first strings built with a separator parse with that separator."""
        raw = separator.join(["2021", "07", "14"])
        assert _year_first_pattern(separator).fullmatch(raw)
        assert DeletionDate.parse(raw, separator=separator).isoformat() == "2021-07-14"

    def test_day_first_pattern_is_slash_only(self) -> None:
        """The day-first layout uses slashes."""
        assert DAY_FIRST_PATTERN.fullmatch("14/07/2021")
        assert not DAY_FIRST_PATTERN.fullmatch("14-07-2021")
        assert isinstance(DAY_FIRST_PATTERN, re.Pattern)


class TestIsPast:
    """Tests for DeletionDate.is_past."""

    def test_strictly_before(self) -> None:
        """Only instants after midnight of the day count as past."""
        parsed = DeletionDate.parse("25/12/2022")
        assert parsed.is_past(datetime(2022, 12, 25, 0, 0, 1, tzinfo=timezone.utc))
        assert not parsed.is_past(datetime(2022, 12, 25, tzinfo=timezone.utc))
        assert not parsed.is_past(datetime(2022, 12, 24, 23, 59, tzinfo=timezone.utc))

    def test_naive_now_rejected(self) -> None:
        """Naive datetimes cannot be compared with UTC dates."""
        with pytest.raises(ValueError):
            DeletionDate.parse("25/12/2022").is_past(datetime(2023, 1, 1))


class TestIsValidDeletionDate:
    """Tests for is_valid_deletion_date."""

    def test_predicate(self) -> None:
        """The predicate mirrors parse."""
        assert is_valid_deletion_date("25/12/2022")
        assert is_valid_deletion_date("2022-12-25")
        assert not is_valid_deletion_date("31/02/2022")
        assert not is_valid_deletion_date("2022/12/25")
        assert not is_valid_deletion_date(None)
