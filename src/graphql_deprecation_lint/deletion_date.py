"""Deletion date parsing for ``@deprecated`` directives.

Two layouts are accepted:

* ``DD/MM/YYYY``, for example ``25/12/2022``
* ``YYYY-MM-DD``, for example ``2022-12-25`` (the separator is configurable)

A date is resolved to midnight UTC of that calendar day.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Tuple

from .errors import DeletionDateFormatError, InvalidDeletionDateError
from .logging import LogEvent, log_debug

DAY_FIRST_SEPARATOR = "/"
DEFAULT_YEAR_FIRST_SEPARATOR = "-"

DAY_FIRST_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


def _year_first_pattern(separator: str) -> "re.Pattern[str]":
    sep = re.escape(separator)
    return re.compile(rf"[0-9]{{4}}{sep}[0-9]{{2}}{sep}[0-9]{{2}}")


def _split_layout(raw: str, separator: str) -> Tuple[str, str, str]:
    """Split ``raw`` into year, month and day strings.

    The delimiter used to split is always the one the matching pattern
    tested for.

    Raises:
        DeletionDateFormatError: If ``raw`` matches neither layout
    """
    if DAY_FIRST_PATTERN.fullmatch(raw):
        day, month, year = raw.split(DAY_FIRST_SEPARATOR)
        return year, month, day
    if _year_first_pattern(separator).fullmatch(raw):
        year, month, day = raw.split(separator)
        return year, month, day
    raise DeletionDateFormatError(
        f'Deletion date {raw!r} must be in format "DD/MM/YYYY" or "YYYY{separator}MM{separator}DD"',
        raw=raw,
    )


@dataclass(frozen=True)
class DeletionDate:
    """A validated deletion date.

    Attributes:
        raw: The date exactly as written in the schema
        year: The year component
        month: The month component (1-12)
        day: The day component
        value: Midnight UTC of that day
    """

    raw: str
    year: int
    month: int
    day: int
    value: datetime

    @classmethod
    def parse(cls, raw: Any, separator: str = DEFAULT_YEAR_FIRST_SEPARATOR) -> "DeletionDate":
        """Parse a deletion date in ``DD/MM/YYYY`` or ``YYYY-MM-DD`` layout.

        Args:
            raw: The value to parse; anything but a string is unrecognized
            separator: Separator of the year-first layout

        Returns:
            A new DeletionDate instance

        Raises:
            DeletionDateFormatError: If the value matches neither layout
            InvalidDeletionDateError: If the layout matches but the day does
                not exist (month 13, February 30, ...)
        """
        if not separator:
            raise ValueError("separator must be a non-empty string")
        if not isinstance(raw, str):
            raise DeletionDateFormatError(
                f"Deletion date must be a string, got {type(raw).__name__}",
                raw=raw,
            )

        year, month, day = _split_layout(raw, separator)

        # Calendar validation
        try:
            value = datetime(int(year), int(month), int(day), tzinfo=timezone.utc)
        except ValueError as e:
            log_debug(LogEvent.DATE_VALIDATION, "Deletion date is not a calendar date", raw=raw, error=str(e))
            raise InvalidDeletionDateError(f"Invalid deletion date: {raw}. {e}", raw=raw) from e

        return cls(raw=raw, year=value.year, month=value.month, day=value.day, value=value)

    def isoformat(self) -> str:
        """Return the canonical ``YYYY-MM-DD`` form."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def is_past(self, now: datetime) -> bool:
        """Check whether the deletion date lies strictly before ``now``.

        Args:
            now: Timezone-aware current instant

        Returns:
            True if the member may be removed
        """
        if now.tzinfo is None:
            raise ValueError("now must be timezone-aware")
        return self.value < now


def is_valid_deletion_date(raw: Any, separator: str = DEFAULT_YEAR_FIRST_SEPARATOR) -> bool:
    """Check if a value is a deletion date in an accepted layout.

    Args:
        raw: The value to check
        separator: Separator of the year-first layout

    Returns:
        True if ``DeletionDate.parse`` would succeed
    """
    try:
        DeletionDate.parse(raw, separator=separator)
    except (DeletionDateFormatError, InvalidDeletionDateError):
        return False
    return True
