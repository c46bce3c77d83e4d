"""
Shared building blocks for the format parsers.

- ``parse_part``: validate a fixed-width digit fragment and bound its value.
- ``infer_century``: map two-digit spreadsheet years onto four-digit years.
- ``build_datetime``: assemble a UTC datetime without calendar validation.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from xldt_parse.exceptions import InvalidDatePartError

SECONDS_PER_DAY = 86400

# Day zero of the spreadsheet serial format (Excel's 1900 date system).
EXCEL_EPOCH = datetime(1899, 12, 30, tzinfo=timezone.utc)

# Offsets applied to two-digit years below / at-or-above the 70 pivot
PRE_1970_YEAR_ADD = 2000
POST_1970_YEAR_ADD = 1990


def parse_part(text: str, length: int, minimum: int, maximum: int) -> int:
    """Convert a fixed-width digit fragment to an int within ``[minimum, maximum]``.

    Signs, whitespace and non-ASCII digits are all rejected.

    Raises:
        InvalidDatePartError: On wrong length, non-digit content, or a
            value outside the inclusive range.
    """
    if len(text) != length or not (text.isascii() and text.isdigit()):
        raise InvalidDatePartError(
            f"expected {length} digits, got {text!r}"
        )
    value = int(text)
    if value < minimum or value > maximum:
        raise InvalidDatePartError(
            f"value {value} outside [{minimum}, {maximum}]"
        )
    return value


def infer_century(year: int) -> int:
    """Expand a two-digit year: ``<70`` gets 2000 added, ``70..99`` gets 1990.

    The split is deliberately non-monotonic (69 -> 2069, 70 -> 2060).
    Years of 100 and above are already four-digit and pass through.
    """
    if year < 70:
        return year + PRE_1970_YEAR_ADD
    if year < 100:
        return year + POST_1970_YEAR_ADD
    return year


def build_datetime(
    year: int,
    month: int,
    day: int,
    seconds: int = 0,
) -> datetime:
    """Build a UTC datetime from already-bounded parts.

    Days past the end of the month roll forward into the next one
    (``2020-02-31`` becomes ``2020-03-02``); ``seconds`` is a
    time-of-day offset added on top.
    """
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    return start + timedelta(days=day - 1, seconds=seconds)
