"""
xldt-parse: parse spreadsheet-exported date strings into UTC datetimes.

Public API surface:

- ``parse_date_string(text, options=None)`` -- **recommended entry point**.
  Tries each supported format in priority order and returns the first
  successful parse as a timezone-aware ``datetime``.

- ``detect_format(text, options=None)`` -- Same dispatch, but returns a
  ``ParseResult`` that also names the format that matched.

- ``parse_dates(series, ...)`` / ``parse_date_columns(df, columns, ...)``
  -- Apply the dispatcher to pandas columns.

- ``ParseOptions`` / ``load_options()`` / ``save_options()`` -- Optional
  settings (enabled formats, time fragment handling) with YAML I/O.

Supported formats, in priority order:

=================  ========================
serial             ``44015.933692129598``
short_year_dash    ``01-22-20``
slash_full_year    ``01/22/2020``
dash_datetime      ``2017-02-13 14:05:22``
=================  ========================

Examples::

    >>> import xldt_parse
    >>> xldt_parse.parse_date_string("01-22-20")
    datetime.datetime(2020, 1, 22, 0, 0, tzinfo=datetime.timezone.utc)
    >>> xldt_parse.detect_format("44015").format_name
    'serial'
"""

from __future__ import annotations

from xldt_parse.config import ParseOptions, load_options, save_options
from xldt_parse.detect import detect_format, parse_date_string
from xldt_parse.exceptions import (
    DateOutOfRangeError,
    InvalidDatePartError,
    InvalidNumericLiteralError,
    NoMatchingFormatError,
    OptionsValidationError,
    WrongFragmentCountError,
    XlDtParseError,
)
from xldt_parse.parsers.base import ParseResult
from xldt_parse.parts import EXCEL_EPOCH
from xldt_parse.transforms.dates import parse_date_columns, parse_dates

__all__ = [
    "parse_date_string",
    "detect_format",
    "parse_dates",
    "parse_date_columns",
    "ParseOptions",
    "ParseResult",
    "load_options",
    "save_options",
    "EXCEL_EPOCH",
    "XlDtParseError",
    "InvalidNumericLiteralError",
    "WrongFragmentCountError",
    "InvalidDatePartError",
    "DateOutOfRangeError",
    "NoMatchingFormatError",
    "OptionsValidationError",
]
