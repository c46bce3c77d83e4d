"""
Format dispatch for spreadsheet date strings.

The four formats carry no explicit signal saying which one a string is
in, so detection is simply trying each parser in priority order:
serial -> short_year_dash -> slash_full_year -> dash_datetime.

Design: Strategy Pattern
- Each format is a BaseParser subclass with a shared ``parse()`` contract.
- detect_format() returns a ParseResult naming the parser that succeeded.
- Per-parser failures are logged at DEBUG and discarded; callers only
  ever see NoMatchingFormatError.

Priority matters: a bare number is always claimed by the serial parser
before any structured format is tried.
"""

from __future__ import annotations

import logging
from datetime import datetime

from xldt_parse.config import ParseOptions
from xldt_parse.exceptions import NoMatchingFormatError, XlDtParseError
from xldt_parse.parsers.base import BaseParser, ParseResult

logger = logging.getLogger(__name__)

# Maps ParseOptions.formats names to parser classes
_PARSER_MAP: dict[str, type[BaseParser]] = {}

_DEFAULT_OPTIONS = ParseOptions()


def _get_parser_map() -> dict[str, type[BaseParser]]:
    """Lazily build the parser map on first dispatch."""
    if not _PARSER_MAP:
        from xldt_parse.parsers.dash_datetime import DashDateTimeParser
        from xldt_parse.parsers.serial import SerialParser
        from xldt_parse.parsers.short_year import ShortYearDashParser
        from xldt_parse.parsers.slash import SlashFullYearParser

        for parser_cls in (
            SerialParser,
            ShortYearDashParser,
            SlashFullYearParser,
            DashDateTimeParser,
        ):
            _PARSER_MAP[parser_cls.format_name] = parser_cls
    return _PARSER_MAP


def detect_format(text: str, options: ParseOptions | None = None) -> ParseResult:
    """Parse *text* with the first enabled parser that accepts it.

    Args:
        text: Raw cell string. Not trimmed or otherwise normalized.
        options: Parse options; defaults give the legacy behaviour.

    Returns:
        ParseResult with the UTC datetime and the winning format name.

    Raises:
        NoMatchingFormatError: If every enabled parser rejects *text*.
    """
    if options is None:
        options = _DEFAULT_OPTIONS

    parser_map = _get_parser_map()

    for name in options.formats:
        parser = parser_map[name]()
        try:
            value = parser.parse(text, options)
        except XlDtParseError as e:
            logger.debug("%s rejected %r: %s", name, text, e)
            continue
        logger.debug("Detected format '%s' for %r", name, text)
        return ParseResult(value=value, format_name=name)

    raise NoMatchingFormatError(
        f"no suitable parsing methods for {text!r} "
        f"(tried {', '.join(options.formats)})"
    )


def parse_date_string(text: str, options: ParseOptions | None = None) -> datetime:
    """Parse a spreadsheet date string into a UTC datetime.

    Raises:
        NoMatchingFormatError: If no supported format matches.
    """
    return detect_format(text, options).value
