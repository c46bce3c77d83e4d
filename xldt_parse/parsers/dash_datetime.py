"""
Dashed date + time parser for ``YYYY-MM-DD HH:MM:SS`` strings.

Time handling has two modes (``ParseOptions.time_fragments``):

- ``"hour"`` (default): the first time fragment is validated as the hour
  in [0, 23] and then re-validated as the minute and the second in
  [0, 59]. The second and third fragments are never read, so
  ``14:05:22`` yields 14:14:14. Existing callers depend on this.
- ``"positional"``: hour, minute and second each come from their own
  fragment.
"""

from __future__ import annotations

from datetime import datetime

from xldt_parse.config import ParseOptions
from xldt_parse.parsers.base import BaseParser, split_fragments
from xldt_parse.parts import build_datetime, parse_part


class DashDateTimeParser(BaseParser):
    """Parser for ``YYYY-MM-DD HH:MM:SS``."""

    format_name = "dash_datetime"

    def parse(self, text: str, options: ParseOptions) -> datetime:
        date_text, time_text = split_fragments(text, " ", 2)

        year_text, month_text, day_text = split_fragments(date_text, "-", 3)
        year = parse_part(year_text, 4, 1899, 9999)
        month = parse_part(month_text, 2, 1, 12)
        day = parse_part(day_text, 2, 1, 31)

        time_parts = split_fragments(time_text, ":", 3)
        if options.time_fragments == "positional":
            hour_text, minute_text, second_text = time_parts
        else:
            hour_text = minute_text = second_text = time_parts[0]
        hours = parse_part(hour_text, 2, 0, 23)
        minutes = parse_part(minute_text, 2, 0, 59)
        seconds = parse_part(second_text, 2, 0, 59)

        return build_datetime(
            year, month, day, seconds=hours * 3600 + minutes * 60 + seconds
        )
