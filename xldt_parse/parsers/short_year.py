"""
Short-year dash parser for ``MM-DD-YY`` strings.

Two-digit years go through ``infer_century``: 00-69 become 2000-2069 and
70-99 become 2060-2089.
"""

from __future__ import annotations

from datetime import datetime

from xldt_parse.config import ParseOptions
from xldt_parse.parsers.base import BaseParser, split_fragments
from xldt_parse.parts import build_datetime, infer_century, parse_part


class ShortYearDashParser(BaseParser):
    """Parser for ``MM-DD-YY``."""

    format_name = "short_year_dash"

    def parse(self, text: str, options: ParseOptions) -> datetime:
        month_text, day_text, year_text = split_fragments(text, "-", 3)
        month = parse_part(month_text, 2, 1, 12)
        day = parse_part(day_text, 2, 1, 31)
        year = parse_part(year_text, 2, 0, 99)
        return build_datetime(infer_century(year), month, day)
