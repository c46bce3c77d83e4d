"""
Slash full-year parser for ``MM/DD/YYYY`` strings.
"""

from __future__ import annotations

from datetime import datetime

from xldt_parse.config import ParseOptions
from xldt_parse.parsers.base import BaseParser, split_fragments
from xldt_parse.parts import build_datetime, infer_century, parse_part


class SlashFullYearParser(BaseParser):
    """Parser for ``MM/DD/YYYY``.

    The year still passes through ``infer_century`` like the short-year
    format does. ``infer_century`` only re-maps values below 100, so with
    the year bounded to [1899, 9999] the value never changes. A stricter
    reading of the shared rule would add 1990 to every year of 70 or more
    regardless of width (2020 -> 4010); that reading is not implemented,
    since it pushes most of the accepted range past year 9999.
    """

    format_name = "slash_full_year"

    def parse(self, text: str, options: ParseOptions) -> datetime:
        month_text, day_text, year_text = split_fragments(text, "/", 3)
        month = parse_part(month_text, 2, 1, 12)
        day = parse_part(day_text, 2, 1, 31)
        year = parse_part(year_text, 4, 1899, 9999)
        return build_datetime(infer_century(year), month, day)
