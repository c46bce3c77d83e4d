"""
Serial day-count parser.

Spreadsheets store timestamps as a floating-point number of days since
1899-12-30 (the fractional part is the time of day). Any finite value is
accepted, negative ones included; the only limit is the range Python's
``datetime`` can represent.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta

from xldt_parse.config import ParseOptions
from xldt_parse.exceptions import DateOutOfRangeError, InvalidNumericLiteralError
from xldt_parse.parsers.base import BaseParser
from xldt_parse.parts import EXCEL_EPOCH, SECONDS_PER_DAY

# Plain decimal literal: no surrounding whitespace, no underscores
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class SerialParser(BaseParser):
    """Parser for serial day counts like ``44015.933692129598``."""

    format_name = "serial"

    def parse(self, text: str, options: ParseOptions) -> datetime:
        if not _FLOAT_PATTERN.fullmatch(text):
            raise InvalidNumericLiteralError(f"not a numeric literal: {text!r}")
        days = float(text)
        if not math.isfinite(days):
            raise InvalidNumericLiteralError(f"not a finite number: {text!r}")

        try:
            # Truncate toward zero to whole seconds
            seconds = int(days * SECONDS_PER_DAY)
            return EXCEL_EPOCH + timedelta(seconds=seconds)
        except OverflowError as e:
            raise DateOutOfRangeError(
                f"{days} days from the epoch is outside the datetime range"
            ) from e
