"""
Date column transform for xldt-parse.

Spreadsheet exports read through pandas usually give date columns as a
mix of strings (``"01-22-20"``), floats (serial day counts the reader
did not convert), cells the reader already turned into timestamps, and
missing cells. This transform:

1. Maps missing cells (``None``, ``NaN``, ``pd.NA``, ``NaT``) to ``NaT``.
2. Keeps ``datetime`` / ``pd.Timestamp`` cells as they are, converted to
   UTC (naive values are taken to be UTC already).
3. Stringifies other non-string scalars so numeric serials reach the
   serial parser.
4. Runs every string through ``detect_format()``.
5. Returns a ``datetime64[us, UTC]`` Series aligned to the input index.

Microsecond resolution covers the parsers' full year range (1-9999);
nanosecond resolution would stop at 1677-2262.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Literal

import numpy as np
import pandas as pd

from xldt_parse.config import ParseOptions
from xldt_parse.detect import detect_format
from xldt_parse.exceptions import NoMatchingFormatError

logger = logging.getLogger(__name__)

_ERROR_MODES = ("raise", "coerce")


def _to_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime, or convert an aware one to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_datetime64(value: datetime | None) -> np.datetime64:
    """Convert a UTC datetime (or None) to a naive microsecond datetime64."""
    if value is None:
        return np.datetime64("NaT", "us")
    return np.datetime64(value.replace(tzinfo=None), "us")


def parse_dates(
    series: pd.Series,
    options: ParseOptions | None = None,
    errors: Literal["raise", "coerce"] = "coerce",
) -> pd.Series:
    """Parse every cell of *series* as a spreadsheet date string.

    Args:
        series: Input column. Not modified.
        options: Parse options forwarded to the dispatcher.
        errors: ``"coerce"`` turns unparseable cells into ``NaT``;
            ``"raise"`` re-raises the first ``NoMatchingFormatError``.

    Returns:
        A ``datetime64[us, UTC]`` Series with the same index and name.

    Raises:
        ValueError: If *errors* is not ``"raise"`` or ``"coerce"``.
        NoMatchingFormatError: With ``errors="raise"``, on the first bad cell.
    """
    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {_ERROR_MODES}, got {errors!r}")

    values: list[datetime | None] = []
    failed = 0
    for cell in series:
        if cell is None or (not isinstance(cell, str) and pd.isna(cell)):
            values.append(None)
            continue
        if isinstance(cell, datetime):
            values.append(_to_utc(cell))
            continue
        text = cell if isinstance(cell, str) else str(cell)
        try:
            values.append(detect_format(text, options).value)
        except NoMatchingFormatError:
            if errors == "raise":
                raise
            failed += 1
            logger.warning("Unparseable date cell in %r: %r", series.name, text)
            values.append(None)

    logger.info(
        "Parsed date column %r: %d cells, %d unparseable",
        series.name, len(values), failed,
    )
    stamps = np.array([_to_datetime64(v) for v in values], dtype="datetime64[us]")
    result = pd.Series(stamps, index=series.index, name=series.name)
    return result.dt.tz_localize("UTC")


def parse_date_columns(
    df: pd.DataFrame,
    columns: list[str],
    options: ParseOptions | None = None,
    errors: Literal["raise", "coerce"] = "coerce",
) -> pd.DataFrame:
    """Return a copy of *df* with each of *columns* parsed by ``parse_dates()``.

    Raises:
        KeyError: If a requested column is not in *df*.
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not found: {missing}")

    df = df.copy()
    for col in columns:
        df[col] = parse_dates(df[col], options=options, errors=errors)
    return df
