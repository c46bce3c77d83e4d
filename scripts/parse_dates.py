"""
Demo script: parse spreadsheet date strings via the public API.

Usage:
    uv run python scripts/parse_dates.py "01-22-20" "44015.933692129598"
    uv run python scripts/parse_dates.py --positional-time "2017-02-13 14:05:22"
    cut -d, -f1 export.csv | uv run python scripts/parse_dates.py

Each input is logged as ``input -> ISO timestamp (format)``. With no
arguments, one string per stdin line is read. Exits with status 1 if
any input could not be parsed.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("parse_dates")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import xldt_parse

    args = sys.argv[1:] if argv is None else argv
    positional = "--positional-time" in args
    inputs = [a for a in args if a != "--positional-time"]
    if not inputs:
        inputs = [line.rstrip("\r\n") for line in sys.stdin]

    options = xldt_parse.ParseOptions(
        time_fragments="positional" if positional else "hour",
    )

    failures = 0
    for text in inputs:
        try:
            result = xldt_parse.detect_format(text, options)
        except xldt_parse.NoMatchingFormatError as e:
            log.warning("FAIL  %r: %s", text, e)
            failures += 1
            continue
        log.info("%r -> %s (%s)", text, result.value.isoformat(), result.format_name)

    log.info("Parsed %d of %d input(s).", len(inputs) - failures, len(inputs))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
