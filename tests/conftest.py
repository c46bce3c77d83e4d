"""
Shared test fixtures and sample strings for xldt-parse tests.

Sample inputs are defined here as module-level constants so every test
module draws from the same set of real-world spreadsheet cell values.
"""

from datetime import datetime, timezone

import pytest

# ---------------------------------------------------------------------------
# Sample cell strings -- one per supported format
# ---------------------------------------------------------------------------
SERIAL_SAMPLE = "44015.933692129598"
SHORT_YEAR_SAMPLE = "01-22-20"
SLASH_SAMPLE = "12/25/2019"
DASH_DATETIME_SAMPLE = "2017-02-13 14:05:22"


def utc(*args: int) -> datetime:
    """Shorthand for a UTC datetime."""
    return datetime(*args, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (exercises the public API end to end)",
    )
