"""
Parse options and YAML I/O for xldt-parse.

``ParseOptions`` controls which format parsers the dispatcher tries (and
in which order) and how the time part of ``YYYY-MM-DD HH:MM:SS`` strings
is read. The defaults keep the long-standing behaviour of the parsers, so
``parse_date_string(s)`` and ``parse_date_string(s, ParseOptions())``
are equivalent.

Key functions:
- load_options(path) -> ParseOptions: Load and validate from YAML.
- save_options(options, path): Serialize to YAML.

Options are frozen; one instance may be shared across threads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from xldt_parse.exceptions import OptionsValidationError

logger = logging.getLogger(__name__)

FormatName = Literal["serial", "short_year_dash", "slash_full_year", "dash_datetime"]

# Canonical priority order: a bare number is always claimed as a serial first.
DEFAULT_FORMATS: tuple[FormatName, ...] = (
    "serial",
    "short_year_dash",
    "slash_full_year",
    "dash_datetime",
)


class ParseOptions(BaseModel):
    """Dispatcher and parser settings."""

    model_config = ConfigDict(frozen=True)

    formats: list[FormatName] = Field(
        default_factory=lambda: list(DEFAULT_FORMATS),
        description="Enabled parsers, tried in the listed order",
    )
    time_fragments: Literal["hour", "positional"] = Field(
        "hour",
        description=(
            "'hour' validates hour, minute and second all from the first "
            "time fragment (legacy default); 'positional' reads each "
            "from its own fragment"
        ),
    )

    @model_validator(mode="after")
    def _check_formats(self) -> ParseOptions:
        """Validate that at least one format is enabled and none repeats."""
        if not self.formats:
            raise ValueError("At least one format must be enabled.")
        duplicates = sorted({f for f in self.formats if self.formats.count(f) > 1})
        if duplicates:
            raise ValueError(f"Formats listed more than once: {duplicates}")
        return self


def load_options(path: str | Path) -> ParseOptions:
    """Load and validate an options YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        OptionsValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise OptionsValidationError(f"Options file is empty: {path}")
    logger.info("Loaded parse options from %s", path)
    return ParseOptions.model_validate(raw)


def save_options(options: ParseOptions, path: str | Path) -> None:
    """Serialize ParseOptions to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = options.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# xldt-parse options\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved parse options to %s", path)
