"""
Base parser ABC for xldt-parse.

Every format parser honours the same two-outcome contract: ``parse()``
either returns a fully built UTC ``datetime`` or raises an
``XlDtParseError`` subclass. There are no partial results.

Why an ABC:
- The dispatcher treats the parsers as an ordered list of interchangeable
  attempts; a shared interface keeps that loop trivial.
- Each parser is independently testable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from xldt_parse.config import ParseOptions
from xldt_parse.exceptions import WrongFragmentCountError


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a successful dispatch.

    Attributes:
        value: The parsed timestamp (always UTC).
        format_name: Name of the parser that claimed the input.
    """
    value: datetime
    format_name: str


def split_fragments(text: str, sep: str, count: int) -> list[str]:
    """Split *text* on *sep*, requiring exactly *count* fragments."""
    fragments = text.split(sep)
    if len(fragments) != count:
        raise WrongFragmentCountError(
            f"expected {count} fragments split on {sep!r}, got {len(fragments)}"
        )
    return fragments


class BaseParser(ABC):
    """Abstract base class for spreadsheet date string parsers.

    Subclasses set ``format_name`` (the key used in ``ParseOptions.formats``)
    and implement parse().
    """

    format_name: str = ""

    @abstractmethod
    def parse(self, text: str, options: ParseOptions) -> datetime:
        """Parse *text* into a UTC datetime.

        Args:
            text: The raw cell string. No trimming is applied.
            options: Active parse options.

        Returns:
            A timezone-aware datetime in UTC.

        Raises:
            XlDtParseError: If *text* is not in this parser's format.
        """
