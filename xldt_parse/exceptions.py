"""
Custom exception hierarchy for xldt-parse.

Every failure is an ordinary exception; nothing here is fatal. Individual
parsers raise the specific subclasses, and the dispatcher swallows those
and surfaces only ``NoMatchingFormatError`` once the whole chain is
exhausted.
"""


class XlDtParseError(Exception):
    """Base exception for all xldt-parse errors."""


class InvalidNumericLiteralError(XlDtParseError):
    """Raised when a string is not a finite decimal floating-point literal."""


class WrongFragmentCountError(XlDtParseError):
    """Raised when splitting on a delimiter yields the wrong number of fragments."""


class InvalidDatePartError(XlDtParseError):
    """Raised when a date/time fragment fails validation.

    Covers wrong length, non-digit content and out-of-range values alike;
    callers only need to know the fragment was rejected.
    """


class DateOutOfRangeError(XlDtParseError):
    """Raised when a serial day count lands outside the representable datetime range."""


class NoMatchingFormatError(XlDtParseError):
    """Raised when no enabled parser can handle the input string."""


class OptionsValidationError(XlDtParseError):
    """Raised when an options YAML file is empty or unusable."""
