"""
Build errors.

Every error aborts the whole build: there is no partial schematic and no
skipping of malformed entities. All kinds derive from ParseError, which is a
ValueError so callers that only care about "invalid input" can catch that.
"""

from typing import Optional


class ParseError(ValueError):
    """Input is not a valid schematic."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} at line {line}, column {column}"
        super().__init__(message)


class GrammarError(ParseError):
    """Text does not conform to the schematic grammar."""


class NumberFormatError(ParseError):
    """Digit run cannot be parsed as an integer of the configured width."""

    def __init__(self, text: str, line: Optional[int] = None, column: Optional[int] = None,
                 reason: str = "invalid integer"):
        self.text = text
        super().__init__(f"{reason} {text!r}", line, column)


class CoordinateRangeError(ParseError):
    """Span position or length cannot be represented as a coordinate."""
