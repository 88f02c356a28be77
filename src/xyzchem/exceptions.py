#!/usr/bin/env python3
# src/xyzchem/exceptions.py

"""
Errors raised while reading and writing XYZ files.

Every error carries the 1-based line number where it was detected. Open
failures are reported at line 0 and write failures carry no line.
"""

from typing import Optional


class XYZError(Exception):
    """Base class for all xyzchem errors."""

    description = "XYZ error"

    def __init__(self, line: Optional[int] = None, detail: Optional[str] = None):
        self.line = line
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.detail or self.description
        if self.line is None:
            return message
        return f"{message} at line {self.line}"


class XYZParseError(XYZError, ValueError):
    """Base class for malformed input."""

    description = "Malformed XYZ data"


class InvalidAtomCount(XYZParseError):
    """Count line is not a non-negative integer."""

    description = "Could not parse data as atom count"


class MissingLabelOrValue(XYZParseError):
    """Atom line has fewer than four tokens."""

    description = "Missing label and/or value"


class NoAtomSymbol(MissingLabelOrValue):
    """Atom line has no tokens at all."""

    description = "Expected atom symbol, but found none"


class NoPositionData(MissingLabelOrValue):
    """Atom line has a label but one or more coordinates are missing."""

    description = "Expected position data, but found none"


class InvalidPositionData(XYZParseError):
    """Coordinate token is not a floating-point number."""

    description = "Could not parse data as atom position"


class UnexpectedEndOfInput(XYZParseError):
    """Input ended in the middle of a record."""

    description = "Unexpected end of input"


class UnexpectedData(XYZParseError):
    """Non-blank line directly after a record when separators are required."""

    description = "Expected empty line, found data"


class IoFailure(XYZError, OSError):
    """Wraps an error raised while opening, reading or writing a file."""

    description = "I/O failure"

    def __init__(self, error: BaseException, line: Optional[int] = None):
        self.error = error
        super().__init__(line=line, detail=str(error) or type(error).__name__)
