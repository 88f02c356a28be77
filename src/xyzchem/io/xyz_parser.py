#!/usr/bin/env python3
# src/xyzchem/io/xyz_parser.py

"""
Line-oriented state machine that turns XYZ text into an XYZFile.

Each record is read as

    COUNT -> COMMENT -> ATOMS(remaining) -> COUNT

Blank lines are skipped while waiting for a count, so records may be
separated by any number of empty lines. The first error aborts the parse.
"""

import logging
import re
from enum import Enum
from typing import Iterable, List

from ..exceptions import InvalidAtomCount, UnexpectedData, UnexpectedEndOfInput
from ..models import Atom, Record, XYZFile

logger = logging.getLogger(__name__)

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


class ParseState(Enum):
    """What the parser expects from the next line."""

    COUNT = "count"
    COMMENT = "comment"
    ATOMS = "atoms"


def parse_count(line: str, line_number: int) -> int:
    """Parse a trimmed count line as a non-negative integer."""
    text = line.strip()
    if not _COUNT_PATTERN.fullmatch(text):
        raise InvalidAtomCount(
            line_number, f"Could not parse {text!r} as atom count"
        )
    return int(text)


class XYZParser:
    """
    Incremental XYZ parser.

    Feed lines one at a time with ``feed`` and collect the result with
    ``finish``. Lines may keep their trailing newline.

    Args:
        first_line: Number given to the first line fed (1-based)
        require_separator: Demand a blank line (or end of input) after each
            record instead of letting the next count line follow directly
    """

    def __init__(self, first_line: int = 1, require_separator: bool = False):
        self._line_number = first_line - 1
        self._require_separator = require_separator
        self._state = ParseState.COUNT
        self._remaining = 0
        self._count = 0
        self._comment = ""
        self._atoms: List[Atom] = []
        self._records: List[Record] = []
        self._separator_due = False

    @property
    def state(self) -> ParseState:
        return self._state

    @property
    def remaining(self) -> int:
        """Atom lines still expected for the current record."""
        return self._remaining

    @property
    def line_number(self) -> int:
        """Number of the last line fed."""
        return self._line_number

    @property
    def records(self) -> List[Record]:
        """Records completed so far."""
        return list(self._records)

    def feed(self, line: str) -> None:
        """
        Consume one line of input.

        Raises:
            InvalidAtomCount: Count line is not a non-negative integer
            MissingLabelOrValue: Atom line has fewer than four tokens
            InvalidPositionData: Coordinate is not a float
            UnexpectedData: Record not followed by a blank line while
                separators are required, or a line break inside a comment
        """
        self._line_number += 1
        line = line.rstrip("\r\n")

        if self._state is ParseState.COUNT:
            self._expect_count(line)
        elif self._state is ParseState.COMMENT:
            self._expect_comment(line)
        else:
            self._expect_atom(line)

    def finish(self) -> XYZFile:
        """
        Signal end of input.

        Returns:
            XYZFile with every record read

        Raises:
            UnexpectedEndOfInput: If a record is incomplete
        """
        if self._state is not ParseState.COUNT:
            raise UnexpectedEndOfInput(
                self._line_number + 1,
                f"Unexpected end of input while expecting {self._state.value} "
                f"line of record {len(self._records) + 1}",
            )
        logger.debug("Parsed %d records", len(self._records))
        return XYZFile(self._records)

    def _expect_count(self, line: str) -> None:
        if not line.strip():
            self._separator_due = False
            return
        if self._separator_due and self._require_separator:
            raise UnexpectedData(self._line_number)

        self._count = parse_count(line, self._line_number)
        self._comment = ""
        self._atoms = []
        self._state = ParseState.COMMENT

    def _expect_comment(self, line: str) -> None:
        if "\r" in line or "\n" in line:
            raise UnexpectedData(
                self._line_number, "Line break inside comment line"
            )
        self._comment = line
        self._remaining = self._count
        self._state = ParseState.ATOMS
        if self._remaining == 0:
            self._close_record()

    def _expect_atom(self, line: str) -> None:
        self._atoms.append(Atom.from_line(line, self._line_number))
        self._remaining -= 1
        if self._remaining == 0:
            self._close_record()

    def _close_record(self) -> None:
        record = Record(self._count, self._comment, self._atoms)
        self._records.append(record)
        logger.debug(
            "Record %d complete at line %d: %d atoms",
            len(self._records),
            self._line_number,
            len(record),
        )
        self._atoms = []
        self._state = ParseState.COUNT
        self._separator_due = True


def parse_lines(
    lines: Iterable[str], first_line: int = 1, require_separator: bool = False
) -> XYZFile:
    """
    Parse a sequence of lines into an XYZFile.

    Args:
        lines: Lines of text, with or without trailing newlines
        first_line: Number of the first line, used in error reports
        require_separator: See XYZParser

    Returns:
        Parsed XYZFile
    """
    parser = XYZParser(first_line=first_line, require_separator=require_separator)
    for line in lines:
        parser.feed(line)
    return parser.finish()
