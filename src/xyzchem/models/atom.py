#!/usr/bin/env python3
# src/xyzchem/models/atom.py

"""
Domain model representing an atom line of an XYZ record.
"""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import NoAtomSymbol
from .position import Position


@dataclass(frozen=True)
class Atom:
    """An atom: a label (usually the element symbol) and its position.

    The label is never checked against the periodic table.
    """

    label: str
    position: Position

    def __post_init__(self):
        """Labels must survive a whitespace split unchanged."""
        if self.label.split() != [self.label]:
            raise ValueError(
                f"Atom label must be a single non-blank token: {self.label!r}"
            )

    @property
    def symbol(self) -> str:
        return self.label

    @classmethod
    def from_line(cls, line: str, line_number: Optional[int] = None) -> "Atom":
        """
        Parse ``label x y z`` separated by any run of whitespace.

        Tokens after z are ignored.

        Args:
            line: Text of the atom line
            line_number: Line number reported in errors

        Returns:
            Parsed Atom

        Raises:
            NoAtomSymbol: If the line holds no token
            NoPositionData: If a coordinate is missing
            InvalidPositionData: If a coordinate is not a float
        """
        tokens = line.split()
        if not tokens:
            raise NoAtomSymbol(line_number)
        return cls(tokens[0], Position.from_tokens(tokens[1:], line_number))

    def __str__(self) -> str:
        return f"{self.label}\t{self.position}"
