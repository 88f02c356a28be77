#!/usr/bin/env python3
# src/xyzchem/models/position.py

"""
Cartesian position of an atom in Ångström.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import numpy as np

from ..exceptions import InvalidPositionData, NoPositionData

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf|infinity)",
    re.IGNORECASE,
)


def format_float(value: float) -> str:
    """Shortest text that parses back to the same float."""
    return repr(float(value))


@dataclass(frozen=True)
class Position:
    """Immutable (x, y, z) coordinate triple."""

    x: float
    y: float
    z: float

    @classmethod
    def from_tokens(
        cls, tokens: Sequence[str], line: Optional[int] = None
    ) -> "Position":
        """
        Build a position from the first three coordinate tokens.

        Args:
            tokens: Coordinate tokens, extra tokens are ignored
            line: Line number reported in errors

        Returns:
            Parsed Position

        Raises:
            NoPositionData: If fewer than three tokens are given
            InvalidPositionData: If a token is not a float
        """
        if len(tokens) < 3:
            raise NoPositionData(line)

        values = []
        for token in tokens[:3]:
            if not _FLOAT_PATTERN.fullmatch(token):
                raise InvalidPositionData(
                    line, f"Could not parse {token!r} as atom position"
                )
            values.append(float(token))
        return cls(*values)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_array(self) -> np.ndarray:
        """Return the coordinates as a float vector of length 3."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def __str__(self) -> str:
        return "\t".join(format_float(value) for value in self)
