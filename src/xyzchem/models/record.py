#!/usr/bin/env python3
# src/xyzchem/models/record.py

"""
Model representing a single record (frame) of an XYZ file.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .atom import Atom
from .position import Position


@dataclass(frozen=True)
class Record:
    """One structure snapshot: declared count, comment and atoms."""

    count: int
    comment: str = ""
    atoms: Tuple[Atom, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Store atoms as a tuple so the record stays read-only."""
        object.__setattr__(self, "atoms", tuple(self.atoms))

    @classmethod
    def from_arrays(
        cls,
        labels: Sequence[str],
        positions: Sequence[Sequence[float]],
        comment: str = "",
    ) -> "Record":
        """
        Build a consistent record from parallel label and coordinate sequences.

        Args:
            labels: Atom labels
            positions: Array-like of shape (n, 3)
            comment: Comment line

        Returns:
            Record whose count equals the number of atoms

        Raises:
            ValueError: If the shapes do not match
        """
        coords = np.asarray(positions, dtype=float)
        if coords.size == 0:
            coords = coords.reshape(0, 3)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError("positions must have shape (n, 3)")
        if len(labels) != len(coords):
            raise ValueError("Number of labels must match number of positions")

        atoms = [
            Atom(str(label), Position(*(float(v) for v in xyz)))
            for label, xyz in zip(labels, coords)
        ]
        return cls(len(atoms), comment, atoms)

    @property
    def declared_count(self) -> int:
        return self.count

    @property
    def is_consistent(self) -> bool:
        """True when the declared count equals the number of atoms."""
        return self.count == len(self.atoms)

    @property
    def labels(self) -> List[str]:
        return [atom.label for atom in self.atoms]

    @property
    def positions(self) -> np.ndarray:
        """Coordinates as an array of shape (n, 3)."""
        if not self.atoms:
            return np.empty((0, 3))
        return np.array([tuple(atom.position) for atom in self.atoms], dtype=float)

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.atoms)

    def __str__(self) -> str:
        from ..io.xyz_writer import format_record

        return format_record(self)
