#!/usr/bin/env python3
# src/xyzchem/models/xyz_file.py

"""
Model representing a complete XYZ file: an ordered collection of records.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

import numpy as np

from .record import Record


@dataclass(frozen=True)
class XYZFile:
    """Ordered, independent records. Atom counts may differ between records."""

    records: Tuple[Record, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "records", tuple(self.records))

    @property
    def n_records(self) -> int:
        return len(self.records)

    def trajectory(self) -> np.ndarray:
        """
        Stack all record coordinates into one array.

        Returns:
            Array of shape (n_records, n_atoms, 3)

        Raises:
            ValueError: If the file is empty or records differ in atom count
        """
        if not self.records:
            raise ValueError("No records to stack")
        n_atoms = {len(record) for record in self.records}
        if len(n_atoms) != 1:
            raise ValueError(
                f"Records have differing atom counts: {sorted(n_atoms)}"
            )
        return np.stack([record.positions for record in self.records])

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return XYZFile(self.records[index])
        return self.records[index]

    def __str__(self) -> str:
        from ..io.xyz_writer import dumps

        return dumps(self)
