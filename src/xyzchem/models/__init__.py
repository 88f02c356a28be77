"""Domain model classes."""

from .position import Position
from .atom import Atom
from .record import Record
from .xyz_file import XYZFile

__all__ = [
    "Position",
    "Atom",
    "Record",
    "XYZFile",
]
