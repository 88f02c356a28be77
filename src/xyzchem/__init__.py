"""Parse and write XYZ molecular coordinate files."""

from .exceptions import (
    InvalidAtomCount,
    InvalidPositionData,
    IoFailure,
    MissingLabelOrValue,
    NoAtomSymbol,
    NoPositionData,
    UnexpectedData,
    UnexpectedEndOfInput,
    XYZError,
    XYZParseError,
)
from .io import XYZParser, dump, dumps, load, loads, parse_lines, read, write
from .models import Atom, Position, Record, XYZFile

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Position",
    "Record",
    "XYZFile",
    "XYZParser",
    "parse_lines",
    "load",
    "loads",
    "read",
    "dump",
    "dumps",
    "write",
    "XYZError",
    "XYZParseError",
    "InvalidAtomCount",
    "MissingLabelOrValue",
    "NoAtomSymbol",
    "NoPositionData",
    "InvalidPositionData",
    "UnexpectedEndOfInput",
    "UnexpectedData",
    "IoFailure",
]
