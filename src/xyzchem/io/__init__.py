from .xyz_parser import ParseState, XYZParser, parse_lines
from .xyz_writer import dump, dumps, format_atom, format_record
from .xyz_io import load, loads, read, write

__all__ = [
    "ParseState",
    "XYZParser",
    "parse_lines",
    "dump",
    "dumps",
    "format_atom",
    "format_record",
    "load",
    "loads",
    "read",
    "write",
]
