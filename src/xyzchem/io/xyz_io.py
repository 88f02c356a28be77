#!/usr/bin/env python3
# src/xyzchem/io/xyz_io.py

"""
Read and write XYZ files from paths, streams and strings.
"""

import io
import logging
import os
from typing import TextIO, Union

from ..exceptions import IoFailure
from ..models import XYZFile
from .xyz_parser import XYZParser
from .xyz_writer import dumps

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load(
    stream: TextIO, first_line: int = 1, require_separator: bool = False
) -> XYZFile:
    """
    Parse every line of an open text stream.

    Raises:
        IoFailure: If reading or decoding a line fails
        XYZParseError: If the content is malformed
    """
    parser = XYZParser(first_line=first_line, require_separator=require_separator)
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as err:
            raise IoFailure(err, line=parser.line_number + 1) from err
        parser.feed(line)
    return parser.finish()


def loads(text: str, first_line: int = 1, require_separator: bool = False) -> XYZFile:
    """Parse XYZ content held in a string."""
    return load(
        io.StringIO(text), first_line=first_line, require_separator=require_separator
    )


def read(path: PathLike, require_separator: bool = False) -> XYZFile:
    """
    Read a chemical ``.xyz`` file.

    Args:
        path: File to read
        require_separator: Demand a blank line after every record

    Returns:
        Parsed XYZFile

    Raises:
        IoFailure: If the file cannot be opened (line 0) or read
        XYZParseError: If the content is malformed
    """
    try:
        handle = open(path, "r", encoding="utf-8")
    except OSError as err:
        raise IoFailure(err, line=0) from err

    with handle:
        xyz_file = load(handle, require_separator=require_separator)
    logger.info("Read %d records from %s", len(xyz_file), path)
    return xyz_file


def write(path: PathLike, xyz_file: XYZFile, separator: bool = False) -> None:
    """
    Write ``xyz_file`` to ``path``, replacing any existing file.

    Raises:
        IoFailure: If the file cannot be created or written
        ValueError: If a record cannot be rendered, the file is then left
            untouched
    """
    text = dumps(xyz_file, separator=separator)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as err:
        raise IoFailure(err) from err
    logger.info("Wrote %d records to %s", len(xyz_file), path)
