#!/usr/bin/env python3
# src/xyzchem/io/xyz_writer.py

"""
Render records back to XYZ text.

Atom fields are joined by a single tab. The count line is always the number
of atoms actually held by the record, so the output parses back even when a
hand-built record declares a different count.
"""

import logging
from typing import TextIO

from ..models import Atom, Record, XYZFile

logger = logging.getLogger(__name__)


def format_atom(atom: Atom) -> str:
    """``label<TAB>x<TAB>y<TAB>z`` without a line terminator."""
    return str(atom)


def format_record(record: Record) -> str:
    """
    Render one record, every line terminated by a newline.

    Raises:
        ValueError: If the comment spans more than one line
    """
    if "\n" in record.comment or "\r" in record.comment:
        raise ValueError("Record comment must be a single line")
    if not record.is_consistent:
        logger.warning(
            "Record declares %d atoms but holds %d, writing %d",
            record.count,
            len(record.atoms),
            len(record.atoms),
        )

    lines = [str(len(record.atoms)), record.comment]
    lines.extend(format_atom(atom) for atom in record.atoms)
    return "\n".join(lines) + "\n"


def dump(xyz_file: XYZFile, stream: TextIO, separator: bool = False) -> None:
    """
    Write every record of ``xyz_file`` to an open text stream.

    Args:
        xyz_file: Records to write
        stream: Writable text stream
        separator: Emit a blank line after each record
    """
    for record in xyz_file:
        stream.write(format_record(record))
        if separator:
            stream.write("\n")


def dumps(xyz_file: XYZFile, separator: bool = False) -> str:
    """Render ``xyz_file`` as a single string."""
    chunks = []
    for record in xyz_file:
        chunks.append(format_record(record))
        if separator:
            chunks.append("\n")
    return "".join(chunks)
