"""Command-line interface for reading and rewriting XYZ files."""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm.auto import tqdm

from ..exceptions import XYZError
from ..io import dumps, read, write
from ..utils import setup_logging

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Read an XYZ coordinate file and print it in canonical form"
    )
    parser.add_argument("input", help="XYZ file to read")
    parser.add_argument("--output", "-o", help="Write the canonical file here")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print one line per record (index, atom count, comment) instead of the file",
    )
    parser.add_argument(
        "--separator",
        action="store_true",
        help="Put a blank line after every record when writing",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require a blank line between records",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar for --summary"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the xyzchem CLI."""
    args = setup_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        xyz_file = read(args.input, require_separator=args.strict)
        if args.output:
            write(args.output, xyz_file, separator=args.separator)
    except XYZError as err:
        logger.error("Failed to process %s: %s", args.input, err)
        return 1

    if args.summary:
        for index, record in enumerate(
            tqdm(xyz_file, desc="Records", unit="record", disable=not args.progress)
        ):
            print(f"{index}\t{len(record)}\t{record.comment}")
    elif not args.output:
        sys.stdout.write(dumps(xyz_file, separator=args.separator))
    return 0


if __name__ == "__main__":
    sys.exit(main())
