#!/usr/bin/env python3
"""
Command-line interface for hexamine.

Displays hex and ASCII from a binary file. Similar to hexdump and xxd, but
meant for Atari 2600 cartridges, Apple 1/II programs and other files that
run on 8-bit systems. Addresses are shown masked to 16 bits.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .dumper import hexdump
from .origin import InvalidOriginError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hexamine',
        description='Display a file in hexadecimal and ASCII')
    parser.add_argument('file', type=Path, metavar='FILE', help='File to display')
    parser.add_argument('-o', '--origin', metavar='ADDRESS',
                        help='Override default zero origin (pass 0 to get origin from '
                             'first two bytes of FILE in little-endian order)')
    parser.add_argument('-w', '--woz', action='store_true',
                        help='Display in wozmon format')
    parser.add_argument('-V', '--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    
    try:
        hexdump(args.file, args.origin, args.woz)
    except InvalidOriginError as e:
        # Bad --origin is reported, but nothing has been dumped
        print(e, file=sys.stderr)
        return 0
    except BrokenPipeError:
        # Output closed early, e.g. piped into head
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except (OSError, EOFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    return 0


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == '__main__':
    run()
