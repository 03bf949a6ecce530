"""
hexamine: hex and ASCII display of binary files for 8-bit systems.
"""

__version__ = '0.1.0'

from .binary_reader import BinaryReader
from .dumper import dump_lines, hexdump
from .layout import STANDARD, WOZMON, LineFormat, format_line, layout_for
from .origin import InvalidOriginError, parse_hex, resolve_origin
