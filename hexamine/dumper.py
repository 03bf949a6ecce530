"""
Hex dump driver: splits a byte stream into lines and writes them out.
"""

import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from .binary_reader import BinaryReader
from .layout import LineFormat, format_line, layout_for
from .origin import parse_hex, resolve_origin


def dump_lines(data: Iterable[int], origin: int, fmt: LineFormat) -> Iterator[str]:
    """
    Yield formatted dump lines for a stream of bytes.
    
    A line ends whenever the running address reaches a multiple of
    fmt.bytes_per_line, so an unaligned origin gives a short first line.
    Any leftover bytes are flushed as a final, shorter line.
    """
    addr = origin
    line_addr = origin
    line = bytearray()
    
    for byte in data:
        line.append(byte)
        addr += 1
        if addr % fmt.bytes_per_line == 0:
            yield format_line(line, line_addr, fmt)
            line.clear()
            # Left padding only applies to the first line
            if fmt.left_padding:
                fmt = replace(fmt, left_padding=0)
            line_addr = addr
    
    if line:
        yield format_line(line, line_addr, fmt)


def hexdump(file_path: Path, origin_text: Optional[str] = None, woz: bool = False,
            out: Optional[TextIO] = None) -> int:
    """
    Dump a binary file as hex.
    
    Args:
        file_path: File to display
        origin_text: --origin value; "0" reads the origin from the file's
            first two bytes (little-endian)
        woz: Use wozmon layout instead of the standard one
        out: Stream to write to (default: stdout)
        
    Returns:
        Number of lines written
        
    Raises:
        InvalidOriginError: origin_text is not hexadecimal (raised before
            the file is opened)
        OSError: the file could not be opened or read
        EOFError: the file is too short to hold an origin word
    """
    requested = parse_hex(origin_text) if origin_text is not None else None
    if out is None:
        out = sys.stdout
    
    count = 0
    with BinaryReader(file_path) as reader:
        origin = resolve_origin(reader, requested)
        fmt = layout_for(woz, origin)
        for line in dump_lines(reader.iter_bytes(), origin, fmt):
            out.write(line + '\n')
            count += 1
    return count
