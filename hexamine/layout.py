"""
Line layouts and the line formatter.

Standard layout (16 bytes per line, two segments, ASCII column)::

    0000:  41 42 43 44 45 46 47 48  49 4A 4B 4C 4D 4E 4F 50  ABCDEFGHIJKLMNOP

Wozmon layout (8 bytes per line, no segments, no ASCII)::

    0000: 41 42 43 44 45 46 47 48
"""

from dataclasses import dataclass
from typing import Sequence

STD_BYTES_PER_LINE = 16
STD_BYTES_PER_SEGMENT = 8
WOZ_BYTES_PER_LINE = 8
WOZ_BYTES_PER_SEGMENT = 0  # 0 = no segmenting

ADDRESS_MASK = 0xFFFF


@dataclass(frozen=True)
class LineFormat:
    """Layout settings for one run of the dumper."""
    bytes_per_line: int
    bytes_per_segment: int
    left_padding: int = 0
    show_ascii: bool = True


STANDARD = LineFormat(STD_BYTES_PER_LINE, STD_BYTES_PER_SEGMENT, 0, True)
WOZMON = LineFormat(WOZ_BYTES_PER_LINE, WOZ_BYTES_PER_SEGMENT, 0, False)


def layout_for(woz: bool, origin: int) -> LineFormat:
    """
    Pick the layout for a run starting at ``origin``.
    
    Standard output left-pads the first line so bytes sit in their column.
    Wozmon output never pads, even for an unaligned origin.
    """
    if woz:
        return WOZMON
    return LineFormat(STD_BYTES_PER_LINE, STD_BYTES_PER_SEGMENT,
                      origin % STD_BYTES_PER_LINE, True)


def printable(byte: int) -> str:
    """ASCII character for byte, or '.' if it isn't printable."""
    return chr(byte) if 0x20 <= byte <= 0x7E else '.'


def format_line(data: Sequence[int], line_address: int, fmt: LineFormat) -> str:
    """
    Format one line of the dump.
    
    Args:
        data: Bytes for this line (1 to fmt.bytes_per_line of them)
        line_address: Address of the first byte, masked to 16 bits for display
        fmt: Layout to use
        
    Returns:
        The line, without a trailing newline
    """
    parts = [f"{line_address & ADDRESS_MASK:04X}:"]
    
    i = 0  # next real byte
    for pos in range(fmt.bytes_per_line):
        if fmt.bytes_per_segment > 0 and pos % fmt.bytes_per_segment == 0:
            parts.append(' ')
        if pos < fmt.left_padding or (fmt.show_ascii and i >= len(data)):
            parts.append('   ')
        elif i < len(data):
            parts.append(f" {data[i]:02X}")
            i += 1
    
    if fmt.show_ascii:
        parts.append(' ' * (fmt.left_padding + 2))
        parts.extend(printable(b) for b in data)
    
    return ''.join(parts)
