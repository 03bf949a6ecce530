"""
Origin (starting address) resolution.

The origin is the address shown for the first dumped byte. It is zero unless
the user passes ``--origin``; an origin of zero means "take it from the first
two bytes of the file", which is how dasm's ``-f1`` output stores it.
"""

import re
from typing import Optional

from .binary_reader import BinaryReader

_HEX_RE = re.compile(r'\+?[0-9A-Fa-f]+')

# Largest origin accepted; anything above is an overflow, not a wrap
MAX_ORIGIN = 2 ** 64 - 1


class InvalidOriginError(ValueError):
    """Raised when an --origin value is not a hexadecimal number."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f'Invalid hexadecimal value "{text}": {reason}')


def parse_hex(text: str) -> int:
    """
    Parse an address written in hex.
    
    Only hex digits are accepted, with an optional leading ``+``. The value
    is not masked here; addresses are only cut down to 16 bits when
    displayed.
    """
    if not text:
        raise InvalidOriginError(text, "cannot parse integer from empty string")
    if not _HEX_RE.fullmatch(text):
        raise InvalidOriginError(text, "invalid digit found in string")
    value = int(text, 16)
    if value > MAX_ORIGIN:
        raise InvalidOriginError(text, "number too large to fit in target type")
    return value


def resolve_origin(reader: BinaryReader, requested: Optional[int] = None) -> int:
    """
    Work out the starting address for a dump.
    
    Args:
        reader: Open reader positioned at the start of the file
        requested: Parsed --origin value, or None when not given
        
    Returns:
        The starting address. When the origin comes from the file, the two
        origin bytes have been consumed from ``reader``.
        
    Raises:
        EOFError: fewer than two bytes available for a file-derived origin
    """
    if requested is None:
        return 0
    if requested == 0:
        # Little-endian word, e.g. 34 12 -> 0x1234
        try:
            return reader.read_uint16()
        except EOFError as e:
            raise EOFError(f"File too short to hold an origin address ({e})") from e
    return requested
