"""
Binary file reader utilities for hexamine.
"""

import struct
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

DEFAULT_CHUNK_SIZE = 64 * 1024


class BinaryReader:
    """Utility class for reading bytes from a ROM image or program file."""
    
    def __init__(self, file_path: Path):
        """
        Initialize binary reader.
        
        Args:
            file_path: Path to the binary file
        """
        self.file_path = Path(file_path)
        self.file: Optional[BinaryIO] = None
        
    def __enter__(self):
        """Context manager entry."""
        self.file = open(self.file_path, 'rb')
        return self
        
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self.file:
            self.file.close()
            self.file = None
    
    def _require_open(self) -> BinaryIO:
        if not self.file:
            raise RuntimeError("File not open. Use as context manager.")
        return self.file
    
    def read_bytes(self, count: int) -> bytes:
        """Read specified number of bytes."""
        data = self._require_open().read(count)
        if len(data) < count:
            raise EOFError(f"Expected {count} bytes, got {len(data)}")
        return data
    
    def read_uint16(self) -> int:
        """Read unsigned little-endian 16-bit integer."""
        return struct.unpack('<H', self.read_bytes(2))[0]
    
    def iter_bytes(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[int]:
        """
        Yield the rest of the file one byte at a time.
        
        Reads happen in chunks of ``chunk_size`` bytes; callers still see a
        single byte per step.
        """
        f = self._require_open()
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                return
            yield from chunk
    
    def tell(self) -> int:
        """Get current file position."""
        return self._require_open().tell()
