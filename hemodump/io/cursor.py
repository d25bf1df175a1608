"""
Sequential, forward-only reader over an open binary stream.

All primitives are fixed-width little-endian:
    u8 / i8 : 1 byte
    u16     : 2 bytes
    u32     : 4 bytes
    f64     : 8 bytes IEEE-754
Strings are a u16 byte count followed by that many raw bytes (no terminator).
"""
from __future__ import annotations

import io
import struct
from typing import BinaryIO

import numpy as np

from ..errors import TruncatedStream

_U8 = struct.Struct("<B")
_I8 = struct.Struct("<b")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_F64 = struct.Struct("<d")

STRING_ENCODING = "latin-1"


def _remaining_size(stream) -> int | None:
    """Bytes left in a seekable stream (position restored), else None."""
    try:
        if not stream.seekable():
            return None
        here = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(here)
    except (AttributeError, OSError, ValueError):
        return None
    return end - here


class ByteCursor:
    """
    Positional reader with exact-width reads.

    Every read either returns exactly the requested number of bytes or raises
    TruncatedStream. There is no seek/rewind; ``position`` only grows.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._pos = 0
        self._size = _remaining_size(stream)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByteCursor":
        return cls(io.BytesIO(data))

    @property
    def position(self) -> int:
        return self._pos

    def read_bytes(self, n: int, what: str = "") -> bytes:
        n = int(n)
        if n < 0:
            raise ValueError(f"Negative read size: {n}")
        if n == 0:
            return b""
        if self._size is not None and n > self._size - self._pos:
            # known short: fail before allocating a buffer for a corrupt count
            raise TruncatedStream(self._pos, n, max(self._size - self._pos, 0), what)
        buf = self._stream.read(n)
        got = len(buf) if buf else 0
        if got != n:
            raise TruncatedStream(self._pos, n, got, what)
        self._pos += n
        return buf

    def _unpack(self, fmt: struct.Struct, what: str):
        return fmt.unpack(self.read_bytes(fmt.size, what))[0]

    def read_u8(self, what: str = "u8") -> int:
        return self._unpack(_U8, what)

    def read_i8(self, what: str = "i8") -> int:
        return self._unpack(_I8, what)

    def read_u16(self, what: str = "u16") -> int:
        return self._unpack(_U16, what)

    def read_u32(self, what: str = "u32") -> int:
        return self._unpack(_U32, what)

    def read_f64(self, what: str = "f64") -> float:
        return self._unpack(_F64, what)

    def read_length_prefixed_string(self, what: str = "string") -> str:
        n = self.read_u16(what)
        return self.read_bytes(n, what).decode(STRING_ENCODING)

    def read_array(self, dtype, count: int, what: str = "") -> np.ndarray:
        """Read ``count`` contiguous items of ``dtype`` into a fresh (owned) array."""
        dt = np.dtype(dtype)
        count = int(count)
        if count == 0:
            return np.empty(0, dtype=dt)
        raw = self.read_bytes(dt.itemsize * count, what or str(dt))
        return np.frombuffer(raw, dtype=dt, count=count).copy()


__all__ = ["ByteCursor", "STRING_ENCODING"]
