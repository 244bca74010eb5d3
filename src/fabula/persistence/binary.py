"""Big-endian binary primitives for the terrain tile stream.

Layout of each primitive:
- int: 32-bit signed, big-endian
- float: 32-bit IEEE-754, big-endian
- bool: one byte, 0 or 1 (any non-zero byte reads as True)
- utf: unsigned 16-bit big-endian byte length followed by UTF-8 bytes
"""
from __future__ import annotations

import io
import struct

from .errors import DecodeCorruptionError, PreconditionViolationError

_INT = struct.Struct(">i")
_FLOAT = struct.Struct(">f")
_USHORT = struct.Struct(">H")
_BOOL = struct.Struct(">?")

MAX_UTF_BYTES = 0xFFFF


class BinaryWriter:
    def __init__(self) -> None:
        self._buf = io.BytesIO()

    def _pack(self, fmt: struct.Struct, value, what: str) -> None:
        try:
            self._buf.write(fmt.pack(value))
        except (struct.error, OverflowError) as e:
            raise PreconditionViolationError(f"Cannot encode {what} {value!r}: {e}") from e

    def write_int(self, value: int) -> None:
        self._pack(_INT, value, "int")

    def write_float(self, value: float) -> None:
        self._pack(_FLOAT, value, "float")

    def write_bool(self, value: bool) -> None:
        self._pack(_BOOL, bool(value), "bool")

    def write_utf(self, value: str) -> None:
        data = value.encode("utf-8")
        if len(data) > MAX_UTF_BYTES:
            raise PreconditionViolationError(
                f"String of {len(data)} encoded bytes exceeds the {MAX_UTF_BYTES} byte limit"
            )
        self._buf.write(_USHORT.pack(len(data)))
        self._buf.write(data)

    @property
    def size(self) -> int:
        return self._buf.tell()

    def getvalue(self) -> bytes:
        return self._buf.getvalue()


class BinaryReader:
    def __init__(self, data: bytes) -> None:
        self._view = memoryview(data)
        self._pos = 0

    def _take(self, count: int) -> memoryview:
        end = self._pos + count
        if end > len(self._view):
            raise DecodeCorruptionError(
                f"Unexpected end of terrain data at byte {self._pos}: needed {count}, "
                f"{len(self._view) - self._pos} left"
            )
        chunk = self._view[self._pos:end]
        self._pos = end
        return chunk

    def read_int(self) -> int:
        return _INT.unpack(self._take(_INT.size))[0]

    def read_float(self) -> float:
        return _FLOAT.unpack(self._take(_FLOAT.size))[0]

    def read_bool(self) -> bool:
        return self._take(1)[0] != 0

    def read_utf(self) -> str:
        (length,) = _USHORT.unpack(self._take(_USHORT.size))
        raw = self._take(length)
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeCorruptionError(f"Invalid UTF-8 string at byte {self._pos - length}") from e

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos
