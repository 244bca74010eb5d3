"""Compression and text encoding of the terrain tile stream.

pack: deflate (zlib container) then base64, so the blob can sit in a string
field of the scene document. unpack reverses both steps and refuses anything
that does not inflate to a complete stream.
"""
from __future__ import annotations

import base64
import binascii
import logging
import zlib
from dataclasses import dataclass
from typing import Optional

from ..settings import PersistenceSettings
from .errors import DecodeCorruptionError, PersistenceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackedTerrain:
    text: str
    uncompressed_size: int
    compressed_size: int

    @property
    def ratio(self) -> float:
        if self.uncompressed_size == 0:
            return 1.0
        return self.compressed_size / self.uncompressed_size


def pack(data: bytes, settings: Optional[PersistenceSettings] = None) -> PackedTerrain:
    settings = settings or PersistenceSettings()
    try:
        deflater = zlib.compressobj(level=settings.compression_level, strategy=settings.zlib_strategy)
        compressed = deflater.compress(data) + deflater.flush()
    except zlib.error as e:
        logger.error("Terrain compression failed: %s", e)
        raise PersistenceError(f"Terrain compression failed: {e}") from e

    packed = PackedTerrain(
        text=base64.b64encode(compressed).decode("ascii"),
        uncompressed_size=len(data),
        compressed_size=len(compressed),
    )
    logger.debug("Packed terrain: %d -> %d bytes", packed.uncompressed_size, packed.compressed_size)
    return packed


@dataclass(frozen=True)
class UnpackedTerrain:
    data: bytes
    compressed_size: int

    @property
    def uncompressed_size(self) -> int:
        return len(self.data)


def unpack(text: str, settings: Optional[PersistenceSettings] = None) -> bytes:
    return unpack_terrain(text, settings).data


def unpack_terrain(text: str, settings: Optional[PersistenceSettings] = None) -> UnpackedTerrain:
    settings = settings or PersistenceSettings()
    if not text:
        raise DecodeCorruptionError("Terrain data is empty")
    try:
        compressed = base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        logger.error("Terrain data is not valid base64: %s", e)
        raise DecodeCorruptionError(f"Terrain data is not valid base64: {e}") from e

    inflater = zlib.decompressobj()
    out = bytearray()
    pending = compressed
    try:
        while not inflater.eof:
            chunk = inflater.decompress(pending, settings.inflate_chunk_size)
            pending = inflater.unconsumed_tail
            if not chunk and not pending and not inflater.eof:
                raise DecodeCorruptionError(
                    f"Terrain data ended before the compressed stream did ({len(out)} bytes inflated)"
                )
            out += chunk
    except zlib.error as e:
        logger.error("Terrain data failed to inflate: %s", e)
        raise DecodeCorruptionError(f"Terrain data failed to inflate: {e}") from e

    if inflater.unused_data:
        raise DecodeCorruptionError(
            f"{len(inflater.unused_data)} unexpected byte(s) after the compressed terrain stream"
        )
    logger.debug("Unpacked terrain: %d -> %d bytes", len(compressed), len(out))
    return UnpackedTerrain(bytes(out), len(compressed))
