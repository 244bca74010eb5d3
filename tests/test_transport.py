import base64
import zlib

import pytest

from fabula.persistence.errors import DecodeCorruptionError
from fabula.persistence.grid_codec import encode_grid
from fabula.persistence.transport import pack, unpack, unpack_terrain
from fabula.settings import PersistenceSettings


def test_pack_unpack_round_trip():
    data = bytes(range(256)) * 40
    packed = pack(data)
    assert unpack(packed.text) == data


def test_sizes_are_recorded(make_scene):
    data = encode_grid(make_scene(columns=16, rows=16).terrain)
    packed = pack(data)
    assert packed.uncompressed_size == len(data)
    assert packed.compressed_size == len(base64.b64decode(packed.text))
    assert 0 < packed.compressed_size <= packed.uncompressed_size
    assert packed.ratio < 1.0


def test_pack_output_is_plain_zlib_and_base64():
    data = b"terrain" * 100
    packed = pack(data)
    assert zlib.decompress(base64.b64decode(packed.text)) == data
    assert packed.text.isascii()


def test_unpack_uses_small_chunks_for_large_output():
    data = b"\x00" * 50_000
    assert unpack(pack(data).text, PersistenceSettings(inflate_chunk_size=7)) == data


def test_empty_input_round_trips():
    packed = pack(b"")
    assert packed.uncompressed_size == 0
    assert packed.compressed_size > 0
    assert unpack(packed.text) == b""


def test_truncated_base64_is_decode_corruption():
    text = pack(b"some terrain bytes" * 20).text
    with pytest.raises(DecodeCorruptionError):
        unpack(text[:-1])


def test_non_base64_characters_are_decode_corruption():
    with pytest.raises(DecodeCorruptionError):
        unpack("not base64 at all!")


def test_truncated_deflate_stream_is_decode_corruption():
    compressed = zlib.compress(bytes(range(256)) * 20, 9)
    text = base64.b64encode(compressed[: len(compressed) // 2]).decode("ascii")
    with pytest.raises(DecodeCorruptionError):
        unpack(text)


def test_garbage_deflate_stream_is_decode_corruption():
    text = base64.b64encode(b"\x01\x02\x03\x04garbage").decode("ascii")
    with pytest.raises(DecodeCorruptionError) as exc:
        unpack(text)
    assert isinstance(exc.value.__cause__, zlib.error)


def test_trailing_bytes_after_stream_are_decode_corruption():
    text = base64.b64encode(zlib.compress(b"abc") + b"xyz").decode("ascii")
    with pytest.raises(DecodeCorruptionError):
        unpack(text)


def test_empty_text_is_decode_corruption():
    with pytest.raises(DecodeCorruptionError):
        unpack("")


def test_unpack_terrain_reports_both_sizes():
    data = bytes(range(256)) * 8
    packed = pack(data)
    unpacked = unpack_terrain(packed.text)
    assert unpacked.data == data
    assert unpacked.uncompressed_size == packed.uncompressed_size
    assert unpacked.compressed_size == packed.compressed_size
