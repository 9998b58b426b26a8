"""
zlib stream encoder (RFC 1950 wrapper around RFC 1951 deflate blocks).

Two block strategies are available:
- STORED: uncompressed blocks of at most 65535 bytes
- FIXED: LZ77 matching coded with the fixed Huffman tables
"""

import zlib
from bisect import bisect_right
from collections.abc import Iterator
from enum import Enum

from barkit.compression.bits import BitWriter

WINDOW_SIZE = 32768
MIN_MATCH = 3
MAX_MATCH = 258
MAX_CHAIN = 64
MAX_STORED_BLOCK = 65535

END_OF_BLOCK = 256

LENGTH_BASE = (
    3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 15, 17, 19, 23, 27, 31,
    35, 43, 51, 59, 67, 83, 99, 115, 131, 163, 195, 227, 258,
)
LENGTH_EXTRA = (
    0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2,
    3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 0,
)
DISTANCE_BASE = (
    1, 2, 3, 4, 5, 7, 9, 13, 17, 25, 33, 49, 65, 97, 129, 193,
    257, 385, 513, 769, 1025, 1537, 2049, 3073, 4097, 6145, 8193, 12289, 16385, 24577,
)
DISTANCE_EXTRA = (
    0, 0, 0, 0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6,
    7, 7, 8, 8, 9, 9, 10, 10, 11, 11, 12, 12, 13, 13,
)

# CMF/FLG pairs; FLEVEL only advertises the strategy
ZLIB_HEADER_FIXED = b"\x78\x9c"
ZLIB_HEADER_STORED = b"\x78\x01"


class DeflateMode(str, Enum):
    """Block strategy."""

    STORED = "stored"
    FIXED = "fixed"


def compress(data: bytes, mode: DeflateMode | str = DeflateMode.FIXED) -> bytes:
    """
    Compress ``data`` into a zlib stream.

    Args:
        data: Bytes to compress
        mode: Block strategy

    Returns:
        zlib header, deflate blocks and the big-endian Adler-32 of ``data``
    """
    mode = DeflateMode(mode)
    data = bytes(data)

    if mode == DeflateMode.STORED:
        body = ZLIB_HEADER_STORED + deflate_stored(data)
    else:
        body = ZLIB_HEADER_FIXED + deflate_fixed(data)

    return body + zlib.adler32(data).to_bytes(4, "big")


def deflate_stored(data: bytes) -> bytes:
    """Raw deflate stream made of stored blocks."""
    out = bytearray()
    offsets = range(0, len(data), MAX_STORED_BLOCK) if data else [0]
    last = offsets[-1]
    for offset in offsets:
        block = data[offset:offset + MAX_STORED_BLOCK]
        # BFINAL in bit 0, BTYPE 00, rest of the byte is padding
        out.append(1 if offset == last else 0)
        out += len(block).to_bytes(2, "little")
        out += (len(block) ^ 0xFFFF).to_bytes(2, "little")
        out += block
    return bytes(out)


def deflate_fixed(data: bytes) -> bytes:
    """Raw deflate stream made of one fixed-Huffman block."""
    writer = BitWriter()
    writer.write_bits(1, 1)  # BFINAL
    writer.write_bits(1, 2)  # BTYPE 01

    for token in lz77_tokens(data):
        if isinstance(token, int):
            _write_literal_length(writer, token)
        else:
            length, distance = token
            _write_length(writer, length)
            _write_distance(writer, distance)

    _write_literal_length(writer, END_OF_BLOCK)
    return writer.getvalue()


def lz77_tokens(data: bytes) -> Iterator[int | tuple[int, int]]:
    """
    Split ``data`` into literals and (length, distance) back-references.

    Matches are found through hash chains keyed by the next three bytes,
    searching the most recent ``MAX_CHAIN`` candidates inside the window.
    The longest match wins; ties go to the nearest.
    """
    chains: dict[bytes, list[int]] = {}
    size = len(data)
    pos = 0

    def insert(index: int) -> None:
        if index + MIN_MATCH > size:
            return
        chain = chains.setdefault(data[index:index + MIN_MATCH], [])
        chain.append(index)
        if len(chain) > 2 * MAX_CHAIN:
            del chain[:MAX_CHAIN]

    while pos < size:
        best_length = 0
        best_distance = 0
        limit = min(MAX_MATCH, size - pos)

        if limit >= MIN_MATCH:
            for candidate in reversed(chains.get(data[pos:pos + MIN_MATCH], ())[-MAX_CHAIN:]):
                distance = pos - candidate
                if distance > WINDOW_SIZE:
                    break
                length = MIN_MATCH
                while length < limit and data[candidate + length] == data[pos + length]:
                    length += 1
                if length > best_length:
                    best_length, best_distance = length, distance
                    if length == limit:
                        break

        if best_length >= MIN_MATCH:
            yield best_length, best_distance
            for index in range(pos, pos + best_length):
                insert(index)
            pos += best_length
        else:
            yield data[pos]
            insert(pos)
            pos += 1


def _write_literal_length(writer: BitWriter, symbol: int) -> None:
    if symbol <= 143:
        writer.write_code(0x30 + symbol, 8)
    elif symbol <= 255:
        writer.write_code(0x190 + symbol - 144, 9)
    elif symbol <= 279:
        writer.write_code(symbol - 256, 7)
    else:
        writer.write_code(0xC0 + symbol - 280, 8)


def _write_length(writer: BitWriter, length: int) -> None:
    index = bisect_right(LENGTH_BASE, length) - 1
    _write_literal_length(writer, 257 + index)
    if LENGTH_EXTRA[index]:
        writer.write_bits(length - LENGTH_BASE[index], LENGTH_EXTRA[index])


def _write_distance(writer: BitWriter, distance: int) -> None:
    index = bisect_right(DISTANCE_BASE, distance) - 1
    writer.write_code(index, 5)
    if DISTANCE_EXTRA[index]:
        writer.write_bits(distance - DISTANCE_BASE[index], DISTANCE_EXTRA[index])
