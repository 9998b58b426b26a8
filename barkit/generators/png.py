"""
PNG writer for bilevel pixel buffers.

File layout: signature, IHDR, optional PLTE, one or more IDAT, IEND.
Each chunk is length + type + data + CRC-32 over type and data.
"""

import struct
import zlib

import numpy as np

from barkit.compression import deflate
from barkit.compression.deflate import DeflateMode
from barkit.errors import InvalidDimension
from barkit.generators.raster import PixelBuffer

SIGNATURE = b"\x89PNG\r\n\x1a\n"

GREYSCALE = 0
INDEXED_COLOUR = 3

COMPRESSION_DEFLATE = 0
FILTER_ADAPTIVE = 0
NO_INTERLACE = 0
FILTER_NONE = 0

MAX_DIMENSION = 2**31 - 1


def chunk(chunk_type: bytes, data: bytes = b"") -> bytes:
    """Serialize one chunk."""
    crc = zlib.crc32(chunk_type + data)
    return struct.pack(">I", len(data)) + chunk_type + data + struct.pack(">I", crc)


class PngWriter:
    """
    Serializes a PixelBuffer as a 1-bit PNG.

    Black on white buffers are stored as greyscale (0 black, 1 white); any
    other colour pair uses an indexed image with a two entry palette
    (0 background, 1 foreground).
    """

    def __init__(
        self,
        mode: DeflateMode | str = DeflateMode.FIXED,
        idat_chunk_size: int = 65536,
    ):
        if idat_chunk_size < 1:
            raise ValueError("IDAT chunk size must be positive")
        self.mode = DeflateMode(mode)
        self.idat_chunk_size = idat_chunk_size

    def write(self, buffer: PixelBuffer) -> bytes:
        """Return the complete PNG file as bytes."""
        width, height = buffer.width, buffer.height
        if not (1 <= width <= MAX_DIMENSION and 1 <= height <= MAX_DIMENSION):
            raise InvalidDimension(f"PNG cannot hold a {width}x{height} image")

        greyscale = {buffer.foreground, buffer.background} <= {0, 255} and (
            buffer.foreground != buffer.background
        )
        if greyscale:
            bits = buffer.pixels == 255
            colour_type = GREYSCALE
        else:
            bits = buffer.mask
            colour_type = INDEXED_COLOUR

        out = [SIGNATURE, chunk(b"IHDR", self._header(width, height, colour_type))]
        if colour_type == INDEXED_COLOUR:
            palette = bytes([buffer.background] * 3 + [buffer.foreground] * 3)
            out.append(chunk(b"PLTE", palette))

        compressed = deflate.compress(self._scanlines(bits), self.mode)
        for offset in range(0, len(compressed), self.idat_chunk_size):
            out.append(chunk(b"IDAT", compressed[offset:offset + self.idat_chunk_size]))

        out.append(chunk(b"IEND"))
        return b"".join(out)

    @staticmethod
    def _header(width: int, height: int, colour_type: int) -> bytes:
        return struct.pack(
            ">IIBBBBB",
            width,
            height,
            1,  # bit depth
            colour_type,
            COMPRESSION_DEFLATE,
            FILTER_ADAPTIVE,
            NO_INTERLACE,
        )

    @staticmethod
    def _scanlines(bits: np.ndarray) -> bytes:
        """Pack rows MSB first and prefix each with filter type 0."""
        packed = np.packbits(bits.astype(np.uint8), axis=1)
        filters = np.full((packed.shape[0], 1), FILTER_NONE, dtype=np.uint8)
        return np.hstack([filters, packed]).tobytes()
