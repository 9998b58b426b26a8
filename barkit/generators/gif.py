"""
GIF writer for bilevel pixel buffers.

File layout: "GIF89a", logical screen descriptor, two entry global colour
table, image descriptor, LZW image data in sub-blocks, trailer.
"""

import struct

import numpy as np

from barkit.compression import lzw
from barkit.errors import InvalidDimension
from barkit.generators.raster import PixelBuffer

SIGNATURE = b"GIF89a"
IMAGE_SEPARATOR = b","
TRAILER = b";"

MAX_DIMENSION = 0xFFFF

# Global colour table present, 8 bits per primary, unsorted, 2 entries
SCREEN_FLAGS = 0x80 | (7 << 4) | 0
BACKGROUND_INDEX = 0
PIXEL_ASPECT_RATIO = 0
MIN_CODE_SIZE = 2


class GifWriter:
    """Serializes a PixelBuffer as a GIF with palette 0 = background, 1 = foreground."""

    def write(self, buffer: PixelBuffer) -> bytes:
        """Return the complete GIF file as bytes."""
        width, height = buffer.width, buffer.height
        if not (1 <= width <= MAX_DIMENSION and 1 <= height <= MAX_DIMENSION):
            raise InvalidDimension(f"GIF cannot hold a {width}x{height} image")

        screen = struct.pack(
            "<HHBBB", width, height, SCREEN_FLAGS, BACKGROUND_INDEX, PIXEL_ASPECT_RATIO
        )
        colour_table = bytes([buffer.background] * 3 + [buffer.foreground] * 3)
        descriptor = IMAGE_SEPARATOR + struct.pack("<HHHHB", 0, 0, width, height, 0)

        indices = buffer.mask.astype(np.uint8).ravel().tolist()
        data = lzw.compress(indices, MIN_CODE_SIZE)

        return b"".join(
            [
                SIGNATURE,
                screen,
                colour_table,
                descriptor,
                bytes([MIN_CODE_SIZE]),
                lzw.pack_sub_blocks(data),
                TRAILER,
            ]
        )
