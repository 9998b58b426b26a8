"""
Compression routines used by the raster container writers.
"""

from barkit.compression import deflate, lzw
from barkit.compression.bits import BitWriter
from barkit.compression.deflate import DeflateMode

__all__ = ["BitWriter", "DeflateMode", "deflate", "lzw"]
