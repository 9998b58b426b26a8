"""
Generators turning module patterns into text, PNG and GIF output.
"""

from barkit.generators.generate import generate
from barkit.generators.gif import GifWriter
from barkit.generators.png import PngWriter
from barkit.generators.raster import PixelBuffer, rasterize
from barkit.generators.sink import emit
from barkit.generators.text import render_text

__all__ = [
    "GifWriter",
    "PixelBuffer",
    "PngWriter",
    "emit",
    "generate",
    "rasterize",
    "render_text",
]
