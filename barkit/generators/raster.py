"""
Turns a 1-D module pattern into a 2-D pixel buffer.
"""

from dataclasses import dataclass

import numpy as np

from barkit.errors import InvalidDimension
from barkit.models.pattern import ModulePattern


@dataclass(frozen=True)
class PixelBuffer:
    """Grid of pixel intensities plus the two intensities it was drawn with."""

    pixels: np.ndarray
    foreground: int
    background: int

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def mask(self) -> np.ndarray:
        """Boolean array, True where a bar was drawn."""
        return self.pixels == self.foreground


def rasterize(
    pattern: ModulePattern,
    height: int,
    module_width: int,
    foreground: int = 0,
    background: int = 255,
) -> PixelBuffer:
    """
    Rasterize a pattern.

    Each module becomes ``module_width`` pixels of uniform intensity and the
    row is repeated ``height`` times.

    Args:
        pattern: Module pattern
        height: Pixel rows, at least 1
        module_width: Pixels per module, at least 1
        foreground: Intensity for bars (0-255)
        background: Intensity for spaces (0-255)

    Returns:
        Buffer of shape (height, len(pattern) * module_width)

    Raises:
        InvalidDimension: Non-positive height or module width, or empty pattern
    """
    if height < 1:
        raise InvalidDimension(f"Height must be positive, got {height}")
    if module_width < 1:
        raise InvalidDimension(f"Module width must be positive, got {module_width}")
    if len(pattern) == 0:
        raise InvalidDimension("Cannot rasterize an empty pattern")
    for name, value in (("foreground", foreground), ("background", background)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} intensity must be between 0 and 255, got {value}")

    bars = np.repeat(np.asarray(pattern.modules, dtype=bool), module_width)
    row = np.where(bars, np.uint8(foreground), np.uint8(background)).astype(np.uint8)
    pixels = np.tile(row, (height, 1))

    return PixelBuffer(pixels, foreground, background)
