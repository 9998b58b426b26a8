"""
Symbology and output format enumerations.
"""

from enum import Enum


class Symbology(str, Enum):
    """Supported barcode symbologies."""

    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"
    JAN = "JAN"
    BOOKLAND = "Bookland"
    EAN_SUPPLEMENTAL = "EAN-SUPP"
    CODE_39 = "Code39"
    UNKNOWN = "UNKNOWN"


class OutputFormat(str, Enum):
    """Output byte stream formats."""

    TEXT = "text"
    PNG = "png"
    GIF = "gif"

    # Generic names for the two raster containers
    RASTER_A = "png"
    RASTER_B = "gif"
