"""
Barcode encoding and rendering.

Typical use:
    >>> from barkit import encode, generate
    >>> pattern = encode("EAN-13", "750103131130")
    >>> png = generate("png", pattern, {"height": 80, "module_width": 2})
"""

from barkit.errors import (
    BarkitError,
    EncodeError,
    GenerateError,
    InvalidCharacter,
    InvalidDimension,
    InvalidLength,
    ValidationError,
    WriteError,
)
from barkit.generators import generate
from barkit.models import ModulePattern, OutputFormat, RenderParams, Symbology
from barkit.symbology import append_supplemental, encode

__all__ = [
    "BarkitError",
    "EncodeError",
    "GenerateError",
    "InvalidCharacter",
    "InvalidDimension",
    "InvalidLength",
    "ModulePattern",
    "OutputFormat",
    "RenderParams",
    "Symbology",
    "ValidationError",
    "WriteError",
    "append_supplemental",
    "encode",
    "generate",
]
