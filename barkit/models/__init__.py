"""
Data types shared by encoders and generators.
"""

from barkit.models.pattern import ModulePattern
from barkit.models.render import RenderParams
from barkit.models.symbology import OutputFormat, Symbology

__all__ = [
    "ModulePattern",
    "OutputFormat",
    "RenderParams",
    "Symbology",
]
