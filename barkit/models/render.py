"""
Rendering parameters.
"""

from pydantic import BaseModel, ConfigDict, Field

from barkit.config import get_settings


def _default_height() -> int:
    return get_settings().default_height


def _default_module_width() -> int:
    return get_settings().default_module_width


def _default_foreground() -> int:
    return get_settings().foreground


def _default_background() -> int:
    return get_settings().background


class RenderParams(BaseModel):
    """
    Per-call rendering configuration.

    Height and module width are checked by the rasterizer, which raises
    InvalidDimension for values below 1.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    height: int = Field(default_factory=_default_height, description="Pixel rows")
    module_width: int = Field(
        default_factory=_default_module_width, description="Pixels per module"
    )
    foreground: int = Field(
        default_factory=_default_foreground, ge=0, le=255, description="Bar intensity"
    )
    background: int = Field(
        default_factory=_default_background, ge=0, le=255, description="Space intensity"
    )
