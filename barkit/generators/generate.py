"""
Generator dispatch: module pattern plus render parameters in, bytes out.
"""

from collections.abc import Mapping
from typing import Any

import pydantic
import structlog

from barkit.config import get_settings
from barkit.errors import GenerateError
from barkit.generators.gif import GifWriter
from barkit.generators.png import PngWriter
from barkit.generators.raster import rasterize
from barkit.generators.sink import Sink, emit
from barkit.generators.text import render_text
from barkit.models.pattern import ModulePattern
from barkit.models.render import RenderParams
from barkit.models.symbology import OutputFormat

logger = structlog.get_logger(__name__)


def generate(
    output_format: OutputFormat | str,
    pattern: ModulePattern,
    params: RenderParams | Mapping[str, Any] | None = None,
    sink: Sink | None = None,
) -> bytes:
    """
    Render a pattern into one of the output formats.

    Patterns are drawn module by module. Code39 patterns in wide/narrow form
    should be converted with ``ModulePattern.expand`` first; a warning is
    logged when one is passed as is.

    Args:
        output_format: text, png or gif
        pattern: Module pattern from an encoder
        params: RenderParams or a mapping of its fields (defaults from settings)
        sink: Optional destination for the finished bytes

    Returns:
        The rendered output

    Raises:
        InvalidDimension: Non-positive height or module width
        WriteError: The sink failed
        GenerateError: Unknown output format
    """
    try:
        output_format = OutputFormat(output_format)
    except ValueError:
        raise GenerateError(f"Unsupported output format: {output_format}") from None

    if params is None:
        params = RenderParams()
    elif not isinstance(params, RenderParams):
        try:
            params = RenderParams.model_validate(dict(params))
        except pydantic.ValidationError as e:
            raise GenerateError(f"Invalid render parameters: {e}") from e

    if pattern.wide_narrow:
        logger.warning(
            "Rendering a wide/narrow pattern without expanding it",
            symbology=pattern.symbology.value,
        )

    if output_format == OutputFormat.TEXT:
        data = render_text(pattern, params.height, params.module_width)
    else:
        buffer = rasterize(
            pattern,
            params.height,
            params.module_width,
            foreground=params.foreground,
            background=params.background,
        )
        if output_format == OutputFormat.PNG:
            settings = get_settings()
            writer = PngWriter(settings.png_compression, settings.png_idat_chunk_size)
            data = writer.write(buffer)
        else:
            data = GifWriter().write(buffer)

    logger.debug(
        "Generated output",
        format=output_format.value,
        modules=len(pattern),
        height=params.height,
        module_width=params.module_width,
        size=len(data),
    )
    return emit(data, sink)
