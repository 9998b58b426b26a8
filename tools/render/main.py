"""
CLI tool to encode a payload and render it as text, PNG or GIF.

Usage:
    python -m tools.render.main 750103131130 --output ean13.png
    python -m tools.render.main 978020137962 --symbology Bookland --format gif -o book.gif
    python -m tools.render.main "HELLO WORLD" --symbology Code39 --checksum --format text
    python -m tools.render.main 501234567890 --supplemental 12345 -x 2 -o priced.png
"""

import sys

import click
import structlog

from barkit.config import configure_logging, get_settings
from barkit.errors import BarkitError
from barkit.generators import generate
from barkit.models import ModulePattern, OutputFormat, RenderParams, Symbology
from barkit.symbology import append_supplemental, detect_symbology, encode

logger = structlog.get_logger(__name__)

SYMBOLOGY_CHOICES = ["auto"] + [s.value for s in Symbology if s != Symbology.UNKNOWN]
FORMAT_CHOICES = [f.value for f in OutputFormat]


def build_pattern(
    payload: str,
    symbology: Symbology,
    checksum: bool | None = None,
    supplemental: str | None = None,
    gap: int | None = None,
) -> ModulePattern:
    """
    Encode a payload and prepare it for rendering.

    Code39 wide/narrow patterns are expanded to bars and spaces, and an
    add-on is appended when given.
    """
    pattern = encode(symbology, payload, checksum=checksum)

    if supplemental:
        addon = encode(Symbology.EAN_SUPPLEMENTAL, supplemental)
        pattern = append_supplemental(pattern, addon, gap)

    if pattern.wide_narrow:
        pattern = pattern.expand(get_settings().code39_wide_ratio)

    return pattern


@click.command()
@click.argument("payload")
@click.option(
    "--symbology", "-s",
    type=click.Choice(SYMBOLOGY_CHOICES),
    default="auto",
    help="Symbology (default: detect from payload)",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="png",
    help="Output format (default: png)",
)
@click.option("--height", "-H", type=int, default=None, help="Height in pixel rows")
@click.option("--module-width", "-x", type=int, default=None, help="Pixels per module")
@click.option(
    "--checksum/--no-checksum",
    default=None,
    help="Code39: append the mod-43 check character",
)
@click.option("--supplemental", default=None, help="EAN-2/EAN-5 add-on digits")
@click.option("--gap", type=int, default=None, help="Modules between symbol and add-on")
@click.option(
    "--output", "-o",
    type=click.File("wb"),
    default="-",
    help="Output file path (defaults to stdout)",
)
def main(
    payload: str,
    symbology: str,
    output_format: str,
    height: int | None,
    module_width: int | None,
    checksum: bool | None,
    supplemental: str | None,
    gap: int | None,
    output,
) -> None:
    """Encode PAYLOAD and write the rendered barcode."""
    configure_logging()
    settings = get_settings()

    resolved = detect_symbology(payload) if symbology == "auto" else Symbology(symbology)
    if resolved == Symbology.UNKNOWN:
        click.echo(f"Cannot detect a symbology for: {payload}", err=True)
        sys.exit(1)

    params = RenderParams(
        height=settings.default_height if height is None else height,
        module_width=settings.default_module_width if module_width is None else module_width,
    )

    try:
        pattern = build_pattern(payload, resolved, checksum, supplemental, gap)
        data = generate(output_format, pattern, params, sink=output)
    except (BarkitError, ValueError) as e:
        logger.error("Render failed", payload=payload, error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info(
        "Barcode written",
        symbology=resolved.value,
        text=pattern.text,
        format=output_format,
        size=len(data),
    )


if __name__ == "__main__":
    main()
