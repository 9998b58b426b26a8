"""
Plain text rendition of a module pattern.
"""

from barkit.config import get_settings
from barkit.errors import InvalidDimension
from barkit.models.pattern import ModulePattern


def render_text(
    pattern: ModulePattern,
    height: int = 1,
    module_width: int = 1,
    bar: str | None = None,
    space: str | None = None,
) -> bytes:
    """
    Draw the pattern with one character per module.

    Rows are joined with newlines; there is no trailing newline. Output is
    UTF-8, so block characters such as U+2588 can stand in for bars.
    """
    if height < 1 or module_width < 1:
        raise InvalidDimension("Height and module width must be positive")

    settings = get_settings()
    bar = settings.text_bar if bar is None else bar
    space = settings.text_space if space is None else space
    if len(bar) != 1 or len(space) != 1:
        raise ValueError("Bar and space must be single characters")

    row = "".join((bar if m else space) * module_width for m in pattern)
    return "\n".join([row] * height).encode("utf-8")
