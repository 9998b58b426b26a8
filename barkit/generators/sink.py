"""
Hands rendered bytes to a caller-supplied output sink.
"""

from typing import Protocol

import structlog

from barkit.errors import WriteError

logger = structlog.get_logger(__name__)


class Sink(Protocol):
    """Anything that accepts bytes: file objects, BytesIO, sockets wrapped by makefile()."""

    def write(self, data: bytes, /) -> object: ...


def emit(data: bytes, sink: Sink | None) -> bytes:
    """
    Write the complete output to ``sink`` in one call.

    Args:
        data: Finished output bytes
        sink: Destination, or None to only return the bytes

    Returns:
        ``data``

    Raises:
        WriteError: The sink raised, or reported a short write
    """
    if sink is None:
        return data

    try:
        written = sink.write(data)
    except (OSError, ValueError, TypeError) as e:
        logger.error("Output sink failed", error=str(e))
        raise WriteError(f"Failed to write output: {e}") from e

    if isinstance(written, int) and written != len(data):
        logger.error("Short write to output sink", written=written, expected=len(data))
        raise WriteError(f"Short write: {written} of {len(data)} bytes")

    return data
