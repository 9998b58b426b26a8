"""
Code39 encoder.
"""

from barkit.config import get_settings
from barkit.models.pattern import ModulePattern
from barkit.models.symbology import Symbology
from barkit.symbology.checksum import code39_check_character
from barkit.symbology.tables import CODE39_GAP, CODE39_START_STOP_PATTERN, CODE39_TABLE
from barkit.symbology.validator import ValidatedPayload

MODULES_PER_CHARACTER = 9


def code39_length(data_length: int, checksum: bool = False) -> int:
    """Pattern length for a payload of ``data_length`` characters."""
    characters = data_length + 2 + (1 if checksum else 0)
    return MODULES_PER_CHARACTER * characters + (characters - 1)


def encode_code39(payload: ValidatedPayload, checksum: bool | None = None) -> ModulePattern:
    """
    Encode a Code39 symbol in wide/narrow form.

    The payload is framed by ``*`` start/stop characters, with one narrow
    gap after every character but the last. When ``checksum`` is on, the
    mod-43 check character goes in front of the stop character.

    Args:
        payload: Validated Code39 payload
        checksum: Append the check character (default: settings)

    Returns:
        Pattern with ``wide_narrow`` set
    """
    if payload.symbology != Symbology.CODE_39:
        raise ValueError(f"Cannot encode a {payload.symbology.value} payload as Code39")

    if checksum is None:
        checksum = get_settings().code39_checksum

    data = payload.data
    if checksum:
        data += code39_check_character(data)

    characters = [CODE39_START_STOP_PATTERN]
    characters.extend(CODE39_TABLE[c][1] for c in data)
    characters.append(CODE39_START_STOP_PATTERN)
    bits = CODE39_GAP.join(characters)

    return ModulePattern(
        tuple(int(b) for b in bits),
        Symbology.CODE_39,
        data,
        wide_narrow=True,
    )
