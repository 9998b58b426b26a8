"""
Symbology dispatch: payload text in, module pattern out.
"""

from collections.abc import Callable

import structlog

from barkit.errors import EncodeError
from barkit.models.pattern import ModulePattern
from barkit.models.symbology import Symbology
from barkit.symbology.code39 import encode_code39
from barkit.symbology.descriptors import DESCRIPTORS, ChecksumPolicy
from barkit.symbology.ean import encode_ean8, encode_ean13
from barkit.symbology.supplemental import encode_supplemental
from barkit.symbology.validator import ValidatedPayload, validate

logger = structlog.get_logger(__name__)

ENCODERS: dict[Symbology, Callable[[ValidatedPayload], ModulePattern]] = {
    Symbology.EAN_13: encode_ean13,
    Symbology.UPC_A: encode_ean13,
    Symbology.JAN: encode_ean13,
    Symbology.BOOKLAND: encode_ean13,
    Symbology.EAN_8: encode_ean8,
    Symbology.EAN_SUPPLEMENTAL: encode_supplemental,
    Symbology.CODE_39: encode_code39,
}


def encode(
    symbology: Symbology | str,
    payload: str,
    *,
    checksum: bool | None = None,
) -> ModulePattern:
    """
    Validate and encode a payload.

    Args:
        symbology: Target symbology (enum member or value such as "EAN-13")
        payload: Payload text without check digit
        checksum: Code39 only; append the mod-43 check character

    Returns:
        Module pattern for the symbol

    Raises:
        InvalidLength, InvalidCharacter: Payload rejected
        EncodeError: Unsupported symbology or option
    """
    try:
        symbology = Symbology(symbology)
        descriptor = DESCRIPTORS[symbology]
    except (KeyError, ValueError):
        raise EncodeError(f"Unsupported symbology: {symbology}") from None

    if checksum is False and descriptor.checksum == ChecksumPolicy.MOD10:
        raise EncodeError(f"{descriptor.name} always carries a check digit")

    validated = validate(payload, descriptor)

    if symbology == Symbology.CODE_39:
        pattern = encode_code39(validated, checksum=checksum)
    else:
        pattern = ENCODERS[symbology](validated)

    logger.debug(
        "Encoded payload",
        symbology=symbology.value,
        text=pattern.text,
        modules=len(pattern),
    )
    return pattern
