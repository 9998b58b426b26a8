"""
EAN-2 and EAN-5 add-on symbols.

Add-ons are printed to the right of an EAN-13/UPC-A/EAN-8 symbol and carry
an issue number (EAN-2) or a suggested price (EAN-5).
"""

from barkit.config import get_settings
from barkit.models.pattern import ModulePattern
from barkit.models.symbology import Symbology
from barkit.symbology.checksum import ean2_parity_value, ean5_check_value
from barkit.symbology.ean import EAN13_FAMILY
from barkit.symbology.tables import (
    EAN2_PARITY,
    EAN5_PARITY,
    EAN_CODES,
    SUPPLEMENTAL_GUARD,
    SUPPLEMENTAL_SEPARATOR,
)
from barkit.symbology.validator import ValidatedPayload


def supplemental_parity(payload: ValidatedPayload) -> str:
    """Return the L/G parity string for a 2 or 5 digit add-on."""
    digits = payload.digits()
    if len(digits) == 2:
        return EAN2_PARITY[ean2_parity_value(digits)]
    return EAN5_PARITY[ean5_check_value(digits, payload.descriptor.weights)]


def encode_supplemental(payload: ValidatedPayload) -> ModulePattern:
    """
    Encode an add-on symbol.

    Layout: guard ``1011``, then the digits in their selected parity with
    ``01`` between consecutive digits. There is no right guard.

    Args:
        payload: Validated 2 or 5 digit payload

    Returns:
        20-module (EAN-2) or 47-module (EAN-5) pattern
    """
    if payload.symbology != Symbology.EAN_SUPPLEMENTAL:
        raise ValueError(f"Cannot encode a {payload.symbology.value} payload as an add-on")

    digits = payload.digits()
    parity = supplemental_parity(payload)
    body = SUPPLEMENTAL_SEPARATOR.join(EAN_CODES[p][d] for p, d in zip(parity, digits))

    return ModulePattern.from_string(
        SUPPLEMENTAL_GUARD + body, Symbology.EAN_SUPPLEMENTAL, payload.data
    )


def append_supplemental(
    primary: ModulePattern,
    addon: ModulePattern,
    gap: int | None = None,
) -> ModulePattern:
    """
    Place an add-on after a primary symbol.

    Args:
        primary: EAN-13 family or EAN-8 pattern
        addon: Pattern from ``encode_supplemental``
        gap: Background modules between the two (default: settings)

    Returns:
        Combined pattern, labelled with the primary symbology
    """
    if primary.symbology not in (*EAN13_FAMILY, Symbology.EAN_8):
        raise ValueError(f"Add-ons cannot follow a {primary.symbology.value} symbol")
    if addon.symbology != Symbology.EAN_SUPPLEMENTAL:
        raise ValueError("Only EAN-SUPP patterns can be appended as add-ons")

    gap = get_settings().supplemental_gap if gap is None else gap
    if gap < 0:
        raise ValueError("Gap must not be negative")

    return ModulePattern(
        primary.modules + (0,) * gap + addon.modules,
        primary.symbology,
        f"{primary.text} {addon.text}",
    )
