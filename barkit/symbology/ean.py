"""
EAN-13 family (EAN-13, UPC-A, JAN, Bookland) and EAN-8 encoders.
"""

from barkit.models.pattern import ModulePattern
from barkit.models.symbology import Symbology
from barkit.symbology.checksum import compute_checksum, to_digits
from barkit.symbology.tables import (
    EAN13_PARITY,
    EAN_CENTER_GUARD,
    EAN_CODES,
    EAN_LEFT_GUARD,
    EAN_RIGHT_GUARD,
    L_CODES,
    R_CODES,
)
from barkit.symbology.validator import ValidatedPayload, normalize_barcode

EAN13_FAMILY = (Symbology.EAN_13, Symbology.UPC_A, Symbology.JAN, Symbology.BOOKLAND)

EAN13_MODULES = 95
EAN8_MODULES = 67


def _require(payload: ValidatedPayload, *symbologies: Symbology) -> None:
    if payload.symbology not in symbologies:
        raise ValueError(f"Cannot encode a {payload.symbology.value} payload here")


def encode_ean13(payload: ValidatedPayload) -> ModulePattern:
    """
    Encode a 13-digit symbol.

    The first digit is not drawn; it selects the parity (L or G) of the six
    left-half digits. The right half, including the check digit, uses R codes.

    Args:
        payload: Validated EAN-13, UPC-A, JAN or Bookland payload

    Returns:
        95-module pattern
    """
    _require(payload, *EAN13_FAMILY)

    digits = to_digits(normalize_barcode(payload.data, payload.symbology))
    check = compute_checksum(digits, payload.descriptor.weights)
    digits.append(check)

    parity = EAN13_PARITY[digits[0]]
    left = "".join(EAN_CODES[p][d] for p, d in zip(parity, digits[1:7]))
    right = "".join(R_CODES[d] for d in digits[7:])

    bits = EAN_LEFT_GUARD + left + EAN_CENTER_GUARD + right + EAN_RIGHT_GUARD
    return ModulePattern.from_string(bits, payload.symbology, f"{payload.data}{check}")


def encode_ean8(payload: ValidatedPayload) -> ModulePattern:
    """Encode an EAN-8 symbol: four L-coded digits, then three digits and the check digit R-coded."""
    _require(payload, Symbology.EAN_8)

    digits = payload.digits()
    check = compute_checksum(digits, payload.descriptor.weights)
    digits.append(check)

    left = "".join(L_CODES[d] for d in digits[:4])
    right = "".join(R_CODES[d] for d in digits[4:])

    bits = EAN_LEFT_GUARD + left + EAN_CENTER_GUARD + right + EAN_RIGHT_GUARD
    return ModulePattern.from_string(bits, Symbology.EAN_8, f"{payload.data}{check}")
