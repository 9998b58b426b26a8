"""
Symbology validation, check digits and encoders.
"""

from barkit.symbology.checksum import (
    code39_check_character,
    compute_checksum,
    ean5_check_value,
)
from barkit.symbology.code39 import encode_code39
from barkit.symbology.descriptors import DESCRIPTORS, SymbologyDescriptor, get_descriptor
from barkit.symbology.ean import encode_ean8, encode_ean13
from barkit.symbology.encoder import encode
from barkit.symbology.supplemental import append_supplemental, encode_supplemental
from barkit.symbology.validator import (
    ValidatedPayload,
    calculate_check_digit,
    detect_symbology,
    normalize_barcode,
    validate,
    verify_check_digit,
)

__all__ = [
    "DESCRIPTORS",
    "SymbologyDescriptor",
    "ValidatedPayload",
    "append_supplemental",
    "calculate_check_digit",
    "code39_check_character",
    "compute_checksum",
    "detect_symbology",
    "ean5_check_value",
    "encode",
    "encode_code39",
    "encode_ean8",
    "encode_ean13",
    "encode_supplemental",
    "get_descriptor",
    "normalize_barcode",
    "validate",
    "verify_check_digit",
]
