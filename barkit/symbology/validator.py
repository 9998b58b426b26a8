"""
Payload validation and check digit utilities for the supported symbologies.
"""

from dataclasses import dataclass

from barkit.errors import InvalidCharacter, InvalidLength
from barkit.models.symbology import Symbology
from barkit.symbology.checksum import compute_checksum, to_digits
from barkit.symbology.descriptors import (
    ChecksumPolicy,
    SymbologyDescriptor,
    get_descriptor,
)
from barkit.symbology.tables import CODE39_ALPHABET


@dataclass(frozen=True)
class ValidatedPayload:
    """A payload that passed ``validate`` for a given descriptor."""

    data: str
    descriptor: SymbologyDescriptor

    @property
    def symbology(self) -> Symbology:
        return self.descriptor.symbology

    def digits(self) -> list[int]:
        """Payload as ints (numeric symbologies only)."""
        return to_digits(self.data)


def validate(payload: str, descriptor: SymbologyDescriptor | Symbology | str) -> ValidatedPayload:
    """
    Validate a payload against a symbology.

    Checks the length first, then alphabet membership.

    Args:
        payload: Raw payload text (without check digit)
        descriptor: Descriptor, or a symbology to look one up for

    Returns:
        The accepted payload

    Raises:
        InvalidLength: Length not accepted by the symbology
        InvalidCharacter: First character outside the alphabet
    """
    if not isinstance(descriptor, SymbologyDescriptor):
        descriptor = get_descriptor(descriptor)

    if len(payload) not in descriptor.lengths:
        raise InvalidLength(payload, descriptor.name, descriptor.describe_lengths())

    for position, char in enumerate(payload):
        if char not in descriptor.alphabet:
            raise InvalidCharacter(payload, descriptor.name, char, position)

    return ValidatedPayload(payload, descriptor)


def calculate_check_digit(payload: str, symbology: Symbology | str) -> int:
    """
    Calculate the mod-10 check digit for a numeric payload.

    Args:
        payload: Payload digits without check digit
        symbology: A symbology with a mod-10 check digit

    Returns:
        Check digit
    """
    validated = validate(payload, symbology)
    descriptor = validated.descriptor
    if descriptor.checksum != ChecksumPolicy.MOD10:
        raise ValueError(f"{descriptor.name} has no mod-10 check digit")
    digits = to_digits(normalize_barcode(validated.data, validated.symbology))
    return compute_checksum(digits, descriptor.weights)


def verify_check_digit(code: str, symbology: Symbology | str) -> bool:
    """
    Verify a complete code (payload plus trailing check digit).

    Args:
        code: e.g. 13 digits for EAN-13, 8 for EAN-8, 12 or 13 for UPC-A

    Returns:
        True if the code is well formed and its check digit is correct
    """
    if len(code) < 2 or not (code.isascii() and code.isdigit()):
        return False

    try:
        expected = calculate_check_digit(code[:-1], symbology)
    except (ValueError, InvalidLength, InvalidCharacter):
        return False

    return expected == int(code[-1])


def detect_symbology(payload: str) -> Symbology:
    """
    Guess a symbology from a payload without check digit.

    Args:
        payload: Payload text

    Returns:
        Detected symbology, UNKNOWN if none fits
    """
    if payload.isascii() and payload.isdigit():
        length = len(payload)
        if length == 12:
            return Symbology.EAN_13
        elif length == 11:
            return Symbology.UPC_A
        elif length == 7:
            return Symbology.EAN_8
        elif length == 2 or length == 5:
            return Symbology.EAN_SUPPLEMENTAL

    if payload and len(payload) <= 256 and all(c in CODE39_ALPHABET for c in payload):
        return Symbology.CODE_39

    return Symbology.UNKNOWN


def normalize_barcode(payload: str, symbology: Symbology) -> str:
    """
    Normalize a payload to the form its encoder draws.

    - UPC-A: Convert to an EAN-13 payload by adding a leading 0
    - Others: Return as-is
    """
    if symbology == Symbology.UPC_A and len(payload) == 11:
        return "0" + payload
    return payload
