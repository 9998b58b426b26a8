"""
Per-symbology constants: alphabet, accepted lengths and check policy.
"""

from dataclasses import dataclass
from enum import Enum

from barkit.models.symbology import Symbology
from barkit.symbology.tables import CODE39_ALPHABET, DIGITS


class ChecksumPolicy(str, Enum):
    """How the check character of a symbology is produced."""

    MOD10 = "mod10"
    EAN5 = "ean5"
    MOD43_OPTIONAL = "mod43-optional"
    NONE = "none"


@dataclass(frozen=True)
class SymbologyDescriptor:
    """Read-only description of a symbology."""

    symbology: Symbology
    alphabet: frozenset[str]
    lengths: frozenset[int] | range
    checksum: ChecksumPolicy
    weights: tuple[int, ...] = ()

    @property
    def name(self) -> str:
        return self.symbology.value

    def describe_lengths(self) -> str:
        """Human readable form of the accepted lengths."""
        if isinstance(self.lengths, range):
            return f"{self.lengths.start}-{self.lengths.stop - 1}"
        return " or ".join(str(n) for n in sorted(self.lengths))


_DIGITS = frozenset(DIGITS)

DESCRIPTORS: dict[Symbology, SymbologyDescriptor] = {
    Symbology.EAN_13: SymbologyDescriptor(
        Symbology.EAN_13, _DIGITS, frozenset({12}), ChecksumPolicy.MOD10, (1, 3)
    ),
    # 11 digit UPC-A payloads are padded to 12 with a leading 0 before weighting
    Symbology.UPC_A: SymbologyDescriptor(
        Symbology.UPC_A, _DIGITS, frozenset({11, 12}), ChecksumPolicy.MOD10, (1, 3)
    ),
    Symbology.JAN: SymbologyDescriptor(
        Symbology.JAN, _DIGITS, frozenset({12}), ChecksumPolicy.MOD10, (1, 3)
    ),
    Symbology.BOOKLAND: SymbologyDescriptor(
        Symbology.BOOKLAND, _DIGITS, frozenset({12}), ChecksumPolicy.MOD10, (1, 3)
    ),
    Symbology.EAN_8: SymbologyDescriptor(
        Symbology.EAN_8, _DIGITS, frozenset({7}), ChecksumPolicy.MOD10, (3, 1)
    ),
    Symbology.EAN_SUPPLEMENTAL: SymbologyDescriptor(
        Symbology.EAN_SUPPLEMENTAL, _DIGITS, frozenset({2, 5}), ChecksumPolicy.EAN5, (3, 9)
    ),
    Symbology.CODE_39: SymbologyDescriptor(
        Symbology.CODE_39,
        frozenset(CODE39_ALPHABET),
        range(1, 257),
        ChecksumPolicy.MOD43_OPTIONAL,
    ),
}


def get_descriptor(symbology: Symbology | str) -> SymbologyDescriptor:
    """Look up the descriptor for a symbology (enum member or its value)."""
    try:
        return DESCRIPTORS[Symbology(symbology)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported symbology: {symbology}") from None
