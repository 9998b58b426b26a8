"""
Check character arithmetic for the EAN/UPC family and Code39.
"""

from collections.abc import Sequence
from itertools import cycle

from barkit.symbology.tables import CODE39_BY_VALUE, CODE39_TABLE


def weighted_sum(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Sum of digits multiplied by a weight vector repeated from the left."""
    return sum(d * w for d, w in zip(digits, cycle(weights)))


def compute_checksum(digits: Sequence[int], weights: Sequence[int], modulus: int = 10) -> int:
    """
    Calculate a weighted modular check digit.

    Algorithm:
    1. Multiply each digit by the weight at its position (weights repeat)
    2. Sum all results
    3. Check digit = amount needed to reach the next multiple of ``modulus``

    Args:
        digits: Payload digits, leftmost first
        weights: Weight vector, e.g. (1, 3) for EAN-13

    Returns:
        Check digit in ``range(modulus)``
    """
    return (modulus - weighted_sum(digits, weights) % modulus) % modulus


def ean5_check_value(digits: Sequence[int], weights: Sequence[int]) -> int:
    """
    Calculate the EAN-5 add-on check value.

    With the add-on weights (3, 9), digits in odd positions are weighted 3
    and even positions 9, and the sum is taken mod 10 directly. The value is never printed; it only selects the
    parity pattern.
    """
    return weighted_sum(digits, weights) % 10


def ean2_parity_value(digits: Sequence[int]) -> int:
    """EAN-2 parity selector: the two-digit value mod 4."""
    return (digits[0] * 10 + digits[1]) % 4


def code39_check_character(data: str) -> str:
    """Calculate the Code39 mod-43 check character."""
    total = sum(CODE39_TABLE[c][0] for c in data)
    return CODE39_BY_VALUE[total % 43]


def to_digits(code: str) -> list[int]:
    """Convert a digit string into a list of ints."""
    return [int(c) for c in code]
