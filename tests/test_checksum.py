"""
Tests for check character arithmetic.
"""

from itertools import product

from barkit.models import Symbology
from barkit.symbology.checksum import (
    code39_check_character,
    compute_checksum,
    ean2_parity_value,
    ean5_check_value,
    to_digits,
    weighted_sum,
)
from barkit.symbology.descriptors import get_descriptor


class TestComputeChecksum:
    """Tests for the weighted mod-10 check digit."""

    def test_known_ean13(self):
        """Test EAN-13 weights 1/3 on known codes."""
        assert compute_checksum(to_digits("400638133393"), (1, 3)) == 1
        assert compute_checksum(to_digits("978020137962"), (1, 3)) == 4

    def test_known_ean8(self):
        """Test EAN-8 weights 3/1 on known codes."""
        assert compute_checksum(to_digits("9638507"), (3, 1)) == 4

    def test_multiple_of_ten_gives_zero(self):
        """Test a sum already divisible by 10 gives check digit 0."""
        assert compute_checksum([0, 0, 0], (1, 3)) == 0
        assert compute_checksum([5, 5], (1, 1)) == 0

    def test_completes_to_multiple_of_ten(self):
        """Test appending the check digit makes the weighted sum divisible by 10."""
        for digits in product(range(10), repeat=3):
            payload = [4, 0, 0, 6, 3, 8, 1, 3, 3, *digits]
            check = compute_checksum(payload, (1, 3))
            assert 0 <= check <= 9
            assert weighted_sum([*payload, check], (1, 3)) % 10 == 0

    def test_other_modulus(self):
        """Test the modulus is a parameter."""
        assert compute_checksum([1, 2, 3], (1,), modulus=7) == 1


class TestSupplementalArithmetic:
    """Tests for the add-on selectors."""

    def test_ean5_check_value(self):
        """Test EAN-5 weights 3/9 taken mod 10."""
        weights = get_descriptor(Symbology.EAN_SUPPLEMENTAL).weights
        assert weights == (3, 9)
        assert ean5_check_value([5, 1, 2, 3, 4], weights) == 9
        assert ean5_check_value([5, 2, 4, 9, 5], weights) == 1
        assert ean5_check_value([0, 0, 0, 0, 0], weights) == 0

    def test_ean2_parity_value(self):
        """Test EAN-2 selector is the value mod 4."""
        assert ean2_parity_value([3, 4]) == 2
        assert ean2_parity_value([1, 2]) == 0
        assert ean2_parity_value([9, 9]) == 3


class TestCode39Check:
    """Tests for the mod-43 check character."""

    def test_known_values(self):
        """Test check characters for sample payloads."""
        assert code39_check_character("CODE39") == "W"
        assert code39_check_character("0") == "0"
        assert code39_check_character("%") == "%"

    def test_wraps_around(self):
        """Test sums of 43 or more wrap to the start of the table."""
        # Z (35) + 8 = 43
        assert code39_check_character("Z8") == "0"
