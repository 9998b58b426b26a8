"""
Tests for payload validation and check digit helpers.
"""

import pytest

from barkit.errors import EncodeError, InvalidCharacter, InvalidLength
from barkit.models import Symbology
from barkit.symbology.descriptors import get_descriptor
from barkit.symbology.validator import (
    calculate_check_digit,
    detect_symbology,
    normalize_barcode,
    validate,
    verify_check_digit,
)


class TestValidate:
    """Tests for validate()."""

    def test_accepts_ean13_payload(self):
        """Test a 12 digit payload is accepted for EAN-13."""
        validated = validate("750103131130", Symbology.EAN_13)
        assert validated.data == "750103131130"
        assert validated.symbology == Symbology.EAN_13
        assert validated.digits()[:3] == [7, 5, 0]

    def test_accepts_descriptor_or_value(self):
        """Test the descriptor argument may be a descriptor, enum or string."""
        descriptor = get_descriptor(Symbology.EAN_8)
        assert validate("5512345", descriptor).descriptor is descriptor
        assert validate("5512345", "EAN-8").descriptor is descriptor

    def test_wrong_length(self):
        """Test wrong lengths raise InvalidLength with details."""
        with pytest.raises(InvalidLength) as exc_info:
            validate("12345", Symbology.EAN_13)
        assert exc_info.value.length == 5
        assert exc_info.value.expected == "12"
        assert exc_info.value.symbology == "EAN-13"

    def test_length_checked_before_characters(self):
        """Test a too-long payload with bad characters reports the length."""
        with pytest.raises(InvalidLength):
            validate("1234er123412", Symbology.EAN_8)

    def test_invalid_character(self):
        """Test the first bad character and its position are reported."""
        with pytest.raises(InvalidCharacter) as exc_info:
            validate("40063813339A", Symbology.EAN_13)
        assert exc_info.value.character == "A"
        assert exc_info.value.position == 11

    def test_non_ascii_digit_rejected(self):
        """Test unicode digits are not accepted as payload digits."""
        with pytest.raises(InvalidCharacter):
            validate("4006381333²3", Symbology.EAN_13)

    def test_supplemental_lengths(self):
        """Test add-ons accept exactly 2 or 5 digits."""
        assert validate("12", Symbology.EAN_SUPPLEMENTAL).data == "12"
        assert validate("12345", Symbology.EAN_SUPPLEMENTAL).data == "12345"
        with pytest.raises(InvalidLength) as exc_info:
            validate("123", Symbology.EAN_SUPPLEMENTAL)
        assert exc_info.value.expected == "2 or 5"

    def test_code39_bounds(self):
        """Test Code39 length bounds and alphabet."""
        assert validate("A", Symbology.CODE_39).data == "A"
        assert validate("X" * 256, Symbology.CODE_39)
        with pytest.raises(InvalidLength):
            validate("", Symbology.CODE_39)
        with pytest.raises(InvalidLength):
            validate("X" * 257, Symbology.CODE_39)
        with pytest.raises(InvalidCharacter) as exc_info:
            validate("ABc", Symbology.CODE_39)
        assert exc_info.value.position == 2

    def test_code39_rejects_sentinel(self):
        """Test the start/stop character cannot appear in the payload."""
        with pytest.raises(InvalidCharacter):
            validate("A*B", Symbology.CODE_39)

    def test_ean13_aliases_share_parse_rule(self):
        """Test UPC-A, JAN and Bookland accept any 12 digit payload."""
        for symbology in (Symbology.UPC_A, Symbology.JAN, Symbology.BOOKLAND):
            assert validate("123456789012", symbology).data == "123456789012"
            assert validate("977020137962", symbology).symbology == symbology
            with pytest.raises(InvalidLength):
                validate("1234567890123", symbology)

    def test_upca_lengths(self):
        """Test UPC-A also accepts the 11 digit form."""
        assert validate("03600029145", Symbology.UPC_A)
        with pytest.raises(InvalidLength) as exc_info:
            validate("0360002914", Symbology.UPC_A)
        assert exc_info.value.expected == "11 or 12"

    def test_validation_errors_are_encode_errors(self):
        """Test callers can catch the broad EncodeError."""
        with pytest.raises(EncodeError):
            validate("12345", Symbology.EAN_13)


class TestCheckDigits:
    """Tests for check digit calculation and verification."""

    def test_calculate_ean13_check_digit(self):
        """Test check digit calculation for known EAN-13 codes."""
        assert calculate_check_digit("400638133393", Symbology.EAN_13) == 1
        assert calculate_check_digit("590123412345", Symbology.EAN_13) == 7
        assert calculate_check_digit("001234567890", Symbology.EAN_13) == 5
        assert calculate_check_digit("750103131130", Symbology.EAN_13) == 9

    def test_calculate_ean8_check_digit(self):
        """Test check digit calculation for known EAN-8 codes."""
        assert calculate_check_digit("9638507", Symbology.EAN_8) == 4
        assert calculate_check_digit("5512345", Symbology.EAN_8) == 7
        assert calculate_check_digit("4575678", Symbology.EAN_8) == 8
        assert calculate_check_digit("9534763", Symbology.EAN_8) == 9

    def test_calculate_upca_check_digit(self):
        """Test 11 digit UPC-A payloads weigh like their 0-padded EAN-13 form."""
        assert calculate_check_digit("03600029145", Symbology.UPC_A) == 2
        assert calculate_check_digit("01234567890", Symbology.UPC_A) == 5
        assert calculate_check_digit("003600029145", Symbology.UPC_A) == 2

    def test_no_mod10_check_digit(self):
        """Test symbologies without a mod-10 digit are refused."""
        with pytest.raises(ValueError):
            calculate_check_digit("ABC", Symbology.CODE_39)

    def test_verify_valid(self):
        """Test verification of valid complete codes."""
        valid = [
            ("4006381333931", Symbology.EAN_13),
            ("5901234123457", Symbology.EAN_13),
            ("9780201379624", Symbology.BOOKLAND),
            ("96385074", Symbology.EAN_8),
            ("55123457", Symbology.EAN_8),
            ("036000291452", Symbology.UPC_A),
            ("0036000291452", Symbology.UPC_A),
            ("7501031311309", Symbology.JAN),
        ]
        for code, symbology in valid:
            assert verify_check_digit(code, symbology), f"Expected {code} to be valid"

    def test_verify_invalid(self):
        """Test verification rejects bad codes without raising."""
        invalid = [
            ("4006381333932", Symbology.EAN_13),  # Wrong check digit
            ("123456789012", Symbology.EAN_13),  # Too short
            ("12345678901234", Symbology.EAN_13),  # Too long
            ("400638133393A", Symbology.EAN_13),  # Non-numeric
            ("96385075", Symbology.EAN_8),
            ("1", Symbology.EAN_8),
            ("ABCDEF", Symbology.CODE_39),
        ]
        for code, symbology in invalid:
            assert not verify_check_digit(code, symbology), f"Expected {code} to be invalid"

    def test_verify_every_check_digit(self):
        """Test exactly one trailing digit verifies for a payload."""
        matches = [d for d in "0123456789" if verify_check_digit("750103131130" + d, "EAN-13")]
        assert matches == ["9"]


class TestSymbologyDetection:
    """Tests for symbology detection."""

    def test_detect_numeric(self):
        """Test numeric payload lengths."""
        assert detect_symbology("750103131130") == Symbology.EAN_13
        assert detect_symbology("03600029145") == Symbology.UPC_A
        assert detect_symbology("5512345") == Symbology.EAN_8
        assert detect_symbology("12") == Symbology.EAN_SUPPLEMENTAL
        assert detect_symbology("51234") == Symbology.EAN_SUPPLEMENTAL

    def test_detect_code39(self):
        """Test other alphabet payloads fall back to Code39."""
        assert detect_symbology("1ISTHELONELIESTNUMBER") == Symbology.CODE_39
        assert detect_symbology("123") == Symbology.CODE_39

    def test_detect_unknown(self):
        """Test unknown symbology detection."""
        assert detect_symbology("") == Symbology.UNKNOWN
        assert detect_symbology("abc123") == Symbology.UNKNOWN
        assert detect_symbology("A" * 300) == Symbology.UNKNOWN


class TestNormalization:
    """Tests for payload normalization."""

    def test_normalize_upca_to_ean13(self):
        """Test UPC-A to EAN-13 conversion."""
        result = normalize_barcode("03600029145", Symbology.UPC_A)
        assert result == "003600029145"
        assert len(result) == 12

    def test_others_unchanged(self):
        """Test that other payloads are not changed."""
        assert normalize_barcode("750103131130", Symbology.EAN_13) == "750103131130"
        assert normalize_barcode("5512345", Symbology.EAN_8) == "5512345"
