"""
Tests for the bit writer, deflate and LZW encoders.
"""

import random
import zlib

import pytest

from barkit.compression import BitWriter, DeflateMode, deflate, lzw


class TestBitWriter:
    """Tests for BitWriter."""

    def test_lsb_first(self):
        """Test values fill bytes from the least significant bit."""
        writer = BitWriter()
        writer.write_bits(0b101, 3)
        writer.write_bits(0b1, 1)
        assert writer.getvalue() == b"\x0d"
        assert writer.bit_length == 4

    def test_code_msb_first(self):
        """Test Huffman codes are written most significant bit first."""
        writer = BitWriter()
        writer.write_code(0b110, 3)
        assert writer.getvalue() == b"\x03"

    def test_spans_bytes(self):
        """Test values crossing byte boundaries."""
        writer = BitWriter()
        writer.write_bits(0x3FF, 10)
        writer.write_bits(0, 6)
        assert writer.getvalue() == b"\xff\x03"

    def test_align_and_bytes(self):
        """Test aligning before raw bytes."""
        writer = BitWriter()
        writer.write_bits(1, 1)
        with pytest.raises(ValueError):
            writer.write_bytes(b"x")
        writer.align()
        writer.write_bytes(b"x")
        assert writer.getvalue() == b"\x01x"

    def test_value_too_wide(self):
        """Test values that do not fit are rejected."""
        with pytest.raises(ValueError):
            BitWriter().write_bits(4, 2)


class TestDeflate:
    """Tests for the zlib stream encoder."""

    def test_empty_fixed(self):
        """Test the fixed-Huffman stream for empty input."""
        assert deflate.compress(b"") == b"\x78\x9c\x03\x00\x00\x00\x00\x01"

    def test_single_literal_fixed(self):
        """Test the fixed-Huffman stream for one literal."""
        assert deflate.compress(b"a") == b"\x78\x9c\x4b\x04\x00\x00\x62\x00\x62"

    def test_stored(self):
        """Test the stored stream layout."""
        assert deflate.compress(b"abc", DeflateMode.STORED) == bytes.fromhex(
            "7801" "01" "0300" "fcff" "616263" "024d0127"
        )
        assert deflate.compress(b"", "stored") == bytes.fromhex("7801" "01" "0000" "ffff" "00000001")

    def test_stored_splits_blocks(self):
        """Test stored blocks hold at most 65535 bytes."""
        data = bytes(range(256)) * 300
        stream = deflate.compress(data, DeflateMode.STORED)
        # Header, two blocks of 5 byte headers, trailer
        assert len(stream) == 2 + len(data) + 2 * 5 + 4
        assert stream[2] == 0  # first block not final
        assert zlib.decompress(stream) == data

    def test_tokens(self):
        """Test LZ77 matching on small inputs."""
        assert list(deflate.lz77_tokens(b"aaaa")) == [97, (3, 1)]
        assert list(deflate.lz77_tokens(b"abcabcabc")) == [97, 98, 99, (6, 3)]
        assert list(deflate.lz77_tokens(b"ab")) == [97, 98]

    def test_long_match_split(self):
        """Test runs longer than 258 bytes are split into several matches."""
        tokens = list(deflate.lz77_tokens(b"\x00" * 1000))
        assert tokens[0] == 0
        assert all(length <= 258 for length, _ in tokens[1:])
        assert 1 + sum(length for length, _ in tokens[1:]) == 1000

    @pytest.mark.parametrize(
        "data",
        [
            b"hello hello hello hello",
            b"\xff" * 70000,
            bytes(range(256)) * 40,
            b"\x00\x0f\xf0" * 5000 + b"tail",
        ],
    )
    def test_zlib_decodes_fixed(self, data):
        """Test zlib reads back what the fixed encoder writes."""
        assert zlib.decompress(deflate.compress(data)) == data

    def test_zlib_decodes_random(self):
        """Test distances and lengths across the whole code range."""
        rng = random.Random(7)
        chunks = [bytes(rng.randrange(4) for _ in range(rng.randrange(1, 300))) for _ in range(200)]
        data = b"".join(chunks) + b"".join(chunks[:50])
        assert zlib.decompress(deflate.compress(data)) == data

    def test_repetitive_data_shrinks(self):
        """Test barcode-like rows compress well."""
        row = b"\x00" + b"\xa5\x5a\xff\x00" * 30
        data = row * 80
        assert len(deflate.compress(data)) < len(data) // 10


class TestLZW:
    """Tests for the GIF LZW encoder."""

    def test_repeated_index(self):
        """Test a short run, including the code width change before the end code."""
        # clear, 0, 6, 0 at 3 bits; end code at 4 bits
        assert lzw.compress([0, 0, 0, 0], 2) == b"\x84\x51"

    def test_single_index(self):
        """Test a one pixel stream."""
        assert lzw.compress([1], 2) == b"\x4c\x01"

    def test_empty(self):
        """Test an empty stream is clear plus end code."""
        # 4 then 5, three bits each
        assert lzw.compress([], 2) == b"\x2c"

    def test_index_out_of_range(self):
        """Test indices must fit the root code size."""
        with pytest.raises(ValueError):
            lzw.compress([4], 2)
        with pytest.raises(ValueError):
            lzw.compress([0], 1)

    def test_sub_blocks(self):
        """Test sub-block framing."""
        assert lzw.pack_sub_blocks(b"") == b"\x00"
        data = bytes(300)
        packed = lzw.pack_sub_blocks(data)
        assert packed[0] == 255
        assert packed[256] == 45
        assert packed[-1] == 0
        assert len(packed) == 300 + 3
