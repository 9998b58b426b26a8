"""
Bit packing for the deflate and LZW encoders.

Both formats fill bytes starting at the least significant bit.
"""


class BitWriter:
    """Accumulates variable-width values into a byte string, LSB first."""

    def __init__(self):
        self._buffer = bytearray()
        self._accumulator = 0
        self._bit_count = 0

    def write_bits(self, value: int, count: int) -> None:
        """Append the low ``count`` bits of ``value``, least significant first."""
        if count < 0 or value >> count:
            raise ValueError(f"Value {value} does not fit in {count} bits")
        self._accumulator |= value << self._bit_count
        self._bit_count += count
        while self._bit_count >= 8:
            self._buffer.append(self._accumulator & 0xFF)
            self._accumulator >>= 8
            self._bit_count -= 8

    def write_code(self, code: int, length: int) -> None:
        """Append a Huffman code, most significant bit first."""
        reversed_code = 0
        for _ in range(length):
            reversed_code = (reversed_code << 1) | (code & 1)
            code >>= 1
        self.write_bits(reversed_code, length)

    def align(self) -> None:
        """Pad with zero bits to the next byte boundary."""
        if self._bit_count:
            self._buffer.append(self._accumulator & 0xFF)
            self._accumulator = 0
            self._bit_count = 0

    def write_bytes(self, data: bytes) -> None:
        """Append whole bytes; the writer must be byte aligned."""
        if self._bit_count:
            raise ValueError("Writer is not byte aligned")
        self._buffer.extend(data)

    @property
    def bit_length(self) -> int:
        return len(self._buffer) * 8 + self._bit_count

    def getvalue(self) -> bytes:
        """Return the packed bytes, with any partial byte zero padded."""
        if self._bit_count:
            return bytes(self._buffer) + bytes([self._accumulator & 0xFF])
        return bytes(self._buffer)
