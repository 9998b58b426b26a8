"""
Variable-width LZW as used by GIF image data.

Codes start at ``min_code_size + 1`` bits and grow to 12. The stream opens
with a clear code, the table is reset with another clear code once 4096
codes are in use, and the stream ends with the end-of-information code.
"""

from collections.abc import Iterable

from barkit.compression.bits import BitWriter

MAX_CODE_SIZE = 12
MAX_CODES = 1 << MAX_CODE_SIZE
MAX_SUB_BLOCK = 255


def compress(indices: Iterable[int], min_code_size: int) -> bytes:
    """
    LZW-compress a stream of palette indices.

    Args:
        indices: Pixel values, each below ``2 ** min_code_size``
        min_code_size: Initial root size, 2..8 for GIF

    Returns:
        Packed code stream (not yet split into sub-blocks)
    """
    if not 2 <= min_code_size <= 8:
        raise ValueError("Minimum code size must be between 2 and 8")

    clear_code = 1 << min_code_size
    end_code = clear_code + 1

    writer = BitWriter()
    table: dict[tuple[int, int], int] = {}
    code_size = min_code_size + 1
    next_code = end_code + 1
    # The decoder adds a table entry for every code except the first after a clear
    first_after_clear = True

    writer.write_bits(clear_code, code_size)
    prefix: int | None = None

    for index in indices:
        if not 0 <= index < clear_code:
            raise ValueError(f"Index {index} out of range for code size {min_code_size}")
        if prefix is None:
            prefix = index
            continue

        key = (prefix, index)
        if key in table:
            prefix = table[key]
            continue

        writer.write_bits(prefix, code_size)
        first_after_clear = False
        if next_code < MAX_CODES:
            table[key] = next_code
            next_code += 1
            if next_code > (1 << code_size) and code_size < MAX_CODE_SIZE:
                code_size += 1
        else:
            writer.write_bits(clear_code, code_size)
            table.clear()
            code_size = min_code_size + 1
            next_code = end_code + 1
            first_after_clear = True
        prefix = index

    if prefix is not None:
        writer.write_bits(prefix, code_size)
        if not first_after_clear and next_code < MAX_CODES:
            next_code += 1
            if next_code > (1 << code_size) and code_size < MAX_CODE_SIZE:
                code_size += 1

    writer.write_bits(end_code, code_size)
    return writer.getvalue()


def pack_sub_blocks(data: bytes) -> bytes:
    """Split data into size-prefixed sub-blocks of at most 255 bytes, zero terminated."""
    out = bytearray()
    for offset in range(0, len(data), MAX_SUB_BLOCK):
        block = data[offset:offset + MAX_SUB_BLOCK]
        out.append(len(block))
        out += block
    out.append(0)
    return bytes(out)
