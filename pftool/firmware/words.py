#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import struct
from typing import Union

from .errors import OutOfRangeError

ByteBuffer = Union[bytes, bytearray, memoryview]

WORD_SIZE = 4
U32_MASK = 0xFFFFFFFF


def betoint(data: bytes) -> int:
    return int.from_bytes(data, byteorder="big")


def inttobe32(value: int) -> bytes:
    return (value & U32_MASK).to_bytes(4, byteorder="big")


def word_offset(word_address: int) -> int:
    """Convert a 16-bit word address to a byte offset."""
    return word_address * 2


def check_range(image: ByteBuffer, offset: int, size: int = WORD_SIZE) -> None:
    if offset < 0 or size < 0 or offset + size > len(image):
        raise OutOfRangeError(offset, size, len(image))


def read_word_at(image: ByteBuffer, offset: int) -> int:
    check_range(image, offset)
    return betoint(image[offset : offset + WORD_SIZE])


def read_word(image: ByteBuffer, word_address: int) -> int:
    return read_word_at(image, word_offset(word_address))


def write_word(image: bytearray, offset: int, value: int) -> None:
    # byte offset, not a word address
    check_range(image, offset)
    image[offset : offset + WORD_SIZE] = inttobe32(value)


def sum_words(image: ByteBuffer, offset: int, count: int) -> int:
    """Sum 'count' big-endian 32-bit words starting at 'offset', modulo 2^32."""
    size = count * WORD_SIZE
    if not count:
        return 0
    check_range(image, offset, size)
    words = struct.unpack_from(f">{count}I", image, offset)
    return sum(words) & U32_MASK
