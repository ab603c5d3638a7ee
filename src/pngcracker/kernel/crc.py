"""CRC-32 as used by PNG chunks.

width=32 poly=0x04c11db7 init=0xffffffff refin=true refout=true
xorout=0xffffffff check=0xcbf43926

This is the same variant `zlib.crc32` computes.
"""

import zlib

import deal

from .buffer import BufferLike

CRC_MASK = 0xFFFFFFFF
CRC_CHECK = 0xCBF43926


@deal.chain(
    deal.ensure(lambda _: 0 <= _.result <= CRC_MASK),
    deal.pure,
)
def crc32(*parts: BufferLike) -> int:
    """Checksum of the concatenation of given buffers."""
    crc = 0
    for part in parts:
        crc = zlib.crc32(part, crc)
    return crc & CRC_MASK
