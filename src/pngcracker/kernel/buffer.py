from typing import Optional, Union

import deal

BufferLike = Union[bytes, bytearray, memoryview]


class UnexpectedBufferSize(EOFError):
    def __init__(self, expected: int, given: int, buffer: BufferLike) -> None:
        super().__init__(f'expected {expected} bytes, got {given}')
        self.expected = expected
        self.given = given
        self.buffer = buffer


@deal.chain(
    deal.pre(lambda _: _.size is None or _.size >= 0),
    deal.raises(UnexpectedBufferSize),
    deal.reason(UnexpectedBufferSize, lambda _: _.size != len(_.buffer)),
    deal.has(),
)
def validate_buffer_size(buffer: BufferLike, size: Optional[int] = None) -> BufferLike:
    """Return buffer unchanged if it holds exactly `size` bytes."""
    if size is not None and len(buffer) != size:
        raise UnexpectedBufferSize(size, len(buffer), buffer)
    return buffer


@deal.chain(
    deal.pre(lambda _: _.size >= 0),
    deal.pre(lambda _: 0 <= _.offset <= len(_.buffer)),
    deal.raises(UnexpectedBufferSize),
    deal.reason(UnexpectedBufferSize, lambda _: _.offset + _.size > len(_.buffer)),
    deal.has(),
)
def splice(buffer: BufferLike, offset: int, size: int) -> BufferLike:
    """Take exactly `size` bytes starting at `offset`."""
    return validate_buffer_size(buffer[offset : offset + size], size)


@deal.chain(
    deal.pre(lambda _: _.size >= 0),
    deal.raises(UnexpectedBufferSize),
    deal.reason(UnexpectedBufferSize, lambda _: _.size > len(_.buffer)),
    deal.has(),
)
def splice_tail(buffer: BufferLike, size: int) -> BufferLike:
    """Take exactly the last `size` bytes."""
    return splice(buffer, max(len(buffer) - size, 0), size)

