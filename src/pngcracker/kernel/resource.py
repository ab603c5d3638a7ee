from typing import Iterable, Iterator, Tuple, Union

from .buffer import BufferLike, UnexpectedBufferSize, splice
from .chunk import MIN_CHUNK_SIZE, Chunk, untag
from .errors import InvalidChunkType, TruncatedChunk
from .settings import _PngSetting
from .structured import CHUNK_HEADER


def read_chunks(
    cfg: _PngSetting, buffer: BufferLike, offset: int = 0
) -> Iterator[Tuple[int, Chunk]]:
    """Read all chunks from given bytes."""
    data = memoryview(buffer)
    max_size = len(data)
    while offset < max_size:
        span = chunk_span(data, offset)
        chunk = untag(span, cfg=cfg)
        check_type(cfg, offset, chunk)
        cfg.logger.debug(
            'read %s chunk at offset %d, %d bytes', chunk.chunk_type.label, offset, chunk.length
        )
        yield offset, chunk
        offset += len(span)
    assert offset == max_size


def chunk_span(data: BufferLike, offset: int) -> BufferLike:
    """Slice the complete chunk starting at given offset, as declared by its header."""
    try:
        header = CHUNK_HEADER.unpack_from(splice(data, offset, CHUNK_HEADER.size))
        return splice(data, offset, MIN_CHUNK_SIZE + header.size)
    except UnexpectedBufferSize as exc:
        raise TruncatedChunk(offset, exc.expected, exc.given) from exc


def check_type(cfg: _PngSetting, offset: int, chunk: Chunk) -> None:
    if chunk.chunk_type.is_valid:
        return
    exc = InvalidChunkType(offset, chunk.chunk_type.label)
    if cfg.strict:
        raise exc
    cfg.logger.warning(exc)


def write_chunks(chunks: Iterable[Union[bytes, Chunk]]) -> bytes:
    """Write chunks sequence to bytes."""
    stream = bytearray()
    for chunk in chunks:
        stream += bytes(chunk)
    return bytes(stream)
