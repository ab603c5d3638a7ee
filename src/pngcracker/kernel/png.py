from typing import Iterable, Iterator, List, Optional, Sequence

import deal

from .buffer import BufferLike
from .chunk import Chunk
from .errors import BadSignature, ChunkNotFound
from .resource import read_chunks, write_chunks
from .settings import _PngSetting, png
from .tree import describe, findall, matches, renders, with_offsets

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


@deal.chain(
    deal.raises(BadSignature),
    deal.reason(BadSignature, lambda _: bytes(_.buffer[: len(PNG_SIGNATURE)]) != PNG_SIGNATURE),
    deal.has(),
)
def assert_signature(buffer: BufferLike) -> int:
    """Verify stream starts with PNG signature, return offset of first chunk."""
    signature = bytes(buffer[: len(PNG_SIGNATURE)])
    if signature != PNG_SIGNATURE:
        raise BadSignature(signature)
    return len(signature)


class Png(object):
    """PNG signature followed by ordered chunks.

    Chunk order is serialization order, nothing about image structure
    (IHDR first, IEND last, duplicates) is enforced.
    """

    signature = PNG_SIGNATURE

    def __init__(self, chunks: Iterable[Chunk] = ()) -> None:
        self._chunks: List[Chunk] = list(chunks)

    @classmethod
    def from_bytes(cls, buffer: BufferLike, cfg: _PngSetting = png) -> 'Png':
        offset = assert_signature(buffer)
        return cls(chunk for _, chunk in read_chunks(cfg, buffer, offset))

    @property
    def chunks(self) -> Sequence[Chunk]:
        return tuple(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def _index_of(self, name: str) -> int:
        for idx, chunk in enumerate(self._chunks):
            if chunk.chunk_type.matches(name):
                return idx
        raise ChunkNotFound(name)

    def chunk_by_type(self, name: str) -> Chunk:
        """First chunk whose type reads as `name`."""
        return self._chunks[self._index_of(name)]

    def remove_chunk_by_type(self, name: str) -> Chunk:
        """Remove and return first chunk whose type reads as `name`."""
        return self._chunks.pop(self._index_of(name))

    def findall(self, pattern: str) -> Iterator[Chunk]:
        return findall(pattern, self._chunks)

    def index(self, pattern: Optional[str] = None) -> Iterator[dict]:
        """Metadata of each chunk along with its offset in the stream."""
        for offset, chunk in with_offsets(len(self.signature), self._chunks):
            if pattern is None or matches(pattern, chunk):
                yield describe(offset, chunk)

    def __bytes__(self) -> bytes:
        return self.signature + write_chunks(self._chunks)

    def as_bytes(self) -> bytes:
        return bytes(self)

    def __repr__(self) -> str:
        return 'Png[{chunks}]'.format(chunks=', '.join(repr(c) for c in self._chunks))

    def __str__(self) -> str:
        return renders(self.signature, self._chunks)
