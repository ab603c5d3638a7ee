import struct
from dataclasses import dataclass
from typing import Callable, Generic, NamedTuple, Protocol, Sequence, TypeVar, cast

from .buffer import BufferLike

T_Struct = TypeVar('T_Struct')


class Structured(Protocol[T_Struct]):
    @property
    def size(self) -> int:
        ...

    def unpack_from(self, data: BufferLike, offset: int = 0) -> T_Struct:
        ...

    def pack(self, data: T_Struct) -> bytes:
        ...


@dataclass(frozen=True)
class StructuredTuple(Structured, Generic[T_Struct]):
    """Named record laid out by a `struct.Struct` format."""

    _fields: Sequence[str]
    _structure: struct.Struct
    _factory: Callable[..., T_Struct]

    @property
    def size(self) -> int:
        return self._structure.size

    def unpack_from(self, data: BufferLike, offset: int = 0) -> T_Struct:
        factory = cast(Callable[..., T_Struct], self._factory)
        values = self._structure.unpack_from(data, offset)
        return factory(**dict(zip(self._fields, values)))

    def pack(self, data: T_Struct) -> bytes:
        return self._structure.pack(*[getattr(data, field) for field in self._fields])


class ChunkHeader(NamedTuple):
    size: int
    etag: bytes


class ChunkTrailer(NamedTuple):
    crc: int


# length precedes the type code, both big-endian
CHUNK_HEADER = StructuredTuple(('size', 'etag'), struct.Struct('>I4s'), ChunkHeader)
CHUNK_TRAILER = StructuredTuple(('crc',), struct.Struct('>I'), ChunkTrailer)
