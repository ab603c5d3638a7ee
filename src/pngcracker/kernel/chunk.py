from dataclasses import dataclass, field

import deal

from .buffer import BufferLike, splice, splice_tail
from .chunk_type import ChunkType
from .crc import crc32
from .errors import CrcMismatch, PayloadEncodingError, TooShort
from .settings import _PngSetting, png
from .structured import CHUNK_HEADER, CHUNK_TRAILER, ChunkHeader, ChunkTrailer

MIN_CHUNK_SIZE = CHUNK_HEADER.size + CHUNK_TRAILER.size


@dataclass(frozen=True)
class Chunk(object):
    """Single PNG chunk.

    length: data length as declared in the header

    chunk_type: 4CC type code

    data: chunk payload

    crc: checksum over type code and payload
    """

    length: int
    chunk_type: ChunkType
    data: bytes = field(repr=False)
    crc: int

    @classmethod
    def create(cls, chunk_type: ChunkType, data: bytes) -> 'Chunk':
        data = bytes(data)
        return cls(len(data), chunk_type, data, crc32(bytes(chunk_type), data))

    @classmethod
    def from_bytes(cls, buffer: BufferLike, cfg: _PngSetting = png) -> 'Chunk':
        return untag(buffer, cfg=cfg)

    def __len__(self) -> int:
        return MIN_CHUNK_SIZE + len(self.data)

    def __bytes__(self) -> bytes:
        header = CHUNK_HEADER.pack(ChunkHeader(self.length, bytes(self.chunk_type)))
        return header + self.data + CHUNK_TRAILER.pack(ChunkTrailer(self.crc))

    def as_bytes(self) -> bytes:
        return bytes(self)

    def data_as_text(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise PayloadEncodingError(self.chunk_type.label, str(exc)) from exc

    def __repr__(self) -> str:
        return 'Chunk<{tag}>[{size}, crc=0x{crc:08x}]'.format(
            tag=self.chunk_type.label, size=self.length, crc=self.crc
        )

    def __str__(self) -> str:
        flags = ' '.join(
            name
            for name, enabled in (
                ('critical', self.chunk_type.is_critical),
                ('public', self.chunk_type.is_public),
                ('safe-to-copy', self.chunk_type.is_safe_to_copy),
            )
            if enabled
        )
        return f'{self!r} {flags or "-"} {self.data[:16]!r}'


@deal.chain(
    deal.raises(TooShort, CrcMismatch),
    deal.reason(TooShort, lambda _: len(_.buffer) < MIN_CHUNK_SIZE),
)
def untag(buffer: BufferLike, cfg: _PngSetting = png) -> Chunk:
    """Read single chunk spanning the whole of given buffer.

    The declared length is kept as is, payload is everything between
    the header and the trailing checksum.
    """
    if len(buffer) < MIN_CHUNK_SIZE:
        raise TooShort(len(buffer), MIN_CHUNK_SIZE)
    header = CHUNK_HEADER.unpack_from(buffer)
    chunk_type = ChunkType.from_bytes(header.etag)
    data = bytes(splice(buffer, CHUNK_HEADER.size, len(buffer) - MIN_CHUNK_SIZE))
    trailer = CHUNK_TRAILER.unpack_from(splice_tail(buffer, CHUNK_TRAILER.size))

    computed = crc32(bytes(chunk_type), data)
    if computed != trailer.crc:
        if cfg.check_crc:
            raise CrcMismatch(chunk_type.label, trailer.crc, computed)
        cfg.logger.warning(
            'crc mismatch in %s chunk: stored 0x%08x, computed 0x%08x',
            chunk_type.label,
            trailer.crc,
            computed,
        )
    return Chunk(header.size, chunk_type, data, trailer.crc)


def mktag(chunk_type: ChunkType, data: bytes) -> bytes:
    """Create chunk bytes from given type and data."""
    return bytes(Chunk.create(chunk_type, data))
