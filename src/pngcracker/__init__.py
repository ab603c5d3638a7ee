from .kernel.chunk import Chunk
from .kernel.chunk_type import ChunkType
from .kernel.errors import (
    BadSignature,
    ChunkNotFound,
    ChunkTypeDecodeError,
    CrcMismatch,
    InvalidChunkType,
    InvalidTypeString,
    PayloadEncodingError,
    PngError,
    TooShort,
    TruncatedChunk,
)
from .kernel.png import PNG_SIGNATURE, Png
from .kernel.settings import png

__all__ = [
    'BadSignature',
    'Chunk',
    'ChunkNotFound',
    'ChunkType',
    'ChunkTypeDecodeError',
    'CrcMismatch',
    'InvalidChunkType',
    'InvalidTypeString',
    'PNG_SIGNATURE',
    'PayloadEncodingError',
    'Png',
    'PngError',
    'TooShort',
    'TruncatedChunk',
    'png',
]
