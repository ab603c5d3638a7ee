import io
import sys
from typing import IO, Iterable, Iterator, Tuple

from parse import parse

from .chunk import Chunk


def matches(pattern: str, chunk: Chunk) -> bool:
    """Check chunk type against given `parse` pattern, e.g. '{}Xt'."""
    found = parse(pattern, chunk.chunk_type.label, evaluate_result=False, case_sensitive=True)
    return found is not None


def findall(pattern: str, chunks: Iterable[Chunk]) -> Iterator[Chunk]:
    for chunk in chunks:
        if matches(pattern, chunk):
            yield chunk


def with_offsets(base: int, chunks: Iterable[Chunk]) -> Iterator[Tuple[int, Chunk]]:
    """Pair each chunk with its offset in the serialized stream."""
    offset = base
    for chunk in chunks:
        yield offset, chunk
        offset += len(chunk)


def describe(offset: int, chunk: Chunk) -> dict:
    chunk_type = chunk.chunk_type
    return {
        'offset': offset,
        'type': chunk_type.label,
        'length': chunk.length,
        'crc': f'0x{chunk.crc:08x}',
        'critical': chunk_type.is_critical,
        'public': chunk_type.is_public,
        'safe_to_copy': chunk_type.is_safe_to_copy,
    }


def render(
    signature: bytes, chunks: Iterable[Chunk], stream: IO[str] = sys.stdout
) -> None:
    print(f'<PNG signature="{signature.hex()}">', file=stream)
    for offset, chunk in with_offsets(len(signature), chunks):
        print(f'    {offset:>8} {chunk}', file=stream)
    print('</PNG>', file=stream)


def renders(signature: bytes, chunks: Iterable[Chunk]) -> str:
    with io.StringIO() as stream:
        render(signature, chunks, stream=stream)
        return stream.getvalue()
