import struct
import zlib

import pytest

SIGNATURE = b'\x89PNG\r\n\x1a\n'
SECRET = b'This is where your secret message will be!'
SECRET_CRC = 2882656334


def raw_chunk(etag: bytes, data: bytes, crc=None) -> bytes:
    if crc is None:
        crc = zlib.crc32(etag + data)
    return struct.pack('>I4s', len(data), etag) + data + struct.pack('>I', crc)


@pytest.fixture
def secret_chunk() -> bytes:
    return raw_chunk(b'RuSt', SECRET)


@pytest.fixture
def minimal_png(secret_chunk) -> bytes:
    return SIGNATURE + secret_chunk


@pytest.fixture
def sample_png() -> bytes:
    ihdr = struct.pack('>IIBBBBB', 1, 1, 8, 2, 0, 0, 0)
    # opaque to the codec, only its size matters here
    idat = b'\x78\x9c\x63\x60\x00\x00\x00\x02\x00\x01'
    return SIGNATURE + b''.join(
        (
            raw_chunk(b'IHDR', ihdr),
            raw_chunk(b'tEXt', b'Comment\x00first'),
            raw_chunk(b'IDAT', idat),
            raw_chunk(b'tEXt', b'Comment\x00second'),
            raw_chunk(b'IEND', b''),
        )
    )


@pytest.fixture
def png_file(tmp_path, sample_png):
    path = tmp_path / 'sample.png'
    path.write_bytes(sample_png)
    return path
