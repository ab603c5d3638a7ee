import pytest

from pngcracker.kernel.chunk import MIN_CHUNK_SIZE, Chunk, mktag, untag
from pngcracker.kernel.chunk_type import ChunkType
from pngcracker.kernel.crc import CRC_CHECK, crc32
from pngcracker.kernel.errors import CrcMismatch, PayloadEncodingError, TooShort
from pngcracker.kernel.settings import png

from .conftest import SECRET, SECRET_CRC, raw_chunk


def test_crc_check_value():
    assert crc32(b'123456789') == CRC_CHECK


def test_crc_parts_concatenate():
    assert crc32(b'RuSt', SECRET) == crc32(b'RuSt' + SECRET) == SECRET_CRC


def test_create():
    chunk = Chunk.create(ChunkType.from_str('RuSt'), SECRET)
    assert chunk.length == 42
    assert chunk.crc == SECRET_CRC
    assert chunk.data == SECRET


def test_from_bytes(secret_chunk):
    chunk = Chunk.from_bytes(secret_chunk)
    assert chunk.length == 42
    assert chunk.chunk_type.name == 'RuSt'
    assert chunk.data_as_text() == SECRET.decode()
    assert chunk.crc == SECRET_CRC


def test_to_bytes_inverts_parse(secret_chunk):
    assert bytes(Chunk.from_bytes(secret_chunk)) == secret_chunk
    assert Chunk.create(ChunkType.from_str('RuSt'), SECRET).as_bytes() == secret_chunk
    assert mktag(ChunkType.from_str('RuSt'), SECRET) == secret_chunk


def test_len_is_serialized_size(secret_chunk):
    assert len(Chunk.from_bytes(secret_chunk)) == len(secret_chunk) == 42 + MIN_CHUNK_SIZE


def test_empty_payload():
    buffer = raw_chunk(b'IEND', b'')
    assert len(buffer) == MIN_CHUNK_SIZE
    chunk = untag(buffer)
    assert chunk.data == b''
    assert chunk.length == 0
    assert bytes(chunk) == buffer


@pytest.mark.parametrize('size', [0, 4, 11])
def test_too_short(secret_chunk, size):
    with pytest.raises(TooShort) as exc:
        untag(secret_chunk[:size])
    assert exc.value.size == size
    assert exc.value.minimum == 12


def test_crc_mismatch():
    buffer = raw_chunk(b'RuSt', SECRET, crc=SECRET_CRC - 1)
    with pytest.raises(CrcMismatch) as exc:
        Chunk.from_bytes(buffer)
    assert exc.value.stored == SECRET_CRC - 1
    assert exc.value.computed == SECRET_CRC


def test_crc_not_over_length_field(secret_chunk):
    # declared length is informational, payload spans up to the checksum
    buffer = b'\x00\x00\x00\x07' + secret_chunk[4:]
    chunk = untag(buffer)
    assert chunk.length == 7
    assert chunk.data == SECRET
    assert bytes(chunk) == buffer


@pytest.mark.parametrize('position', [4, 7, 8, 30, 49])
def test_single_bit_flip_detected(secret_chunk, position):
    corrupted = bytearray(secret_chunk)
    corrupted[position] ^= 0x01
    with pytest.raises(CrcMismatch):
        untag(bytes(corrupted))


def test_crc_mismatch_tolerated(caplog):
    buffer = raw_chunk(b'RuSt', SECRET, crc=0)
    chunk = untag(buffer, cfg=png(check_crc=False))
    assert chunk.crc == 0
    assert bytes(chunk) == buffer
    assert 'crc mismatch in RuSt chunk' in caplog.text


def test_data_as_text_invalid_utf8():
    chunk = Chunk.create(ChunkType.from_str('RuSt'), b'\xff\xfe')
    with pytest.raises(PayloadEncodingError) as exc:
        chunk.data_as_text()
    assert exc.value.label == 'RuSt'


def test_frozen():
    chunk = Chunk.create(ChunkType.from_str('RuSt'), SECRET)
    with pytest.raises(AttributeError):
        chunk.data = b''  # type: ignore


def test_display():
    chunk = Chunk.create(ChunkType.from_str('RuSt'), SECRET)
    assert repr(chunk) == 'Chunk<RuSt>[42, crc=0xabd1d84e]'
    assert str(chunk).startswith('Chunk<RuSt>[42, crc=0xabd1d84e] critical safe-to-copy ')
