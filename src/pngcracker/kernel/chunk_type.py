from dataclasses import dataclass

from .buffer import BufferLike, validate_buffer_size
from .errors import ChunkTypeDecodeError, InvalidTypeString

TYPE_SIZE = 4

# byte positions carrying the property bits (bit 5 of each byte)
CRITICAL_BIT = 0
PUBLIC_BIT = 1
RESERVED_BIT = 2
SAFE_TO_COPY_BIT = 3


def _is_letter(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def _is_upper(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A


@dataclass(frozen=True, order=True)
class ChunkType(object):
    """4 byte chunk type code, compared by its big-endian 32-bit value.

    Letter case of each byte encodes a property:
    critical, public, reserved (must be uppercase), safe to copy (lowercase).
    """

    value: int

    @classmethod
    def from_bytes(cls, code: BufferLike) -> 'ChunkType':
        """Any 4 bytes make a chunk type, see `is_valid`."""
        validate_buffer_size(code, TYPE_SIZE)
        return cls(int.from_bytes(code, 'big'))

    @classmethod
    def from_str(cls, name: str) -> 'ChunkType':
        if len(name) != TYPE_SIZE or not name.isascii():
            raise InvalidTypeString(name)
        return cls.from_bytes(name.encode('ascii'))

    def __bytes__(self) -> bytes:
        return self.value.to_bytes(TYPE_SIZE, 'big')

    @property
    def name(self) -> str:
        code = bytes(self)
        try:
            return code.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise ChunkTypeDecodeError(code, exc.reason) from exc

    @property
    def label(self) -> str:
        """Printable form, never fails."""
        return bytes(self).decode('utf-8', errors='backslashreplace')

    def matches(self, name: str) -> bool:
        """True if `name` is the text of this chunk type."""
        return bytes(self) == name.encode('utf-8', errors='surrogatepass')

    @property
    def is_valid(self) -> bool:
        code = bytes(self)
        return all(_is_letter(byte) for byte in code) and _is_upper(code[RESERVED_BIT])

    def _bit(self, position: int) -> bool:
        return _is_upper(bytes(self)[position])

    @property
    def is_critical(self) -> bool:
        return self.is_valid and self._bit(CRITICAL_BIT)

    @property
    def is_public(self) -> bool:
        return self.is_valid and self._bit(PUBLIC_BIT)

    @property
    def is_reserved_bit_valid(self) -> bool:
        return self.is_valid and self._bit(RESERVED_BIT)

    @property
    def is_safe_to_copy(self) -> bool:
        return self.is_valid and not self._bit(SAFE_TO_COPY_BIT)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'ChunkType<{self.label}>'
