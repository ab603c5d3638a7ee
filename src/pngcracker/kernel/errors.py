class PngError(Exception):
    """Base class for every chunk container failure."""


class BadSignature(PngError, ValueError):
    def __init__(self, signature: bytes) -> None:
        super().__init__(f'not a PNG stream, signature was {bytes(signature)!r}')
        self.signature = bytes(signature)


class TooShort(PngError, EOFError):
    def __init__(self, size: int, minimum: int) -> None:
        super().__init__(f'chunk needs at least {minimum} bytes, got {size}')
        self.size = size
        self.minimum = minimum


class TruncatedChunk(PngError, EOFError):
    def __init__(self, offset: int, expected: int, given: int) -> None:
        super().__init__(
            f'chunk at offset {offset} needs {expected} bytes but only {given} remain',
        )
        self.offset = offset
        self.expected = expected
        self.given = given


class CrcMismatch(PngError, ValueError):
    def __init__(self, label: str, stored: int, computed: int) -> None:
        super().__init__(
            f'crc mismatch in {label} chunk: stored 0x{stored:08x}, computed 0x{computed:08x}',
        )
        self.label = label
        self.stored = stored
        self.computed = computed


class PayloadEncodingError(PngError, ValueError):
    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f'{label} chunk data is not valid UTF-8: {reason}')
        self.label = label
        self.reason = reason


class ChunkTypeDecodeError(PngError, ValueError):
    def __init__(self, code: bytes, reason: str) -> None:
        super().__init__(f'chunk type {code!r} is not valid UTF-8: {reason}')
        self.code = code
        self.reason = reason


class ChunkNotFound(PngError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f'no chunk of type {name!r}')
        self.name = name


class InvalidTypeString(PngError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f'chunk type must be exactly 4 ASCII characters, got {name!r}')
        self.name = name


class InvalidChunkType(PngError, ValueError):
    def __init__(self, offset: int, label: str) -> None:
        super().__init__(f'invalid chunk type {label} at offset {offset}')
        self.offset = offset
        self.label = label
