def read_file(path: str) -> bytes:
    with open(path, 'rb') as res:
        return res.read()


def write_file(path: str, data: bytes) -> int:
    with open(path, 'wb') as res:
        return res.write(data)
