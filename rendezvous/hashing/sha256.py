import hashlib


def sha256_64(data: bytes) -> int:
    digest = hashlib.sha256(data).digest()
    # First 8 bytes as an unsigned 64-bit integer
    return int.from_bytes(digest[:8], byteorder="big")
