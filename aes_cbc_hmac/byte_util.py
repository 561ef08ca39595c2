"""
Byte helpers shared by the key splitter and the AEAD coordinator.
"""

import base64
import hmac
import os
import struct


def random_bytes(length: int) -> bytes:
    return os.urandom(length)


def left_half(data: bytes) -> bytearray:
    view = memoryview(data)
    return bytearray(view[:len(view) // 2])


def right_half(data: bytes) -> bytearray:
    view = memoryview(data)
    return bytearray(view[len(view) // 2:])


def zeroize(buf: bytearray) -> None:
    """Overwrite a mutable key buffer in place."""
    for i in range(len(buf)):
        buf[i] = 0


def bit_length(data: bytes) -> int:
    return len(data) * 8


def aad_length_bytes(aad: bytes) -> bytes:
    """AL: bit length of the AAD as a 64-bit unsigned big-endian integer."""
    return struct.pack('>Q', bit_length(aad))


def concat(*parts: bytes) -> bytes:
    return b"".join(parts)


def secure_equals(a: bytes, b: bytes) -> bool:
    """
    Constant-time equality for two possibly unequal-length byte strings.

    Both inputs are zero-extended to the longer length and compared in full,
    so the work done never depends on where the first differing byte sits.
    A length mismatch is folded into the same boolean result.
    """
    width = max(len(a), len(b))
    same_length = len(a) == len(b)
    left  = bytes(a).ljust(width, b"\x00")
    right = bytes(b).ljust(width, b"\x00")
    same_content = hmac.compare_digest(left, right)
    return same_content & same_length


def base64url_encode(data: bytes) -> str:
    """Unpadded base64url, the encoding JOSE uses for binary values."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")
