"""
Key splitting and generation for the combined content-encryption key.

    combined key  =  MAC key (left half)  ||  AES key (right half)
"""

import logging
from typing import Tuple

from .algorithms import AlgorithmDescriptor
from .byte_util import left_half, random_bytes, right_half
from .errors import ContentEncryptionError, ErrorKind

logger = logging.getLogger(__name__)


def split_key(descriptor: AlgorithmDescriptor, key: bytes) -> Tuple[bytearray, bytearray]:
    """
    Return (mac_key, enc_key) for ``key``.
    The length must match the descriptor exactly; nothing is truncated.
    Both halves are fresh buffers the caller may zeroize when done.
    """
    expected = descriptor.content_encryption_key_byte_length
    if len(key) % 2 or len(key) != expected:
        raise ContentEncryptionError(
            ErrorKind.INVALID_KEY_LENGTH,
            f"Invalid key for {descriptor.identifier}: expected {expected} bytes "
            f"but got {len(key)}.",
        )
    return left_half(key), right_half(key)


def generate_key(descriptor: AlgorithmDescriptor) -> bytes:
    """Fresh random combined key sized for ``descriptor``."""
    length = descriptor.content_encryption_key_byte_length
    logger.debug(f"Generating {length}B combined key for {descriptor.identifier}")
    return random_bytes(length)
