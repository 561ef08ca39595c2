"""
Authentication engine — truncated HMAC-SHA-2.

The full HMAC is computed, then the leading ``tag_truncation_length``
bytes are kept.

Dependencies: cryptography >= 41.0
"""

from cryptography.hazmat.primitives import hmac

from ..algorithms import AlgorithmDescriptor
from ..errors import ContentEncryptionError, ErrorKind


def compute_tag(descriptor: AlgorithmDescriptor, mac_key: bytes, message: bytes) -> bytes:
    try:
        mac = hmac.HMAC(mac_key, descriptor.hash_algorithm())
    except (TypeError, ValueError) as e:
        raise ContentEncryptionError(
            ErrorKind.INVALID_KEY, f"Invalid key for {descriptor.hmac_algorithm}: {e}"
        ) from e
    mac.update(message)
    return mac.finalize()[:descriptor.tag_truncation_length]
