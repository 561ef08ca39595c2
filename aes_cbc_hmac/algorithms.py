"""
Algorithm descriptors — AES_CBC_HMAC_SHA2 family
=================================================
One immutable descriptor per JOSE ``enc`` value (RFC 7518 §5.2):

    A128CBC-HS256   32-byte key   HMAC-SHA-256   16-byte tag
    A192CBC-HS384   48-byte key   HMAC-SHA-384   24-byte tag
    A256CBC-HS512   64-byte key   HMAC-SHA-512   32-byte tag

Descriptors are validated once, at construction, and never change after.
They hold no key material and are safe to share between threads.

Dependencies: cryptography >= 41.0
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from cryptography.hazmat.primitives import hashes

CIPHER_ALGORITHM = "AES/CBC/PKCS5Padding"
KEY_TYPE         = "oct"

_HMAC_HASHES = {
    "HmacSHA256": hashes.SHA256,
    "HmacSHA384": hashes.SHA384,
    "HmacSHA512": hashes.SHA512,
}


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """Static configuration for one AES-CBC + HMAC-SHA-2 variant."""

    identifier: str
    hmac_algorithm: str
    tag_truncation_length: int
    content_encryption_key_byte_length: int
    cipher_algorithm: str = CIPHER_ALGORITHM
    key_type: str = KEY_TYPE

    def __post_init__(self):
        if self.hmac_algorithm not in _HMAC_HASHES:
            raise ValueError(f"Unsupported MAC algorithm: {self.hmac_algorithm}")
        key_len = self.content_encryption_key_byte_length
        if key_len <= 0 or key_len % 2:
            raise ValueError(f"{self.identifier}: combined key length must be positive and even.")
        digest_size = _HMAC_HASHES[self.hmac_algorithm].digest_size
        if not 0 < self.tag_truncation_length <= digest_size:
            raise ValueError(
                f"{self.identifier}: tag length must be 1..{digest_size} bytes "
                f"for {self.hmac_algorithm}."
            )

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        return _HMAC_HASHES[self.hmac_algorithm]()

    @property
    def content_encryption_key_descriptor(self) -> Tuple[int, str]:
        """(byte length, key algorithm) for key-management callers."""
        return self.content_encryption_key_byte_length, "AES"


A128CBC_HS256 = AlgorithmDescriptor(
    identifier="A128CBC-HS256",
    hmac_algorithm="HmacSHA256",
    tag_truncation_length=16,
    content_encryption_key_byte_length=32,
)

A192CBC_HS384 = AlgorithmDescriptor(
    identifier="A192CBC-HS384",
    hmac_algorithm="HmacSHA384",
    tag_truncation_length=24,
    content_encryption_key_byte_length=48,
)

A256CBC_HS512 = AlgorithmDescriptor(
    identifier="A256CBC-HS512",
    hmac_algorithm="HmacSHA512",
    tag_truncation_length=32,
    content_encryption_key_byte_length=64,
)

ALGORITHMS: Dict[str, AlgorithmDescriptor] = {
    d.identifier: d for d in (A128CBC_HS256, A192CBC_HS384, A256CBC_HS512)
}


def get_algorithm(identifier: str) -> AlgorithmDescriptor:
    """Look up a descriptor by its JOSE ``enc`` name."""
    try:
        return ALGORITHMS[identifier]
    except KeyError:
        raise ValueError(
            f"Unknown content encryption algorithm {identifier!r}; "
            f"expected one of {sorted(ALGORITHMS)}"
        ) from None
