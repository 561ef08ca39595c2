"""
aes_cbc_hmac — AES_CBC_HMAC_SHA2 content encryption
====================================================
Encrypt-then-MAC authenticated encryption for JWE content (RFC 7518 §5.2).

Variants:
    A128CBC-HS256   AES-128-CBC + HMAC-SHA-256, 16-byte tag
    A192CBC-HS384   AES-192-CBC + HMAC-SHA-384, 24-byte tag
    A256CBC-HS512   AES-256-CBC + HMAC-SHA-512, 32-byte tag

Usage:
    aead  = AesCbcHmacSha2(A128CBC_HS256)
    key   = generate_key(A128CBC_HS256)
    parts = aead.encrypt(b"secret", b"header", key)
    aead.decrypt(parts, b"header", key)

License: Apache 2.0
"""

__version__ = "1.0.0"

from .algorithms import (ALGORITHMS, A128CBC_HS256, A192CBC_HS384, A256CBC_HS512,
                         AlgorithmDescriptor, get_algorithm)
from .content    import AesCbcHmacSha2, ContentEncryptionParts
from .errors     import ContentEncryptionError, ErrorKind
from .keys       import generate_key, split_key

__all__ = [
    "AlgorithmDescriptor",
    "A128CBC_HS256",
    "A192CBC_HS384",
    "A256CBC_HS512",
    "ALGORITHMS",
    "get_algorithm",
    "AesCbcHmacSha2",
    "ContentEncryptionParts",
    "ContentEncryptionError",
    "ErrorKind",
    "generate_key",
    "split_key",
]
