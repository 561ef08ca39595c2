"""
AES_CBC_HMAC_SHA2 content encryption — Encrypt-then-MAC
========================================================
The composite AEAD used for JWE content encryption (RFC 7518 §5.2).

    combined key  = MAC_KEY || ENC_KEY           (equal halves)
    ciphertext    = AES-CBC(ENC_KEY, IV, PKCS7(plaintext))
    AL            = uint64_be(bit length of AAD)
    tag           = HMAC-SHA-2(MAC_KEY, AAD || IV || ciphertext || AL)[:T_LEN]

On decrypt the tag is recomputed and compared in constant time before any
ciphertext reaches the block cipher. A mismatch never decrypts.

Instances hold only the immutable descriptor and a debug flag, so one
instance may serve any number of threads at once.

Dependencies: cryptography >= 41.0
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .algorithms import AlgorithmDescriptor, get_algorithm
from .byte_util import (aad_length_bytes, base64url_encode, concat,
                        random_bytes, secure_equals, zeroize)
from .errors import ContentEncryptionError, ErrorKind
from .keys import split_key
from .primitives.aes_cbc import BLOCK_SIZE, decrypt_block, encrypt_block
from .primitives.hmac_sha2 import compute_tag

logger = logging.getLogger(__name__)

DEBUG_TAGS_ENV = "AES_CBC_HMAC_DEBUG_TAGS"
_TRUTHY = {"1", "true", "yes", "on"}


def _bytes_arg(name: str, value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, not {type(value).__name__}")
    return bytes(value)


@dataclass(frozen=True)
class ContentEncryptionParts:
    """IV, ciphertext and authentication tag. Carries no key material."""

    iv: bytes
    ciphertext: bytes
    authentication_tag: bytes


class AesCbcHmacSha2:
    """AES-CBC + truncated HMAC-SHA-2 authenticated encryption."""

    IV_SIZE = BLOCK_SIZE   # 128-bit IV, one AES block

    def __init__(self, descriptor: AlgorithmDescriptor, debug_tags: Optional[bool] = None):
        """
        descriptor -- one of A128CBC_HS256, A192CBC_HS384, A256CBC_HS512.
        debug_tags -- include base64url tags in authentication-failure
                      messages. None reads AES_CBC_HMAC_DEBUG_TAGS.
        """
        if debug_tags is None:
            debug_tags = os.environ.get(DEBUG_TAGS_ENV, "").strip().lower() in _TRUTHY
        self._descriptor = descriptor
        self._debug_tags = debug_tags
        logger.debug(f"AesCbcHmacSha2 {descriptor.identifier} | debug_tags={debug_tags}")

    @classmethod
    def for_identifier(cls, identifier: str, debug_tags: Optional[bool] = None) -> "AesCbcHmacSha2":
        return cls(get_algorithm(identifier), debug_tags=debug_tags)

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return self._descriptor

    @property
    def debug_tags(self) -> bool:
        return self._debug_tags

    def is_available(self) -> bool:
        """True if the installed cryptography backend offers AES-CBC and this HMAC."""
        try:
            aes_key = bytes(self._descriptor.content_encryption_key_byte_length // 2)
            Cipher(algorithms.AES(aes_key), modes.CBC(bytes(self.IV_SIZE))).encryptor()
            hmac.HMAC(bytes(16), self._descriptor.hash_algorithm())
        except UnsupportedAlgorithm:
            return False
        return True

    def _authentication_tag(self, mac_key: bytes, aad: bytes, iv: bytes, ciphertext: bytes) -> bytes:
        al = aad_length_bytes(aad)
        return compute_tag(self._descriptor, mac_key, concat(aad, iv, ciphertext, al))

    def encrypt(self, plaintext: bytes, aad: Optional[bytes], key: bytes,
                iv: Optional[bytes] = None) -> ContentEncryptionParts:
        """
        Encrypt ``plaintext`` and authenticate it together with ``aad``.
        A fresh random IV is drawn unless one is passed; pass one only for
        test vectors, never reuse an IV under the same key.
        """
        plaintext = _bytes_arg("plaintext", plaintext)
        aad = b"" if aad is None else _bytes_arg("aad", aad)
        key = _bytes_arg("key", key)
        if iv is not None:
            iv = _bytes_arg("iv", iv)

        mac_key, enc_key = split_key(self._descriptor, key)
        try:
            if iv is None:
                iv = random_bytes(self.IV_SIZE)
            ciphertext = encrypt_block(enc_key, iv, plaintext)
            tag = self._authentication_tag(mac_key, aad, iv, ciphertext)
        finally:
            zeroize(mac_key)
            zeroize(enc_key)

        logger.debug(
            f"{self._descriptor.identifier} encrypt: pt={len(plaintext)}B "
            f"aad={len(aad)}B ct={len(ciphertext)}B tag={len(tag)}B"
        )
        return ContentEncryptionParts(iv, ciphertext, tag)

    def decrypt(self, parts: ContentEncryptionParts, aad: Optional[bytes],
                key: bytes) -> bytes:
        """
        Verify the tag, then decrypt.
        Raises ContentEncryptionError(AUTHENTICATION_FAILURE) on any tamper,
        without touching the block cipher.
        """
        iv = _bytes_arg("iv", parts.iv)
        ciphertext = _bytes_arg("ciphertext", parts.ciphertext)
        tag = _bytes_arg("authentication_tag", parts.authentication_tag)
        aad = b"" if aad is None else _bytes_arg("aad", aad)
        key = _bytes_arg("key", key)

        mac_key, enc_key = split_key(self._descriptor, key)
        try:
            calculated = self._authentication_tag(mac_key, aad, iv, ciphertext)
            if not secure_equals(tag, calculated):
                logger.warning(f"{self._descriptor.identifier}: authentication tag check failed")
                message = "Authentication tag failed."
                if self._debug_tags:
                    message += (f" Message={base64url_encode(tag)}"
                                f" calculated={base64url_encode(calculated)}")
                raise ContentEncryptionError(ErrorKind.AUTHENTICATION_FAILURE, message)

            try:
                plaintext = decrypt_block(enc_key, iv, ciphertext)
            except ContentEncryptionError as e:
                raise ContentEncryptionError(
                    ErrorKind.INVALID_CIPHERTEXT,
                    f"Authenticated ciphertext could not be decrypted ({e.kind.value}).",
                ) from e
        finally:
            zeroize(mac_key)
            zeroize(enc_key)

        logger.debug(f"{self._descriptor.identifier} decrypt: ct={len(ciphertext)}B pt={len(plaintext)}B")
        return plaintext
