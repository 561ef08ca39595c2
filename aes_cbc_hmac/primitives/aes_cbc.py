"""
Encryption engine — AES-CBC with PKCS#7 padding
================================================
Thin seam over ``cryptography``'s AES-CBC. Its exceptions are translated into
ContentEncryptionError so the coordinator sees one error type.

Key:    16 / 24 / 32 bytes (AES-128/192/256)
IV:     16 bytes (the AES block size)
Output: ciphertext padded to a whole number of blocks

decrypt_block must only ever be called on ciphertext whose tag has already
been verified.

Dependencies: cryptography >= 41.0
"""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..errors import ContentEncryptionError, ErrorKind

BLOCK_SIZE = 16


def _cipher(enc_key: bytes, iv: bytes) -> Cipher:
    try:
        aes = algorithms.AES(enc_key)
    except (TypeError, ValueError) as e:
        raise ContentEncryptionError(
            ErrorKind.INVALID_KEY, f"Invalid key for AES/CBC: {e}"
        ) from e
    if len(iv) != BLOCK_SIZE:
        raise ContentEncryptionError(
            ErrorKind.INVALID_IV,
            f"IV must be {BLOCK_SIZE} bytes for AES/CBC, got {len(iv)}.",
        )
    try:
        return Cipher(aes, modes.CBC(iv))
    except (TypeError, ValueError) as e:
        raise ContentEncryptionError(ErrorKind.INVALID_IV, str(e)) from e


def encrypt_block(enc_key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    cipher = _cipher(enc_key, iv)
    try:
        padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
        padded = padder.update(plaintext) + padder.finalize()
        encryptor = cipher.encryptor()
        return encryptor.update(padded) + encryptor.finalize()
    except ValueError as e:
        raise ContentEncryptionError(ErrorKind.CIPHER_FAILURE, str(e)) from e


def decrypt_block(enc_key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    cipher = _cipher(enc_key, iv)
    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise ContentEncryptionError(
            ErrorKind.PADDING_OR_BLOCK_SIZE_FAILURE, str(e)
        ) from e
