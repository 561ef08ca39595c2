"""
Error taxonomy
==============
Every cryptographic failure in this package surfaces as a single exception
type, ContentEncryptionError, tagged with an ErrorKind. Callers branch on
``err.kind`` rather than on a class hierarchy.

The message only ever carries non-secret diagnostics. Key bytes and
plaintext never appear in it.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_KEY_LENGTH            = "invalid_key_length"
    INVALID_KEY                   = "invalid_key"
    INVALID_IV                    = "invalid_iv"
    CIPHER_FAILURE                = "cipher_failure"
    PADDING_OR_BLOCK_SIZE_FAILURE = "padding_or_block_size_failure"
    AUTHENTICATION_FAILURE        = "authentication_failure"
    INVALID_CIPHERTEXT            = "invalid_ciphertext"


class ContentEncryptionError(Exception):
    """Raised for any failure while encrypting or decrypting content."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    def __repr__(self):
        return f"ContentEncryptionError({self.kind.name}, {str(self)!r})"

    def __reduce__(self):
        return (self.__class__, (self.kind, str(self)))
