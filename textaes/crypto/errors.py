#!/usr/bin/env python3
"""
Exceptions raised while building an AES session or decrypting ciphertext
"""


class AESError(ValueError):
    """Base class for every error raised by textaes"""


class EmptyKeyError(AESError):
    def __init__(self):
        super().__init__("key can not be empty")


class InvalidKeyLengthError(AESError):
    """Key is not 16, 24 or 32 bytes and autopad is off"""

    def __init__(self, length):
        self.length = length
        super().__init__(f"invalid key length {length}")


class InvalidIVLengthError(AESError):
    """IV is shorter than the block size and autopad is off"""

    def __init__(self, length):
        self.length = length
        super().__init__(f"invalid iv length {length}")


class InvalidBase64Error(AESError):
    def __init__(self, detail=""):
        message = "ciphertext is not valid base64"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class CiphertextLengthError(AESError):
    """Decoded ciphertext does not fill a whole number of blocks"""

    def __init__(self, length):
        self.length = length
        super().__init__(f"ciphertext length {length} is not a multiple of the block size")


class EmptyCiphertextError(AESError):
    def __init__(self):
        super().__init__("decrypted data is empty")


class PaddingError(AESError):
    """
    PKCS#7 padding is malformed.
    Usually means the ciphertext was produced under a different key/IV
    or has been corrupted.
    """

    def __init__(self, detail="padding is incorrect"):
        super().__init__(detail)


class PlaintextDecodeError(AESError):
    def __init__(self):
        super().__init__("decrypted data is not valid UTF-8")


class PlaintextEncodeError(AESError):
    """Plaintext str cannot be encoded as UTF-8 (e.g. a lone surrogate)"""

    def __init__(self):
        super().__init__("plaintext is not encodable as UTF-8")
