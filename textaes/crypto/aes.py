#!/usr/bin/env python3
"""
AES-CBC Encryption/Decryption with PKCS#7 Padding

A session fixes key, IV and block size once at construction; every
encrypt/decrypt call reuses them. Ciphertext travels as standard Base64 of
the raw CBC output, with no embedded IV and no authentication tag, so both
sides must build their session from the same key/IV.
"""

import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from Crypto.Util.Padding import pad, unpad

from textaes.common.utils import to_bytes, b64encode_str, b64decode_str
from textaes.crypto.keys import normalize_key, normalize_iv
from textaes.crypto.errors import (
    CiphertextLengthError,
    EmptyCiphertextError,
    PaddingError,
    PlaintextDecodeError,
    PlaintextEncodeError,
)

logger = logging.getLogger(__name__)


def pkcs7_pad(data, block_size):
    """Append 1..block_size bytes, each equal to the pad length"""
    return pad(data, block_size, style='pkcs7')


def pkcs7_unpad(data, block_size):
    """
    Strip PKCS#7 padding
    Raises:
        EmptyCiphertextError: nothing to unpad
        PaddingError: pad length outside 1..block_size or pad bytes disagree
    """
    if not data:
        raise EmptyCiphertextError()
    try:
        return unpad(data, block_size, style='pkcs7')
    except ValueError as e:
        raise PaddingError(str(e)) from e


class AESCipher:
    """
    AES-CBC session over a normalized key/IV pair.

    Not safe to share between threads: encrypt() and decrypt() record
    their last input/output on the instance.
    """

    def __init__(self, key, iv="", autopad=False):
        self._key = normalize_key(to_bytes(key), autopad)

        algorithm = algorithms.AES(self._key)
        self._block_size = algorithm.block_size // 8

        self._iv = normalize_iv(to_bytes(iv), self._key, self._block_size, autopad)

        self.last_plaintext = None
        self.last_ciphertext = None

        logger.debug("AES-%d-CBC session ready (block size %d)",
                     len(self._key) * 8, self._block_size)

    @property
    def key(self):
        return self._key

    @property
    def iv(self):
        return self._iv

    @property
    def block_size(self):
        return self._block_size

    def _cipher(self):
        # CBC contexts are single-use, build a fresh one per call
        return Cipher(algorithms.AES(self._key), modes.CBC(self._iv))

    def encrypt_bytes(self, data):
        """
        Encrypt raw bytes
        Returns: base64(ciphertext)
        """
        padded = pkcs7_pad(to_bytes(data), self._block_size)
        encryptor = self._cipher().encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return b64encode_str(ciphertext)

    def decrypt_bytes(self, ciphertext_b64):
        """
        Decrypt base64(ciphertext) produced under the same key/IV
        Returns: plaintext (bytes)
        """
        data = b64decode_str(ciphertext_b64)
        if len(data) % self._block_size:
            raise CiphertextLengthError(len(data))

        decryptor = self._cipher().decryptor()
        padded = decryptor.update(data) + decryptor.finalize()
        try:
            return pkcs7_unpad(padded, self._block_size)
        except PaddingError:
            logger.warning("Padding check failed on %d-byte ciphertext; "
                           "wrong key/IV or corrupted data", len(data))
            raise

    def encrypt(self, plaintext):
        """Encrypt UTF-8 text, returns base64 ciphertext"""
        try:
            data = plaintext.encode('utf-8')
        except UnicodeEncodeError as e:
            raise PlaintextEncodeError() from e
        ciphertext = self.encrypt_bytes(data)
        self.last_plaintext = plaintext
        self.last_ciphertext = ciphertext
        return ciphertext

    def decrypt(self, ciphertext):
        """Decrypt base64 ciphertext back to text"""
        raw = self.decrypt_bytes(ciphertext)
        try:
            plaintext = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise PlaintextDecodeError() from e
        self.last_ciphertext = ciphertext
        self.last_plaintext = plaintext
        return plaintext

    def __repr__(self):
        return f"<AESCipher AES-{len(self._key) * 8}-CBC>"


def create(key, iv="", autopad=False):
    """Build an AESCipher, raising AESError subclasses on bad key/IV"""
    return AESCipher(key, iv, autopad)


def aes_encrypt(plaintext, key, iv="", autopad=False):
    """One-shot encrypt: base64(ciphertext)"""
    return AESCipher(key, iv, autopad).encrypt(plaintext)


def aes_decrypt(ciphertext_b64, key, iv="", autopad=False):
    """One-shot decrypt: plaintext (str)"""
    return AESCipher(key, iv, autopad).decrypt(ciphertext_b64)
