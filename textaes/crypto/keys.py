#!/usr/bin/env python3
"""
Key and IV Normalization
Maps arbitrary-length key/IV input onto AES-legal sizes.

This is a length-fitting convenience, not key derivation: short inputs are
extended by repeating their own bytes from the start, long inputs are
truncated. The scheme is kept byte-for-byte stable so that ciphertexts
produced with normalized keys stay decryptable.
"""

from textaes.common.utils import cycle_extend
from textaes.crypto.errors import (
    EmptyKeyError,
    InvalidKeyLengthError,
    InvalidIVLengthError,
)

AES_KEY_SIZES = (16, 24, 32)
MAX_KEY_SIZE = AES_KEY_SIZES[-1]


def is_valid_key_length(length):
    """16, 24 or 32. A length of 8 is not accepted."""
    return 8 < length <= MAX_KEY_SIZE and length % 8 == 0


def target_key_length(length):
    """Smallest AES key size strictly greater than `length`, else MAX_KEY_SIZE"""
    for size in AES_KEY_SIZES:
        if length < size:
            return size
    return MAX_KEY_SIZE


def normalize_key(key, autopad=False):
    """
    Fit raw key bytes to 16, 24 or 32 bytes

    Args:
        key: raw key bytes
        autopad: extend/truncate instead of rejecting a bad length
    Returns: normalized key bytes
    Raises: EmptyKeyError, InvalidKeyLengthError
    """
    keylen = len(key)
    if keylen == 0:
        raise EmptyKeyError()

    if is_valid_key_length(keylen):
        return bytes(key)

    if not autopad:
        raise InvalidKeyLengthError(keylen)

    if keylen > MAX_KEY_SIZE:
        return bytes(key[:MAX_KEY_SIZE])

    return cycle_extend(key, target_key_length(keylen))


def normalize_iv(iv, key, block_size, autopad=False):
    """
    Fit raw IV bytes to exactly one block

    An empty IV falls back to the first block of the (normalized) key.
    Must run after the key has been normalized and the block size resolved.

    Raises: InvalidIVLengthError
    """
    ivlen = len(iv)
    if ivlen == 0:
        return bytes(key[:block_size])

    if ivlen >= block_size:
        return bytes(iv[:block_size])

    if not autopad:
        raise InvalidIVLengthError(ivlen)

    return cycle_extend(iv, block_size)
