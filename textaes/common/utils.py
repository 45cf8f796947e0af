#!/usr/bin/env python3
"""
Common Utility Functions
Byte coercion, cyclic extension and Base64 transcoding
"""

import base64
import binascii

from textaes.crypto.errors import InvalidBase64Error


def to_bytes(value):
    """
    Coerce key/IV/plaintext input to bytes
    str is UTF-8 encoded, bytes-like values are copied as-is
    """
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def cycle_extend(data, length):
    """
    Extend data to `length` bytes by repeating it from its first byte.
    The byte appended at position i is data[i % len(data)].

    Example: cycle_extend(b"1234567890", 16) -> b"1234567890123456"
    """
    if not data:
        raise ValueError("cannot extend an empty buffer")
    missing = length - len(data)
    if missing <= 0:
        return bytes(data)
    extension = bytes(data[i % len(data)] for i in range(missing))
    return bytes(data) + extension


def b64encode_str(data):
    """Standard Base64 (with '=' padding) as a str"""
    return base64.b64encode(data).decode('utf-8')


def b64decode_str(text):
    """
    Strict standard Base64 decode
    Line breaks are skipped so wrapped output (e.g. `openssl enc -a`)
    decodes; any other character outside the alphabet is rejected.
    Raises: InvalidBase64Error on characters outside the alphabet or bad padding
    """
    if isinstance(text, str):
        text = text.replace('\r', '').replace('\n', '')
    elif isinstance(text, (bytes, bytearray)):
        text = bytes(text).replace(b'\r', b'').replace(b'\n', b'')
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidBase64Error(str(e)) from e
