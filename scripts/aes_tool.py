#!/usr/bin/env python3
"""
Encrypt or decrypt a string from the command line

Key, IV and autopad default to TEXTAES_KEY / TEXTAES_IV / TEXTAES_AUTOPAD
(read from the environment or a .env file); key and IV can be given as
extra arguments, and --autopad turns on key/IV length fitting.

Usage:
    python scripts/aes_tool.py <encrypt|decrypt> <text> [key] [iv] [--autopad]

Example:
    python scripts/aes_tool.py encrypt hello abcdefebdkhgidhe 1234567890abcdef
    python scripts/aes_tool.py encrypt hello shortkey --autopad
    python scripts/aes_tool.py decrypt lLsxxCAmEXerzzOq4bJy2Q== abcdefebdkhgidhe 1234567890abcdef
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from textaes.common.config import cipher_from_env
from textaes.crypto.errors import AESError

COMMANDS = ('encrypt', 'decrypt')
AUTOPAD_FLAG = '--autopad'


def usage(prog):
    print("Usage:", file=sys.stderr)
    print(f"  {prog} <encrypt|decrypt> <text> [key] [iv] [--autopad]", file=sys.stderr)
    print("  --autopad  extend/truncate key and IV to AES sizes "
          "(default: TEXTAES_AUTOPAD)", file=sys.stderr)


def main(argv=None):
    argv = sys.argv if argv is None else argv

    autopad = True if AUTOPAD_FLAG in argv[1:] else None
    argv = [arg for arg in argv if arg != AUTOPAD_FLAG]

    if len(argv) < 3 or len(argv) > 5 or argv[1] not in COMMANDS:
        usage(argv[0] if argv else 'aes_tool.py')
        return 1

    command, text = argv[1], argv[2]
    key = argv[3] if len(argv) > 3 else None
    iv = argv[4] if len(argv) > 4 else None

    try:
        cipher = cipher_from_env(key=key, iv=iv, autopad=autopad)
        print(f"[*] Session: {cipher!r}", file=sys.stderr)
        if command == 'encrypt':
            result = cipher.encrypt(text)
        else:
            result = cipher.decrypt(text)
    except AESError as e:
        print(f"[✗] {command} failed: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
