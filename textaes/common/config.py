#!/usr/bin/env python3
"""
Configuration
Default key/IV/autopad for sessions built from the environment
"""

import os
from dotenv import load_dotenv

from textaes.crypto.aes import AESCipher

# Load environment variables from .env file
load_dotenv()

TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


def load_config():
    """Read TEXTAES_* variables (after .env has been applied)"""
    return {
        'key': os.getenv('TEXTAES_KEY', ''),
        'iv': os.getenv('TEXTAES_IV', ''),
        'autopad': env_flag('TEXTAES_AUTOPAD', False),
    }


def cipher_from_env(**overrides):
    """
    Build an AESCipher from TEXTAES_KEY / TEXTAES_IV / TEXTAES_AUTOPAD
    Keyword overrides (key, iv, autopad) win over the environment.
    """
    config = load_config()
    config.update({k: v for k, v in overrides.items() if v is not None})
    return AESCipher(config['key'], config['iv'], config['autopad'])
