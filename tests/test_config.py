#!/usr/bin/env python3
"""
Environment-driven session configuration
"""

import pytest

from textaes.common.config import load_config, cipher_from_env, env_flag
from textaes.crypto.errors import EmptyKeyError, InvalidKeyLengthError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ('TEXTAES_KEY', 'TEXTAES_IV', 'TEXTAES_AUTOPAD'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    assert load_config() == {'key': '', 'iv': '', 'autopad': False}


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("true", True), ("YES", True), (" on ", True),
    ("0", False), ("false", False), ("", False),
])
def test_env_flag(clean_env, value, expected):
    clean_env.setenv('TEXTAES_AUTOPAD', value)
    assert env_flag('TEXTAES_AUTOPAD') is expected


def test_cipher_from_env(clean_env):
    clean_env.setenv('TEXTAES_KEY', '1234567890')
    clean_env.setenv('TEXTAES_AUTOPAD', 'true')
    cipher = cipher_from_env()
    assert cipher.key == b"1234567890123456"
    assert cipher.iv == b"1234567890123456"


def test_overrides_win(clean_env):
    clean_env.setenv('TEXTAES_KEY', 'short')
    cipher = cipher_from_env(key='abcdefebdkhgidhe', iv='1234567890abcdef')
    assert cipher.encrypt("hello") == "lLsxxCAmEXerzzOq4bJy2Q=="


def test_none_overrides_are_ignored(clean_env):
    clean_env.setenv('TEXTAES_KEY', 'abcdefebdkhgidhe')
    assert cipher_from_env(key=None, iv=None).key == b"abcdefebdkhgidhe"


def test_missing_key(clean_env):
    with pytest.raises(EmptyKeyError):
        cipher_from_env()


def test_autopad_off_by_default(clean_env):
    clean_env.setenv('TEXTAES_KEY', '1234567890')
    with pytest.raises(InvalidKeyLengthError):
        cipher_from_env()


def test_environment_read_on_every_call(clean_env):
    clean_env.setenv('TEXTAES_KEY', 'abcdefebdkhgidhe')
    assert cipher_from_env().key == b"abcdefebdkhgidhe"
    clean_env.setenv('TEXTAES_KEY', '1234567890abcdef')
    assert cipher_from_env().key == b"1234567890abcdef"


def test_no_import_time_snapshot():
    import textaes.common.config as config
    assert not hasattr(config, 'AES_CONFIG')
