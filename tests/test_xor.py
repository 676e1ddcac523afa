#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import os

import pytest

from pftool.firmware import SizeMismatchError, load_key, xor_transform
from pftool.firmware.xor import XOR_KEY_ENV


def test_xor_known_value():
    assert xor_transform(b"\x00\xFF\x5A", b"\xA5\xA5\xA5") == b"\xA5\x5A\xFF"


def test_xor_keeps_leading_zeros():
    assert xor_transform(b"\x12\x00\x00", b"\x12\x00\x00") == b"\x00\x00\x00"
    assert xor_transform(b"", b"") == b""


def test_xor_is_self_inverse():
    key = os.urandom(4096)
    data = os.urandom(4096)
    encrypted = xor_transform(data, key)
    assert encrypted != data
    assert xor_transform(encrypted, key) == data


@pytest.mark.parametrize("size", [0, 15, 17, 32])
def test_xor_size_mismatch(size):
    with pytest.raises(SizeMismatchError):
        xor_transform(bytes(size), bytes(16))


def test_load_key_explicit(tmp_path, k30):
    path = tmp_path / "key.bin"
    path.write_bytes(b"\x01\x02\x03")
    assert load_key(k30, str(path)) == b"\x01\x02\x03"


def test_load_key_from_env(tmp_path, monkeypatch, k30):
    path = tmp_path / "key.bin"
    path.write_bytes(b"\xAA")
    monkeypatch.setenv(XOR_KEY_ENV, str(path))
    assert load_key(k30) == b"\xAA"


def test_load_key_missing(monkeypatch, small):
    monkeypatch.delenv(XOR_KEY_ENV, raising=False)
    with pytest.raises(FileNotFoundError):
        load_key(small)
