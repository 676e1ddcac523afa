#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import os
from logging import debug
from os.path import dirname, isfile, join
from typing import Optional

from pftool.models import CameraProfile
from pftool.util.fileio import readbin

from .errors import SizeMismatchError

RES_DIR = join(dirname(__file__), "..", "res")
XOR_KEY_ENV = "PFTOOL_XOR_KEY"


def xor_transform(data: bytes, key: bytes) -> bytes:
    """XOR 'data' with 'key'. Encrypting and decrypting are the same operation."""
    if len(data) != len(key):
        raise SizeMismatchError(
            f"The size of the firmware ({len(data)}) and the size "
            f"of the key ({len(key)}) are not the same"
        )
    value = int.from_bytes(data, "big") ^ int.from_bytes(key, "big")
    return value.to_bytes(len(data), "big")


def find_key(profile: CameraProfile, path: Optional[str] = None) -> str:
    if path:
        return path
    if os.environ.get(XOR_KEY_ENV):
        return os.environ[XOR_KEY_ENV]
    if profile.xor_key:
        path = join(RES_DIR, profile.xor_key)
        if isfile(path):
            return path
    raise FileNotFoundError(
        f"No XOR key available for {profile.title} - "
        f"use --key or set {XOR_KEY_ENV}"
    )


def load_key(profile: CameraProfile, path: Optional[str] = None) -> bytes:
    path = find_key(profile, path)
    debug(f"Loading XOR key from {path}")
    return bytes(readbin(path))
