#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import struct

import pytest

from pftool.models import CameraProfile

K30_SIZE = 0x1200000
K30_FILLER = {0: 0x100, 1: 0xC00010}

SMALL_CAMERA = {
    "name": "small",
    "title": "Small Test Camera",
    "debug_id": "0x1234",
    "safe_locations": {"0": "0x40"},
    "modes": [
        {
            "debug_id": "0x0",
            "checkpoints": ["0x4", "0x8", "0x4"],
            "override": "0xC",
            "sum_start": "0x0",
            "sum_words": "0x40",
        },
    ],
}
SMALL_SIZE = 0x100
SMALL_FILLER = 0xF0


def put_word(image: bytearray, offset: int, value: int) -> None:
    struct.pack_into(">I", image, offset, value & 0xFFFFFFFF)


def region_sum(image: bytearray, offset: int, count: int) -> int:
    words = struct.unpack_from(f">{count}I", image, offset)
    return sum(words) & 0xFFFFFFFF


def sign_mode(image: bytearray, profile: CameraProfile, mode: int) -> None:
    geometry = profile.modes[mode]
    put_word(image, geometry.debug_id_address * 2, profile.debug_id)
    for address in geometry.checkpoints:
        put_word(image, address * 2, profile.debug_id * 0x10001)
        put_word(image, address * 2 + 4, 0xA55A5AA5)


def set_sum(
    image: bytearray,
    profile: CameraProfile,
    mode: int,
    target: int,
    filler: int,
) -> None:
    geometry = profile.modes[mode]
    put_word(image, filler, 0)
    current = region_sum(image, geometry.sum_start * 2, geometry.sum_words)
    put_word(image, filler, target - current)


@pytest.fixture
def k30() -> CameraProfile:
    return CameraProfile.get("K-30")


@pytest.fixture
def small() -> CameraProfile:
    return CameraProfile.get(SMALL_CAMERA)


def make_k30_image(k30: CameraProfile, sums=(0, 0)) -> bytearray:
    image = bytearray(K30_SIZE)
    for mode in (0, 1):
        sign_mode(image, k30, mode)
    for mode in (0, 1):
        set_sum(image, k30, mode, sums[mode], K30_FILLER[mode])
    return image


def make_small_image(small: CameraProfile, target: int = 0) -> bytearray:
    image = bytearray(SMALL_SIZE)
    sign_mode(image, small, 0)
    set_sum(image, small, 0, target, SMALL_FILLER)
    return image


@pytest.fixture
def k30_image(k30) -> bytearray:
    return make_k30_image(k30)


@pytest.fixture
def small_image(small) -> bytearray:
    return make_small_image(small)
