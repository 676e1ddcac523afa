#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import json

import pytest

from pftool.models import CameraProfile, ModeGeometry


def test_k30_profile(k30):
    assert k30.name == "K-30"
    assert k30.title == "Pentax K-30"
    assert k30.debug_id == 524
    assert k30.fingerprint == 524 * 0x10001
    assert k30.safe_locations == {0: 0x2C58E8, 1: 0x8E5BF8}
    assert k30.safe_modes == [0, 1]
    assert len(k30.modes) == 5


def test_k30_geometry(k30):
    assert k30.geometry(0) == ModeGeometry(
        debug_id_address=0x788,
        checkpoints=(0x7FC, 0x57FFFC, 0x5FFFFC),
        override_address=0x7FC,
        sum_start=0,
        sum_words=0x300000,
    )
    mode1 = k30.geometry(1)
    assert mode1.debug_id_address == 0x600088
    assert mode1.checkpoints == (0x600080, 0x600080, 0x61FFF8)
    assert (mode1.sum_start, mode1.sum_words) == (0x600000, 0x10000)
    assert k30.geometry(4).checkpoints == (0, 0, 0)


def test_lookup_by_title(k30):
    assert CameraProfile.get("pentax k-30") is k30
    assert CameraProfile.get("k-30") is k30
    assert k30 in CameraProfile.get_all()


def test_unknown_camera():
    with pytest.raises(ValueError):
        CameraProfile.get("K-5 IV")


def test_unknown_mode(k30):
    with pytest.raises(ValueError):
        k30.geometry(5)
    with pytest.raises(ValueError):
        k30.geometry(-1)


def test_load_from_file(tmp_path):
    from conftest import SMALL_CAMERA

    path = tmp_path / "camera.json"
    path.write_text(json.dumps({"small": SMALL_CAMERA}))
    camera = CameraProfile.get(str(path))
    assert camera.name == "small"
    assert camera.debug_id == 0x1234
    assert camera.safe_locations == {0: 0x40}
    assert camera.geometry(0).checkpoints == (4, 8, 4)


def test_checkpoint_count_enforced():
    from conftest import SMALL_CAMERA

    data = json.loads(json.dumps(SMALL_CAMERA))
    data["modes"][0]["checkpoints"] = ["0x4", "0x8"]
    with pytest.raises(ValueError):
        CameraProfile.get(data)


def test_profile_is_read_only(k30):
    with pytest.raises(TypeError):
        k30.safe_locations[0] = 0
    with pytest.raises(TypeError):
        k30.safe_locations[2] = 0x1000
    assert k30.safe_locations == {0: 0x2C58E8, 1: 0x8E5BF8}
