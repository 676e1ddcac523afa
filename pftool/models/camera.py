#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from dataclasses import dataclass, field
from os.path import dirname, isfile, join
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

import click

from pftool.util.fileio import readjson
from pftool.util.misc import auto_int

from .fingerprint import FINGERPRINT_MULTIPLIER

CAMERAS_JSON = join(dirname(__file__), "..", "res", "cameras.json")
CHECKPOINT_COUNT = 3

PF_CAMERAS: Dict[str, "CameraProfile"] = {}


@dataclass(frozen=True)
class ModeGeometry:
    debug_id_address: int
    checkpoints: Tuple[int, int, int]
    override_address: int
    sum_start: int
    sum_words: int

    @classmethod
    def load(cls, obj: dict) -> "ModeGeometry":
        checkpoints = tuple(auto_int(a) for a in obj["checkpoints"])
        if len(checkpoints) != CHECKPOINT_COUNT:
            raise ValueError(
                f"Mode must have exactly {CHECKPOINT_COUNT} checkpoints, "
                f"got {len(checkpoints)}"
            )
        return cls(
            debug_id_address=auto_int(obj["debug_id"]),
            checkpoints=checkpoints,
            override_address=auto_int(obj["override"]),
            sum_start=auto_int(obj["sum_start"]),
            sum_words=auto_int(obj["sum_words"]),
        )


@dataclass(frozen=True)
class CameraProfile:
    name: str
    title: str
    debug_id: int
    modes: Tuple[ModeGeometry, ...]
    # strings in the firmware that can be shortened to make room for the checksum
    # mode -> word address (address + 4 bytes == end of string)
    safe_locations: Mapping[int, int] = field(default_factory=dict)
    xor_key: Optional[str] = None

    def __post_init__(self):
        safe_locations = MappingProxyType(dict(self.safe_locations))
        object.__setattr__(self, "safe_locations", safe_locations)

    @classmethod
    def load(cls, name: str, obj: dict) -> "CameraProfile":
        return cls(
            name=name,
            title=obj.get("title", name),
            debug_id=auto_int(obj["debug_id"]),
            modes=tuple(ModeGeometry.load(mode) for mode in obj["modes"]),
            safe_locations={
                int(mode): auto_int(address)
                for mode, address in obj.get("safe_locations", {}).items()
            },
            xor_key=obj.get("xor_key", None),
        )

    @classmethod
    def get_all(cls) -> List["CameraProfile"]:
        global PF_CAMERAS
        if PF_CAMERAS:
            return list(PF_CAMERAS.values())
        cameras = readjson(CAMERAS_JSON) or {}
        PF_CAMERAS = {
            k: cls.load(k, v) for k, v in cameras.items() if isinstance(v, dict)
        }
        return list(PF_CAMERAS.values())

    @classmethod
    def get(cls, camera: Union[str, dict]) -> "CameraProfile":
        if isinstance(camera, dict):
            return cls.load(camera.get("name", "custom"), camera)
        if isfile(camera):
            cameras = readjson(camera)
            if "debug_id" in cameras:
                return cls.load(camera, cameras)
            if len(cameras) != 1:
                raise ValueError(
                    f"Profile file {camera} must hold exactly one camera"
                )
            name, obj = next(iter(cameras.items()))
            return cls.load(name, obj)
        for profile in cls.get_all():
            if camera.lower() in (profile.name.lower(), profile.title.lower()):
                return profile
        raise ValueError(f"Camera not found - {camera}")

    @property
    def fingerprint(self) -> int:
        return (self.debug_id * FINGERPRINT_MULTIPLIER) & 0xFFFFFFFF

    @property
    def safe_modes(self) -> List[int]:
        return sorted(self.safe_locations)

    def geometry(self, mode: int) -> ModeGeometry:
        if not 0 <= mode < len(self.modes):
            raise ValueError(
                f"Mode {mode} is not defined for {self.title} "
                f"(0..{len(self.modes) - 1})"
            )
        return self.modes[mode]

    def __hash__(self) -> int:
        return hash((self.name, self.debug_id))

    def __repr__(self) -> str:
        return (
            f"<CameraProfile: {self.name}, "
            f"debug_id={self.debug_id}, "
            f"modes={len(self.modes)}>"
        )


class CameraProfileParamType(click.ParamType):
    name = "camera"

    def convert(self, value, param, ctx) -> CameraProfile:
        if isinstance(value, CameraProfile):
            return value
        try:
            return CameraProfile.get(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)
