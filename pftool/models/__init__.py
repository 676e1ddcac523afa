#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from .camera import CameraProfile, CameraProfileParamType, ModeGeometry
from .fingerprint import Fingerprint

__all__ = [
    "CameraProfile",
    "CameraProfileParamType",
    "Fingerprint",
    "ModeGeometry",
]
