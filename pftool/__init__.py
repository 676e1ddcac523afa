#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from . import firmware, util
from .models import CameraProfile, ModeGeometry
from .version import get_version

__all__ = [
    "CameraProfile",
    "ModeGeometry",
    "cli",
    "firmware",
    "get_version",
    "util",
]


def cli():
    from .__main__ import cli

    cli()
