#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from logging import info
from typing import Tuple

import click

from pftool.commands._utils import camera_option, mode_option
from pftool.firmware import fix_checksums
from pftool.models.camera import CameraProfile
from pftool.util.fileio import readbin, writebin


@click.command(short_help="Fix the checksum of a modified firmware")
@click.argument("input", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@camera_option
@mode_option
def cli(input: str, output: str, camera: CameraProfile, modes: Tuple[int]):
    """
    Recompute the checksum of a modified firmware image so that the camera
    accepts it. A short string in the firmware is truncated to make room
    for the correction value.

    The output file is written even if the checksums were already correct.

    \b
    Arguments:
      INPUT     Input file name
      OUTPUT    Output file name
    """
    image = readbin(input)
    repaired = fix_checksums(image, camera, modes)
    if repaired:
        info(f"Checksum fixed in mode(s): {', '.join(map(str, repaired))}")
    writebin(output, image)
    info(f"Wrote {len(image)} bytes to '{output}'")
