#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from logging import ERROR, INFO, error, info
from typing import Tuple

import click
from click import Context

from pftool.commands._utils import camera_option, mode_option
from pftool.firmware import validate_all
from pftool.models.camera import CameraProfile
from pftool.util.fileio import readbin
from pftool.util.logging import graph


@click.command(short_help="Check the firmware for validity")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@camera_option
@mode_option
@click.pass_context
def cli(ctx: Context, file: str, camera: CameraProfile, modes: Tuple[int]):
    """
    Verify the debug ID, magic fingerprints and checksum of a firmware image.

    Exits with status 1 if any of the checked modes is invalid.

    \b
    Arguments:
      FILE      Input file name
    """
    image = readbin(file)
    graph(0, f"Checking '{file}' as {camera.title} firmware")
    results = validate_all(image, camera, modes)
    for result in results:
        graph(1, result, loglevel=INFO if result.valid else ERROR)

    if all(result.valid for result in results):
        info("Checksum correct")
        return
    error("Checksum invalid")
    ctx.exit(1)
