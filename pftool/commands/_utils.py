#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from logging import info
from typing import Optional

import click

from pftool.firmware import load_key, xor_transform
from pftool.models import CameraProfileParamType
from pftool.models.camera import CameraProfile
from pftool.util.cli import AutoIntParamType
from pftool.util.fileio import readbin, writebin
from pftool.util.misc import sizeof

DEFAULT_CAMERA = "K-30"

camera_option = click.option(
    "-c",
    "--camera",
    help=f"Camera name or profile JSON path (default: {DEFAULT_CAMERA})",
    type=CameraProfileParamType(),
    default=DEFAULT_CAMERA,
)

mode_option = click.option(
    "-m",
    "--mode",
    "modes",
    help="Checksum mode (can be given multiple times, default: all safe modes)",
    type=AutoIntParamType(),
    multiple=True,
)


def xor_file(
    action: str,
    input: str,
    output: str,
    camera: CameraProfile,
    key: Optional[str],
) -> None:
    data = readbin(input)
    info(f"{action} '{input}' ({sizeof(len(data))}) for {camera.title}")
    data = xor_transform(data, load_key(camera, key))
    writebin(output, data)
    info(f"Wrote {len(data)} bytes to '{output}'")


def xor_command(action: str, help: str):
    @click.command(
        help=f"{help}. The device key is not bundled with pftool - pass it "
        f"with -k/--key or $PFTOOL_XOR_KEY."
    )
    @click.argument("input", type=click.Path(exists=True, dir_okay=False))
    @click.argument("output", type=click.Path(dir_okay=False, writable=True))
    @camera_option
    @click.option(
        "-k",
        "--key",
        help="XOR key file (default: $PFTOOL_XOR_KEY, or res/<camera key>)",
        type=click.Path(exists=True, dir_okay=False),
    )
    def cli(input: str, output: str, camera: CameraProfile, key: Optional[str]):
        xor_file(action, input, output, camera, key)

    return cli
