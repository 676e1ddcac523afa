#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import click
from prettytable import PrettyTable

from pftool.commands._utils import camera_option
from pftool.firmware.xor import XOR_KEY_ENV, find_key
from pftool.models.camera import CameraProfile
from pftool.util.misc import sizeof


@click.command(help="Print checksum geometry of a camera profile")
@camera_option
def cli(camera: CameraProfile):
    click.echo(f"{camera.title} ({camera.name})")
    click.echo(f"Debug ID: {camera.debug_id} (0x{camera.debug_id:X})")
    click.echo(f"Fingerprint: 0x{camera.fingerprint:08X}")
    try:
        click.echo(f"XOR key: {find_key(camera)}")
    except FileNotFoundError:
        click.echo(f"XOR key: not bundled (use --key or ${XOR_KEY_ENV})")

    table = PrettyTable()
    table.field_names = [
        "Mode",
        "Debug ID at",
        "Checkpoints at",
        "Override at",
        "Summed region",
        "Safe location",
    ]
    table.align = "l"
    for mode, geometry in enumerate(camera.modes):
        start = geometry.sum_start * 2
        length = geometry.sum_words * 4
        safe = camera.safe_locations.get(mode, None)
        table.add_row(
            [
                mode,
                f"0x{geometry.debug_id_address * 2:X}",
                ", ".join(f"0x{a * 2:X}" for a in geometry.checkpoints),
                f"0x{geometry.override_address * 2:X}",
                f"0x{start:06X}+0x{length:X} ({sizeof(length)})",
                "-" if safe is None else f"0x{safe * 2:X}",
            ]
        )
    click.echo(table.get_string())
