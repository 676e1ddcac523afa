#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import click
from prettytable import PrettyTable

from pftool.models.camera import CameraProfile


@click.command(help="List supported cameras")
def cli():
    table = PrettyTable()
    table.field_names = [
        "Name",
        "Title",
        "Debug ID",
        "Modes",
        "Safe modes",
    ]
    table.align = "l"
    for camera in CameraProfile.get_all():
        table.add_row(
            [
                camera.name,
                camera.title,
                f"{camera.debug_id} (0x{camera.debug_id:X})",
                len(camera.modes),
                ", ".join(map(str, camera.safe_modes)) or "-",
            ]
        )
    click.echo(table.get_string())
