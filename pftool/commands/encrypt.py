#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from pftool.commands._utils import xor_command

cli = xor_command("Encrypting", help="Encrypt a firmware image")
