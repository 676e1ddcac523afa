#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import os
from logging import DEBUG, INFO, exception

import click
from click import Context

from pftool.util.cli import get_multi_command_class
from pftool.util.logging import VERBOSE, LoggingHandler
from pftool.version import get_version

COMMANDS = {
    # checksum commands
    "checksum": "pftool/commands/checksum.py",
    "fix": "pftool/commands/fix.py",
    # container commands
    "decrypt": "pftool/commands/decrypt.py",
    "encrypt": "pftool/commands/encrypt.py",
    # other commands
    "list": "pftool/commands/list.py",
    "info": "pftool/commands/info.py",
}

VERBOSITY_LEVEL = {
    0: INFO,
    1: DEBUG,
    2: VERBOSE,
}


@click.command(
    cls=get_multi_command_class(COMMANDS),
    help="Pentax firmware checksum and encryption tool",
    context_settings=dict(help_option_names=["-h", "--help"]),
)
@click.option(
    "-v",
    "--verbose",
    help="Output debugging messages (repeat to output more)",
    count=True,
)
@click.option(
    "-T",
    "--traceback",
    help="Print complete exception traceback",
    is_flag=True,
)
@click.option(
    "-t",
    "--timed",
    help="Prepend log lines with timing info",
    is_flag=True,
)
@click.option(
    "-r",
    "--raw-log",
    help="Output logging messages with no additional styling",
    is_flag=True,
)
@click.option(
    "-i",
    "--indent",
    help="Indent log messages using graph lines",
    type=int,
    default=0,
)
@click.version_option(
    get_version(),
    "-V",
    "--version",
    message="pftool %(version)s",
)
@click.pass_context
def cli_entrypoint(
    ctx: Context,
    verbose: int,
    traceback: bool,
    timed: bool,
    raw_log: bool,
    indent: int,
):
    ctx.ensure_object(dict)
    if verbose == 0 and "PFTOOL_VERBOSE" in os.environ:
        verbose = int(os.environ["PFTOOL_VERBOSE"])
    logger = LoggingHandler.get()
    logger.level = VERBOSITY_LEVEL[min(verbose, 2)]
    logger.timed = timed
    logger.raw = raw_log
    logger.indent = indent
    logger.full_traceback = traceback


def cli():
    try:
        cli_entrypoint()
    except Exception as e:
        exception(None, exc_info=e)
        exit(1)


if __name__ == "__main__":
    cli()
