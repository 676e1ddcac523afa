#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from .cli import AutoIntParamType, get_multi_command_class
from .fileio import readbin, readjson, writebin
from .logging import VERBOSE, LoggingHandler, dump, graph, verbose
from .misc import auto_int, sizeof

__all__ = [
    "AutoIntParamType",
    "LoggingHandler",
    "VERBOSE",
    "auto_int",
    "dump",
    "get_multi_command_class",
    "graph",
    "readbin",
    "readjson",
    "sizeof",
    "verbose",
    "writebin",
]
