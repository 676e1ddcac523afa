#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from .checksum import ChecksumResult, compute_checksum, validate, validate_all
from .errors import (
    FirmwareError,
    InvalidFirmwareError,
    OutOfRangeError,
    RepairFailedError,
    SizeMismatchError,
)
from .repair import fix_checksums, repair
from .words import betoint, inttobe32, read_word, read_word_at, write_word
from .xor import load_key, xor_transform

__all__ = [
    "ChecksumResult",
    "FirmwareError",
    "InvalidFirmwareError",
    "OutOfRangeError",
    "RepairFailedError",
    "SizeMismatchError",
    "betoint",
    "compute_checksum",
    "fix_checksums",
    "inttobe32",
    "load_key",
    "read_word",
    "read_word_at",
    "repair",
    "validate",
    "validate_all",
    "write_word",
    "xor_transform",
]
