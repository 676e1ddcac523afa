#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from logging import debug, info
from typing import Iterable, List

from pftool.models import CameraProfile
from pftool.util.logging import dump, graph

from .checksum import compute_checksum
from .errors import RepairFailedError
from .words import U32_MASK, WORD_SIZE, write_word, word_offset

# the adjustable slot is always read back through this mode's sum range
REPAIR_SUM_MODE = 0


def repair(image: bytearray, mode: int, profile: CameraProfile) -> int:
    """
    Make the checksum of 'mode' valid by rewriting a 4-byte slot
    that follows a shortened string in the firmware.

    :return: the correction value written to the slot
    """
    if mode not in profile.safe_locations:
        raise ValueError(
            f"No safe checksum location for mode {mode} of {profile.title}"
        )
    offset_to_safe_str = word_offset(profile.safe_locations[mode])
    offset_to_checksum_var = offset_to_safe_str + WORD_SIZE

    debug(
        f"Repairing mode {mode}: string at 0x{offset_to_safe_str:X}, "
        f"checksum slot at 0x{offset_to_checksum_var:X}"
    )
    slot_end = offset_to_checksum_var + WORD_SIZE
    dump(1, bytes(image[offset_to_safe_str:slot_end]), offset_to_safe_str)

    # terminate the string, we now have 4 bytes to play with
    write_word(image, offset_to_safe_str, 0)
    write_word(image, offset_to_checksum_var, 0)

    checksum = compute_checksum(image, REPAIR_SUM_MODE, profile)
    correction = (U32_MASK - checksum + 1) & U32_MASK
    write_word(image, offset_to_checksum_var, correction)

    graph(1, f"Mode {mode}: wrote 0x{correction:08X} at 0x{offset_to_checksum_var:X}")
    return correction


def fix_checksums(
    image: bytearray,
    profile: CameraProfile,
    modes: Iterable[int] = None,
) -> List[int]:
    """
    Repair every mode whose checksum is not valid.

    Invalid firmware (debug ID/fingerprint mismatch) aborts before any
    modification is made. The image is re-validated afterwards.

    :return: list of modes that were repaired
    """
    modes = list(modes or profile.safe_modes or range(len(profile.modes)))
    checksums = {mode: compute_checksum(image, mode, profile) for mode in modes}
    broken = [mode for mode, checksum in checksums.items() if checksum != 0]
    if not broken:
        info("Firmware checksums are already correct")
        return []

    unsafe = [mode for mode in broken if mode not in profile.safe_locations]
    if unsafe:
        raise RepairFailedError(
            f"Checksum of mode(s) {unsafe} is invalid, but {profile.title} "
            f"has no safe checksum location for them"
        )

    info(f"Fixing checksum of {profile.title} firmware, mode(s): {broken}")
    for mode in broken:
        repair(image, mode, profile)

    for mode in modes:
        checksum = compute_checksum(image, mode, profile)
        if checksum != 0:
            raise RepairFailedError(
                f"Checksum of mode {mode} still invalid after repair "
                f"(0x{checksum:08X}) - safe location table may be wrong "
                f"for this image"
            )
    return broken
