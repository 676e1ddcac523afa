#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from dataclasses import dataclass
from logging import debug
from typing import Iterable, List, Optional

from pftool.models import CameraProfile, Fingerprint
from pftool.util.logging import verbose

from .errors import InvalidFirmwareError
from .words import (
    U32_MASK,
    ByteBuffer,
    check_range,
    read_word,
    sum_words,
    word_offset,
)

OVERRIDE_BYPASS = 0xFFFFFFFF


@dataclass
class ChecksumResult:
    mode: int
    checksum: Optional[int] = None
    reason: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.checksum == 0

    def __str__(self) -> str:
        if self.checksum is None:
            return f"mode {self.mode}: invalid firmware ({self.reason})"
        if self.valid:
            return f"mode {self.mode}: OK"
        return f"mode {self.mode}: invalid (0x{self.checksum:08X})"


def read_fingerprint(image: ByteBuffer, word_address: int) -> Fingerprint:
    offset = word_offset(word_address)
    check_range(image, offset, 8)
    return Fingerprint.unpack(bytes(image[offset : offset + 8]))


def compute_checksum(image: ByteBuffer, mode: int, profile: CameraProfile) -> int:
    """
    Compute the firmware checksum of the given mode.

    The image is first recognized by its debug ID and three magic
    fingerprints. A valid image sums up to 0 - any other value is the
    amount the summed region is off by.

    :param image: whole firmware file contents
    :param mode: checksum region selector (index into profile.modes)
    :param profile: camera profile describing the image geometry
    :return: 32-bit checksum, 0 if the image is valid
    :raises InvalidFirmwareError: debug ID or fingerprints don't match
    :raises OutOfRangeError: the geometry points outside the image
    """
    geometry = profile.geometry(mode)

    debug_id = read_word(image, geometry.debug_id_address)
    if debug_id != profile.debug_id:
        raise InvalidFirmwareError(
            f"Firmware does not appear valid: debug id mismatch "
            f"(expected {profile.debug_id}, found {debug_id}) in mode {mode}"
        )

    for address in geometry.checkpoints:
        # the magic word is only read once the signature matches
        if read_word(image, address) != profile.fingerprint:
            raise InvalidFirmwareError(
                f"Firmware does not appear valid: magic fingerprint mismatch "
                f"at 0x{word_offset(address):X} in mode {mode}"
            )
        fingerprint = read_fingerprint(image, address)
        verbose(
            f"Checkpoint 0x{address:X}: "
            f"0x{fingerprint.signature:08X} 0x{fingerprint.magic:08X}"
        )
        if not fingerprint.matches(profile.debug_id):
            raise InvalidFirmwareError(
                f"Firmware does not appear valid: magic fingerprint mismatch "
                f"at 0x{word_offset(address):X} in mode {mode}"
            )

    if read_word(image, geometry.override_address) == OVERRIDE_BYPASS:
        debug(f"Checksum override flag set in mode {mode}")
        return 0

    checksum = sum_words(
        image,
        word_offset(geometry.sum_start),
        geometry.sum_words,
    )
    return checksum & U32_MASK


def validate(image: ByteBuffer, mode: int, profile: CameraProfile) -> ChecksumResult:
    try:
        checksum = compute_checksum(image, mode, profile)
    except InvalidFirmwareError as e:
        debug(str(e))
        return ChecksumResult(mode=mode, reason=str(e))
    debug(f"Checksum of mode {mode}: 0x{checksum:08X}")
    return ChecksumResult(mode=mode, checksum=checksum)


def validate_all(
    image: ByteBuffer,
    profile: CameraProfile,
    modes: Iterable[int] = None,
) -> List[ChecksumResult]:
    if not modes:
        modes = profile.safe_modes or range(len(profile.modes))
    return [validate(image, mode, profile) for mode in modes]
