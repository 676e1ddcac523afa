#  Copyright (c) Kuba Szczodrzyński 2026-10-18.


class FirmwareError(Exception):
    pass


class OutOfRangeError(FirmwareError, IndexError):
    def __init__(self, offset: int, size: int, length: int) -> None:
        super().__init__(
            f"Offset 0x{offset:X}+{size} is outside the image (length 0x{length:X})"
        )
        self.offset = offset
        self.size = size
        self.length = length


class InvalidFirmwareError(FirmwareError, ValueError):
    pass


class SizeMismatchError(FirmwareError, ValueError):
    pass


class RepairFailedError(FirmwareError, RuntimeError):
    pass
