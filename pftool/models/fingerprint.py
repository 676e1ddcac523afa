#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from dataclasses import dataclass

from datastruct import DataStruct, Endianness, datastruct
from datastruct.fields import field

FINGERPRINT_MAGIC = 0xA55A5AA5
FINGERPRINT_MULTIPLIER = 0x10001


@dataclass
@datastruct(endianness=Endianness.BIG)
class Fingerprint(DataStruct):
    signature: int = field("I")
    magic: int = field("I")

    def matches(self, debug_id: int) -> bool:
        signature = (debug_id * FINGERPRINT_MULTIPLIER) & 0xFFFFFFFF
        return self.signature == signature and self.magic == FINGERPRINT_MAGIC
