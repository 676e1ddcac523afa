#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

from typing import Union


# https://stackoverflow.com/a/1094933/9438331
def sizeof(num: int, suffix="B", base=1024.0) -> str:
    for unit in ["", "K", "M", "G", "T", "P", "E", "Z"]:
        if base == 1024 and unit:
            unit += "i"
        if abs(num) < base:
            return f"{num:.1f} {unit}{suffix}".replace(".0 ", " ")
        num /= base
    return f"{num:.1f} Y{suffix}".replace(".0 ", " ")


def auto_int(value: Union[int, str]) -> int:
    if isinstance(value, str):
        return int(value, 0)
    return int(value)
