#  Copyright (c) Kuba Szczodrzyński 2026-10-18.

import json
from os.path import isfile
from typing import Union


def readbin(file: str) -> bytearray:
    with open(file, "rb") as f:
        data = bytearray(f.read())
    return data


def writebin(file: str, data: Union[bytes, bytearray]):
    with open(file, "wb") as f:
        f.write(data)


def readjson(file: str) -> Union[dict, list, None]:
    """Read a JSON file into a dict or list."""
    if not isfile(file):
        return None
    with open(file, "r", encoding="utf-8") as f:
        return json.load(f)
