"""Copy selected shots' first trace group out of a fixed-layout trace file."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Iterable

DEFAULT_GROUP_BYTES = 2512
DEFAULT_GROUPS_PER_SHOT = 410

# The file number is a 32-bit little-endian integer at byte 4 of each shot.
_FILE_NUMBER = struct.Struct("<i")
_FILE_NUMBER_OFFSET = 4


def extract_groups(source_path, file_numbers: Iterable[int], out_path,
                   group_bytes: int = DEFAULT_GROUP_BYTES,
                   groups_per_shot: int = DEFAULT_GROUPS_PER_SHOT) -> int:
    """Write the first group of every shot whose file number is requested.

    For each requested file number, in the order given, every shot carrying
    that number is copied in file order. Returns how many groups were written.
    """
    if group_bytes < _FILE_NUMBER_OFFSET + _FILE_NUMBER.size:
        raise ValueError("a group is too short to hold a file number")
    if groups_per_shot < 1:
        raise ValueError("a shot must hold at least one group")
    shot_bytes = group_bytes * groups_per_shot
    data = Path(source_path).read_bytes()
    shot_count = len(data) // shot_bytes

    shot_numbers = [
        _FILE_NUMBER.unpack_from(data, shot * shot_bytes + _FILE_NUMBER_OFFSET)[0]
        for shot in range(shot_count)
    ]

    written = 0
    with open(out_path, "wb") as out:
        for wanted in file_numbers:
            for shot, number in enumerate(shot_numbers):
                if number == wanted:
                    start = shot * shot_bytes
                    out.write(data[start:start + group_bytes])
                    written += 1
    return written