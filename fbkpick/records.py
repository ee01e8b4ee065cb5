"""Fixed-size binary records of first-break picks and the file that holds them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

# A record is a 32-bit file number, four bytes of padding and a 64-bit
# first-break time, little endian.
_RECORD = struct.Struct("<i4xd")
RECORD_SIZE = _RECORD.size


@dataclass
class FirstBreakRecord:
    """One trace's shot file number and its first-break time in ms."""

    file_number: int = 0
    first_break: float = 0.0

    def pack(self) -> bytes:
        return _RECORD.pack(self.file_number, self.first_break)

    @classmethod
    def unpack(cls, data: bytes) -> "FirstBreakRecord":
        file_number, first_break = _RECORD.unpack(data)
        return cls(file_number, first_break)


class FirstBreakFile:
    """Random-access file of first-break records, created if missing."""

    def __init__(self, path):
        self.path = Path(path)
        if not self.path.exists():
            self.path.touch()
        self._fp = open(self.path, "r+b")

    def __enter__(self) -> "FirstBreakFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._fp.closed

    def close(self) -> None:
        self._fp.close()

    def _check_open(self) -> None:
        if self._fp.closed:
            raise ValueError(f"first-break file {self.path} is closed")

    def trace_count(self) -> int:
        """Number of whole records in the file."""
        self._check_open()
        self._fp.seek(0, 2)
        return self._fp.tell() // RECORD_SIZE

    def get(self, pos: int, n: int = 1) -> list[FirstBreakRecord]:
        """Read ``n`` records from record ``pos``; missing ones come back zeroed."""
        self._check_open()
        if pos < 0 or n < 0:
            raise ValueError("position and count must not be negative")
        self._fp.seek(pos * RECORD_SIZE)
        data = self._fp.read(n * RECORD_SIZE)
        records = [
            FirstBreakRecord.unpack(data[start:start + RECORD_SIZE])
            for start in range(0, len(data) - RECORD_SIZE + 1, RECORD_SIZE)
        ]
        records.extend(FirstBreakRecord() for _ in range(n - len(records)))
        return records

    def put(self, records: Iterable[FirstBreakRecord], pos: int = 0) -> int:
        """Write records starting at record ``pos``; return how many were written."""
        self._check_open()
        if pos < 0:
            raise ValueError("position must not be negative")
        items = list(records)
        self._fp.seek(pos * RECORD_SIZE)
        self._fp.write(b"".join(record.pack() for record in items))
        self._fp.flush()
        return len(items)


def save_text(path, records: Iterable[FirstBreakRecord]) -> None:
    """Write records as ``index,file_number,first_break`` lines."""
    with open(path, "w") as fp:
        for index, record in enumerate(records):
            fp.write(f"{index},{record.file_number},{int(record.first_break)}\n")