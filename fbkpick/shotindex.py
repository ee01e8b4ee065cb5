"""Shot-by-shot access to a first-break file and an interactive browser over it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .records import RECORD_SIZE, FirstBreakRecord

DEFAULT_SHOT_LIMIT = 10000


@dataclass
class ShotInfo:
    """Where one shot's traces lie in the file, by trace position."""

    file_number: int
    start_group: int
    end_group: int

    @property
    def group_count(self) -> int:
        return self.end_group - self.start_group + 1


class ShotIndexedFile:
    """A first-break file split into shots: runs of traces sharing a file number."""

    def __init__(self, path, shot_limit: int = DEFAULT_SHOT_LIMIT):
        self.path = Path(path)
        self.shot_limit = shot_limit
        self._fp = open(self.path, "r+b")
        try:
            self._fp.seek(0, 2)
            self.file_length = self._fp.tell()
            if self.file_length % RECORD_SIZE:
                raise ValueError(
                    f"{self.path} is not a whole number of first-break records"
                )
            self.group_count = self.file_length // RECORD_SIZE
            self.shots: list[ShotInfo] = self._analyse()
        except Exception:
            self._fp.close()
            raise
        self._by_file_number = {}
        for order, shot in enumerate(self.shots):
            self._by_file_number.setdefault(shot.file_number, order)

    def __enter__(self) -> "ShotIndexedFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        self._fp.close()

    @property
    def closed(self) -> bool:
        return self._fp.closed

    def _analyse(self) -> list[ShotInfo]:
        self._fp.seek(0)
        data = self._fp.read(self.group_count * RECORD_SIZE)
        numbers = (
            FirstBreakRecord.unpack(data[start:start + RECORD_SIZE]).file_number
            for start in range(0, len(data), RECORD_SIZE)
        )
        shots: list[ShotInfo] = []
        for group, number in enumerate(numbers):
            if shots and shots[-1].file_number == number:
                shots[-1].end_group = group
                continue
            if len(shots) + 1 >= self.shot_limit:
                raise ValueError("too many shots in the first break file")
            shots.append(ShotInfo(number, group, group))
        return shots

    @property
    def shot_count(self) -> int:
        return len(self.shots)

    @property
    def max_group_count(self) -> int:
        return max((shot.group_count for shot in self.shots), default=0)

    @property
    def small_file_number(self) -> int | None:
        return self._file_number_bound(min)

    @property
    def big_file_number(self) -> int | None:
        return self._file_number_bound(max)

    def _file_number_bound(self, pick) -> int | None:
        if not self.shots:
            return None
        rest = [shot.file_number for shot in self.shots[1:] if shot.file_number != 0]
        return pick([self.shots[0].file_number, *rest])

    def order_of(self, file_number: int) -> int:
        """Position of the first shot with ``file_number``; KeyError if absent."""
        try:
            return self._by_file_number[file_number]
        except KeyError:
            raise KeyError(f"file number {file_number} not found") from None

    def file_number(self, group: int) -> int:
        """File number of trace ``group``, or -1 when out of range or closed."""
        if self._fp.closed or not 0 <= group < self.group_count:
            return -1
        self._fp.seek(group * RECORD_SIZE)
        return FirstBreakRecord.unpack(self._fp.read(RECORD_SIZE)).file_number

    def shot_records(self, file_number: int) -> list[FirstBreakRecord]:
        """Read all first-break records of the shot with ``file_number``."""
        if self._fp.closed:
            raise ValueError(f"first-break file {self.path} is closed")
        shot = self.shots[self.order_of(file_number)]
        self._fp.seek(shot.start_group * RECORD_SIZE)
        data = self._fp.read(shot.group_count * RECORD_SIZE)
        if len(data) != shot.group_count * RECORD_SIZE:
            raise OSError(f"short read of shot {file_number} in {self.path}")
        return [
            FirstBreakRecord.unpack(data[start:start + RECORD_SIZE])
            for start in range(0, len(data), RECORD_SIZE)
        ]

    def write_shot_records(self, records: Sequence[FirstBreakRecord]) -> None:
        """Write a shot's records back; the shot is found by the first record."""
        if self._fp.closed:
            raise ValueError(f"first-break file {self.path} is closed")
        if not records:
            raise ValueError("no records to write")
        shot = self.shots[self.order_of(records[0].file_number)]
        if len(records) != shot.group_count:
            raise ValueError(
                f"shot {shot.file_number} has {shot.group_count} traces, "
                f"got {len(records)} records"
            )
        self._fp.seek(shot.start_group * RECORD_SIZE)
        self._fp.write(b"".join(record.pack() for record in records))
        self._fp.flush()

    def describe(self, path) -> None:
        """Write a text summary of the shots found in the file."""
        with open(path, "w") as fp:
            fp.write(f"Shot Number: {self.shot_count}\n")
            for order, shot in enumerate(self.shots):
                fp.write(
                    f"No. {order} ,FileNumber: {shot.file_number},"
                    f"GN: {shot.group_count}, Start:{shot.start_group}, "
                    f"End: {shot.end_group} \n"
                )


class ShotBrowser:
    """Steps through shots and lets one trace's pick be dragged to a new time."""

    def __init__(self, index: ShotIndexedFile):
        self.index = index
        self.current_order = 0
        self.current_file_number = 0
        self.records: list[FirstBreakRecord] | None = None
        self.anchored = False
        self.anchored_group = 0
        self.anchor_offset = 0.0
        self.set_shot(0)

    def _write_back(self) -> None:
        if self.records:
            self.index.write_shot_records(self.records)

    def set_shot(self, order: int) -> bool:
        """Load the shot at position ``order``; False if there is none."""
        if not 0 <= order < self.index.shot_count:
            return False
        self.current_order = order
        self.current_file_number = self.index.shots[order].file_number
        self.records = self.index.shot_records(self.current_file_number)
        return True

    def find_file_number(self, file_number: int) -> int:
        """Save the current shot and load the one with ``file_number``."""
        self._write_back()
        order = self.index.order_of(file_number)
        self.set_shot(order)
        return self.current_order

    def next_shot(self) -> int:
        self._write_back()
        if self.current_order + 1 < self.index.shot_count:
            self.set_shot(self.current_order + 1)
        return self.current_order

    def previous_shot(self) -> int:
        self._write_back()
        if self.current_order > 0:
            self.set_shot(self.current_order - 1)
        return self.current_order

    def anchor(self, x: float, y: float) -> int | None:
        """Grab the trace nearest ``x`` at time ``y``; returns the trace grabbed."""
        if not self.records:
            return None
        group = min(max(int(x + 0.5), 0), len(self.records) - 1)
        self.anchored = True
        self.anchored_group = group
        self.anchor_offset = y - self.records[group].first_break
        return group

    def drag(self, y: float) -> float | None:
        """Move the grabbed pick with the pointer; returns its new time."""
        if not self.records or not self.anchored:
            return None
        record = self.records[self.anchored_group]
        record.first_break = y - self.anchor_offset
        return record.first_break

    def release(self) -> None:
        self.anchored = False

    def info(self) -> str:
        return (
            f"Shot Order {self.current_order}, "
            f"File Number: {self.current_file_number}"
        )