"""Control-point files: shot and receiver stations with coordinates and a value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

SHOT_HEADER = "Shot control Point"
RECEIVER_HEADER = "Recieve Control Point"
GRID_HEADER = ["No.", "Shot Ctl", "Rcv Ctl"]
GRID_MIN_ROWS = 10


class ControlFileError(ValueError):
    """A control-point file does not follow the expected layout."""


@dataclass
class ControlPoint:
    """A station name (``ph``), its coordinates and a control value."""

    ph: int = 0
    north: float = 0.0
    east: float = 0.0
    value: float = 0.0


def _next_nonblank(lines: Iterator[str]) -> str | None:
    for line in lines:
        if line.strip():
            return line
    return None


def _parse_point(line: str | None, source) -> ControlPoint:
    if line is None:
        raise ControlFileError(f"control point file {source} is shorter than expected")
    fields = line.split()
    if len(fields) < 4:
        raise ControlFileError(f"control point file error: {source}")
    try:
        return ControlPoint(int(fields[0]), float(fields[1]), float(fields[2]), float(fields[3]))
    except ValueError as exc:
        raise ControlFileError(f"control point file error: {source}") from exc


def _parse_section(lines: Iterator[str], source) -> list[ControlPoint]:
    if _next_nonblank(lines) is None:
        return []
    count_line = _next_nonblank(lines)
    if count_line is None:
        return []
    try:
        count = int(count_line.strip())
    except ValueError as exc:
        raise ControlFileError(f"bad point count in {source}") from exc
    if count < 0:
        raise ControlFileError(f"negative point count in {source}")
    return [_parse_point(_next_nonblank(lines), source) for _ in range(count)]


def _format_point(point: ControlPoint) -> str:
    return f"{point.ph} {point.north:.1f} {point.east:.1f} {point.value:.1f}\n"


@dataclass
class ControlFile:
    """Shot and receiver control points of a survey."""

    shots: list[ControlPoint] = field(default_factory=list)
    receivers: list[ControlPoint] = field(default_factory=list)

    def reset(self) -> None:
        self.shots = []
        self.receivers = []

    def read(self, path) -> None:
        """Load both sections from ``path``; the object is unchanged on error."""
        with open(path) as fp:
            lines = iter(fp.read().splitlines())
        shots = _parse_section(lines, path)
        receivers = _parse_section(lines, path)
        self.shots = shots
        self.receivers = receivers

    def write(self, path) -> None:
        with open(path, "w") as fp:
            fp.write(f"{SHOT_HEADER}\n{len(self.shots)}\n")
            fp.writelines(_format_point(p) for p in self.shots)
            fp.write(f"{RECEIVER_HEADER}\n{len(self.receivers)}\n")
            fp.writelines(_format_point(p) for p in self.receivers)

    def set_shot_count(self, count: int) -> None:
        """Replace the shot points by ``count`` zeroed points."""
        if count < 0:
            raise ValueError("count must not be negative")
        self.shots = [ControlPoint() for _ in range(count)]

    def set_shot(self, pos: int, point: ControlPoint) -> None:
        if not 0 <= pos < len(self.shots):
            raise IndexError(f"shot control position {pos} out of range")
        self.shots[pos] = point

    def set_receiver_count(self, count: int) -> None:
        """Replace the receiver points by ``count`` zeroed points."""
        if count < 0:
            raise ValueError("count must not be negative")
        self.receivers = [ControlPoint() for _ in range(count)]

    def set_receiver(self, pos: int, point: ControlPoint) -> None:
        if not 0 <= pos < len(self.receivers):
            raise IndexError(f"receiver control position {pos} out of range")
        self.receivers[pos] = point


def to_grid(control: ControlFile) -> list[list]:
    """Lay the station names out as a table: header, then numbered rows."""
    row_count = max(len(control.shots) + 1, len(control.receivers) + 1, GRID_MIN_ROWS)
    grid: list[list] = [list(GRID_HEADER)]
    for row in range(1, row_count):
        shot = control.shots[row - 1].ph if row - 1 < len(control.shots) else None
        receiver = control.receivers[row - 1].ph if row - 1 < len(control.receivers) else None
        grid.append([row, shot, receiver])
    return grid


def _cell(row: Sequence, column: int) -> int:
    value = row[column] if column < len(row) else None
    if value is None or value == "":
        return 0
    return int(value)


def _column_points(rows: Sequence[Sequence], column: int) -> list[ControlPoint]:
    values = [_cell(row, column) for row in rows[1:]]
    count = max((i for i, v in enumerate(values, 1) if v != 0), default=0)
    points = [ControlPoint() for _ in range(count)]
    for point, value in zip(points, values):
        if value == 0:
            break
        point.ph = value
    return points


def from_grid(rows: Sequence[Sequence]) -> ControlFile:
    """Build a control file from a table whose first row is a header."""
    control = ControlFile()
    control.receivers = _column_points(rows, 2)
    control.shots = _column_points(rows, 1)
    return control