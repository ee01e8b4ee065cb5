"""Synthetic first-break picks computed from a survey geometry and known statics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .statics import StaticsFileError

DEFAULT_VELOCITY = 1500.0
DEFAULT_SHOT_LINES = 10
DEFAULT_RECEIVE_POINTS = 31

SHOT_LINE_BASE = 501
RECEIVE_LINE_BASE = 101
STATION_FACTOR = 1000

RECEIVER_POSITIONS_FILE = "RcvPos.txt"
SHOT_POSITIONS_FILE = "ShotPos.txt"
PICKS_FILE = "swath000.fbd"
TABLE_FILE = "swath000.txt"


@dataclass(frozen=True)
class SurveyGeometry:
    """Positions of receiver lines and shot points and the spacing of a swath."""

    receiver_line_positions: tuple[int, ...]
    shot_point_positions: tuple[int, ...]
    group_interval: int
    shot_line_interval: int
    distance2: int = 0
    shot_lines: int = DEFAULT_SHOT_LINES
    receive_points: int = DEFAULT_RECEIVE_POINTS

    def __post_init__(self):
        object.__setattr__(self, "receiver_line_positions",
                           tuple(int(v) for v in self.receiver_line_positions))
        object.__setattr__(self, "shot_point_positions",
                           tuple(int(v) for v in self.shot_point_positions))
        if not self.receiver_line_positions:
            raise ValueError("at least one receiver line is needed")
        if not self.shot_point_positions:
            raise ValueError("at least one shot point is needed")
        if self.group_interval <= 0:
            raise ValueError("group interval must be positive")
        if self.shot_line_interval <= 0:
            raise ValueError("shot line interval must be positive")
        if self.shot_lines < 1 or self.receive_points < 1:
            raise ValueError("shot lines and receive points must be at least 1")

    @property
    def receive_line_count(self) -> int:
        return len(self.receiver_line_positions)

    @property
    def shot_point_count(self) -> int:
        return len(self.shot_point_positions)

    @property
    def groups_per_shot_line(self) -> int:
        """Receiver stations between two shot lines."""
        return self.shot_line_interval // self.group_interval

    @property
    def shot_statics_needed(self) -> int:
        return self.shot_lines * self.shot_point_count

    @property
    def receiver_statics_needed(self) -> int:
        span = (self.shot_lines - 1) * self.groups_per_shot_line + self.receive_points
        return span * self.receive_line_count


@dataclass
class SyntheticPick:
    """One computed first break with the stations it belongs to."""

    shot_line: int
    shot_point: int
    receive_line: int
    file_number: int
    shot_ph: int
    receiver_ph: int
    first_break: float


def read_statics_values(path, count: int) -> list[float]:
    """Read the static values (fourth column) of the first ``count`` points."""
    if count < 0:
        raise ValueError("count must not be negative")
    tokens = Path(path).read_text().split()
    if len(tokens) < 4 * count:
        raise StaticsFileError(f"file {path} is shorter than expected")
    values = []
    for start in range(0, 4 * count, 4):
        fields = tokens[start:start + 4]
        try:
            int(fields[0])
            float(fields[1])
            float(fields[2])
            values.append(float(fields[3]))
        except ValueError as exc:
            raise StaticsFileError(f"bad static point in {path}") from exc
    return values


def synthesize_first_breaks(geometry: SurveyGeometry, shot_statics: Sequence[float],
                            receiver_statics: Sequence[float],
                            velocity: float = DEFAULT_VELOCITY) -> list[SyntheticPick]:
    """Straight-ray first breaks in ms, shifted by the negated shot and receiver statics."""
    if velocity <= 0:
        raise ValueError("velocity must be positive")
    if len(shot_statics) < geometry.shot_statics_needed:
        raise ValueError(
            f"{geometry.shot_statics_needed} shot statics needed, got {len(shot_statics)}"
        )
    if len(receiver_statics) < geometry.receiver_statics_needed:
        raise ValueError(
            f"{geometry.receiver_statics_needed} receiver statics needed, "
            f"got {len(receiver_statics)}"
        )

    lines = geometry.receive_line_count
    points = geometry.shot_point_count
    picks: list[SyntheticPick] = []
    for shot_line in range(geometry.shot_lines):
        receivers_passed = shot_line * geometry.groups_per_shot_line * lines
        station_shift = shot_line * geometry.shot_line_interval // geometry.group_interval
        for shot_point, shot_position in enumerate(geometry.shot_point_positions):
            shot_index = shot_line * points + shot_point
            shot_static = shot_statics[shot_index]
            shot_ph = (SHOT_LINE_BASE + shot_line) * STATION_FACTOR + shot_point + 1
            for receive_line, line_position in enumerate(geometry.receiver_line_positions):
                x = line_position - shot_position
                for station in range(geometry.receive_points):
                    receiver_static = receiver_statics[
                        receivers_passed + station * lines + receive_line
                    ]
                    y = geometry.distance2 + geometry.group_interval * station
                    distance = math.hypot(x, y)
                    first_break = distance / velocity * 1000 - shot_static - receiver_static
                    picks.append(SyntheticPick(
                        shot_line=shot_line,
                        shot_point=shot_point,
                        receive_line=receive_line,
                        file_number=shot_index + 1,
                        shot_ph=shot_ph,
                        receiver_ph=(RECEIVE_LINE_BASE + receive_line) * STATION_FACTOR
                        + station + 1 + station_shift,
                        first_break=first_break,
                    ))
    return picks


def write_synthetic_files(directory, geometry: SurveyGeometry,
                          picks: Sequence[SyntheticPick]) -> list[Path]:
    """Write station positions, the pick list and the pick table; return their paths."""
    directory = Path(directory)
    receivers_path = directory / RECEIVER_POSITIONS_FILE
    shots_path = directory / SHOT_POSITIONS_FILE
    picks_path = directory / PICKS_FILE
    table_path = directory / TABLE_FILE

    stations = geometry.receive_points + 2 * geometry.shot_lines
    with open(receivers_path, "w") as fp:
        for line, position in enumerate(geometry.receiver_line_positions):
            for station in range(stations):
                ph = (RECEIVE_LINE_BASE + line) * STATION_FACTOR + station + 1
                fp.write(f"{ph} {position} {station * geometry.group_interval}\n")

    with open(shots_path, "w") as fp:
        for shot_line in range(geometry.shot_lines):
            y = -geometry.distance2 + shot_line * geometry.shot_line_interval
            for point, position in enumerate(geometry.shot_point_positions):
                ph = (SHOT_LINE_BASE + shot_line) * STATION_FACTOR + point + 1
                fp.write(f"{ph} {position} {y}\n")

    with open(picks_path, "w") as fp:
        for pick in picks:
            fp.write(f"{pick.shot_ph} {pick.receiver_ph} {pick.first_break:5.1f}\n")

    with open(table_path, "w") as fp:
        for pick in picks:
            fp.write(f"{pick.shot_line},{pick.shot_point},{pick.receive_line},"
                     f"{pick.first_break:10.4f}\n")

    return [receivers_path, shots_path, picks_path, table_path]