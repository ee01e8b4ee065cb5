"""State of the static-correction check selection: which line to check and draw on."""

from __future__ import annotations

import enum
from typing import Sequence

MAX_NAMES = 100


class CheckTarget(enum.IntEnum):
    SHOT = 0
    RECEIVER = 1


class DrawMode(enum.IntEnum):
    SHOT_LINE = 0
    SHOT_POINT = 1


class CheckSelection:
    """Chooses a receiver line and a shot line or shot-point line by name."""

    def __init__(self, receiver_names: Sequence[int], shot_point_names: Sequence[int],
                 shot_line_from: int = 0, shot_line_to: int = 0):
        if len(receiver_names) > MAX_NAMES or len(shot_point_names) > MAX_NAMES:
            raise ValueError(f"at most {MAX_NAMES} line names are supported")
        self.receiver_names = list(receiver_names)
        self.shot_point_names = list(shot_point_names)
        self.shot_line_from = shot_line_from
        self.shot_line_to = shot_line_to
        self.receiver_name = 0
        self.shot_name = 0
        self.check_target: CheckTarget | None = None
        self.draw_mode: DrawMode | None = None

    @property
    def shot_line_names(self) -> list[int]:
        return list(range(self.shot_line_from, self.shot_line_to + 1))

    def choose_receiver(self, index: int | None) -> int:
        """Select a receiver line by list position; ``None`` keeps the current one."""
        if index is not None:
            self.receiver_name = self.receiver_names[index]
        return self.receiver_name

    def choose_shot(self, index: int | None) -> int:
        """Select a shot line or shot-point line, depending on the draw mode."""
        if index is not None:
            if self.draw_mode is DrawMode.SHOT_LINE:
                self.shot_name = self.shot_line_names[index]
            else:
                self.shot_name = self.shot_point_names[index]
        return self.shot_name

    def check_shots(self) -> None:
        self.check_target = CheckTarget.SHOT

    def check_receivers(self) -> None:
        self.check_target = CheckTarget.RECEIVER

    def draw_on_shot_point(self) -> int:
        self.draw_mode = DrawMode.SHOT_POINT
        if not self.shot_point_names:
            raise IndexError("no shot-point line names available")
        self.shot_name = self.shot_point_names[0]
        return self.shot_name

    def draw_on_shot_line(self) -> int:
        self.draw_mode = DrawMode.SHOT_LINE
        self.shot_name = self.shot_line_from
        return self.shot_name