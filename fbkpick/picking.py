"""Per-shot bookkeeping for first-break picking: trace scaling, group lines and shot lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

DEFAULT_GROUP_LINE_LIMIT = 100
DEFAULT_HEAD_COUNT = 128

# Traces are scaled so that their largest amplitude becomes this value.
_TRACE_AMPLITUDE = 50 / 1.5


@dataclass
class GroupLine:
    """A run of traces in one shot whose group names increase one by one."""

    sequence: int = 0
    start_group: int = 0
    end_group: int = 0
    start_name: int = 0
    end_name: int = 0

    @property
    def group_count(self) -> int:
        return self.end_group - self.start_group + 1


@dataclass
class ShotEntry:
    """A shot's file number and the first and last trace it covers."""

    file_number: int
    begin_group: int
    end_group: int

    @property
    def group_count(self) -> int:
        return self.end_group - self.begin_group + 1


def normalize_traces(traces: Sequence[Sequence[float]],
                     coefficient: float = 0) -> list[list[float]]:
    """Scale traces for display.

    With a zero coefficient every trace is scaled so that its largest
    absolute sample equals a fixed amplitude; all-zero traces are left as
    they are. Otherwise every sample is multiplied by ``coefficient``.
    """
    result: list[list[float]] = []
    for trace in traces:
        samples = [float(v) for v in trace]
        if coefficient == 0:
            peak = max((abs(v) for v in samples), default=0.0)
            if peak != 0:
                divisor = peak / _TRACE_AMPLITUDE
                samples = [v / divisor for v in samples]
        else:
            samples = [v * coefficient for v in samples]
        result.append(samples)
    return result


def split_group_lines(names: Sequence[int],
                      limit: int = DEFAULT_GROUP_LINE_LIMIT) -> list[GroupLine]:
    """Split a shot's traces into lines wherever the group name is not the last plus one.

    At most ``limit`` lines are made; once the limit is reached the last line
    runs to the end of the shot.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    if not names:
        return []
    lines = [GroupLine(0, 0, 0, names[0], names[0])]
    previous = names[0]
    for group, name in enumerate(names[1:], start=1):
        if name != previous + 1:
            if len(lines) >= limit:
                break
            lines[-1].end_group = group - 1
            lines[-1].end_name = previous
            lines.append(GroupLine(len(lines), group, group, name, name))
        previous = name
    lines[-1].end_group = len(names) - 1
    lines[-1].end_name = names[-1]
    return lines


def find_shot(shots: Sequence[ShotEntry], file_number: int) -> int:
    """Position of the first shot with ``file_number``; KeyError if there is none."""
    for order, shot in enumerate(shots):
        if shot.file_number == file_number:
            return order
    raise KeyError(f"file number {file_number} not found")


def resolve_shot_range(shots: Sequence[ShotEntry], begin_file: int,
                       end_file: int) -> tuple[int, int]:
    """Turn a range of file numbers into a range of shot positions.

    The file numbers are first clamped to those of the first and last shot;
    a begin that matches no shot becomes the first shot and an end that
    matches none becomes the last.
    """
    if not shots:
        raise ValueError("there are no shots")
    first_file = shots[0].file_number
    last_file = shots[-1].file_number
    begin_file = max(begin_file, first_file)
    end_file = min(end_file, last_file)
    try:
        begin = find_shot(shots, begin_file)
    except KeyError:
        begin = 0
    try:
        end = find_shot(shots, end_file)
    except KeyError:
        end = len(shots) - 1
    return begin, end


def clamp_header(group: int, head: int, group_count: int,
                 head_count: int = DEFAULT_HEAD_COUNT) -> tuple[int, int]:
    """Clamp a trace position and a one-based header word number into range."""
    if group_count < 1:
        raise ValueError("there are no traces")
    if head_count < 1:
        raise ValueError("there are no header words")
    group = min(max(group, 0), group_count - 1)
    head = min(max(head, 1), head_count)
    return group, head