"""Parameter sets entered by the user, with the limits each one must respect."""

from __future__ import annotations

from dataclasses import dataclass, fields


class ParameterError(ValueError):
    """A parameter lies outside its allowed range."""

    def __init__(self, name: str, value, low, high):
        super().__init__(f"{name} must be between {low} and {high}, got {value}")
        self.name = name
        self.value = value
        self.low = low
        self.high = high


def _check(obj, limits: dict[str, tuple[int, int]]) -> None:
    for item in fields(obj):
        if item.name not in limits:
            continue
        low, high = limits[item.name]
        value = getattr(obj, item.name)
        if not low <= value <= high:
            raise ParameterError(item.name, value, low, high)


@dataclass
class GroupRange:
    """First and last file number of the shots to calculate."""

    begin: int = 0
    end: int = 0

    _LIMITS = {"begin": (1, 10_000_000), "end": (1, 100_000_000)}

    def validate(self) -> "GroupRange":
        _check(self, self._LIMITS)
        return self


@dataclass
class SwathParameters:
    """Layout parameters of one swath."""

    distance1: int = 0
    distance2: int = 0
    distance3: int = 0
    distance4: int = 0
    first_receive_point_number: int = 0
    fold_time: int = 0
    initial_velocity: int = 0
    shot_line_from: int = 0
    shot_line_to: int = 0

    _LIMITS = {
        "distance1": (0, 5000),
        "distance2": (0, 5000),
        "distance3": (0, 5000),
        "distance4": (0, 5000),
        "first_receive_point_number": (0, 999),
        "fold_time": (1, 3),
        "initial_velocity": (1000, 3000),
        "shot_line_from": (0, 999),
        "shot_line_to": (0, 999),
    }

    def validate(self) -> "SwathParameters":
        _check(self, self._LIMITS)
        return self


@dataclass
class PageNumber:
    """A page (shot file number) to jump to."""

    page_number: int = 0

    _LIMITS = {"page_number": (1, 100_000)}

    def validate(self) -> "PageNumber":
        _check(self, self._LIMITS)
        return self


@dataclass
class SurveySystem:
    """The recording geometry of a survey."""

    area: str = ""
    crew: str = ""
    gap_of_small_number: int = 0
    gap_of_big_number: int = 0
    group_interval: int = 0
    group_number_of_big_number: int = 0
    group_number_of_small_number: int = 0
    receive_line_number: int = 0
    shot_line_interval: int = 0
    shot_point_number: int = 0
    first_shot_point_position: int = 0

    _LIMITS = {
        "gap_of_small_number": (0, 5000),
        "gap_of_big_number": (0, 5000),
        "group_interval": (1, 500),
        "group_number_of_big_number": (0, 5000),
        "group_number_of_small_number": (0, 5000),
        "receive_line_number": (1, 51),
        "shot_line_interval": (1, 1000),
        "shot_point_number": (1, 51),
    }

    def validate(self) -> "SurveySystem":
        _check(self, self._LIMITS)
        return self


@dataclass
class SwathNumber:
    """The swath to work on."""

    swath_number: int = 0


@dataclass
class RelationParameters:
    """Settings of the correlation pick: model trace, time window and shots."""

    modal_group: int = 0
    shot_from: int = 0
    shot_to: int = 0
    time_range: int = 0
    total_shot_from: int = 0
    total_shot_to: int = 0


@dataclass
class StationDisplay:
    """Stations to show and the step between them."""

    start_station: int = 0
    end_station: int = 0
    step: int = 0


@dataclass
class ReceiverBlock:
    """A block of receiver lines and points to append."""

    receive_line_from: int = 0
    receive_line_to: int = 0
    receive_point_from: int = 0
    receive_point_to: int = 0


@dataclass
class CoordinateSource:
    """Where coordinates come from; choice 0 reads them from a P190 file."""

    choice: int = 0

    @property
    def reads_p190(self) -> bool:
        return self.choice == 0