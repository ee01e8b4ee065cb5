"""Static-correction files of a swath: names, readers and writers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class StaticsFileError(ValueError):
    """A static-correction file is shorter than expected or malformed."""


@dataclass
class StaticPoint:
    """A station name (``ph``), its coordinates and its static value."""

    ph: int = 0
    east: float = 0.0
    north: float = 0.0
    value: float = 0.0


def swath_name(swath: int) -> str:
    """Three-digit name used in every file name of a swath."""
    if swath < 0:
        raise ValueError("swath number must not be negative")
    return f"{swath:03d}"


@dataclass(frozen=True)
class SwathFileNames:
    """The names of all files that belong to one swath."""

    swath: int
    name: str
    first_break: str
    rs: str
    b: str
    num_in_col_of_rs: str
    rs_turned: str
    input_shot: str
    input_receiver: str
    mid_shot: str
    mid_receiver: str
    output_shot: str
    output_receiver: str
    equation_number: str

    @classmethod
    def for_swath(cls, swath: int) -> "SwathFileNames":
        name = swath_name(swath)
        return cls(
            swath=swath,
            name=name,
            first_break=f"swath{name}.FBD",
            rs=f"RS{name}.DAT",
            b=f"b{name}.DAT",
            num_in_col_of_rs=f"NCRS{name}.DAT",
            rs_turned=f"RST{name}.DAT",
            input_shot=f"swath{name}.ST",
            input_receiver=f"swath{name}.RT",
            mid_shot=f"SMID{name}.DAT",
            mid_receiver=f"RMID{name}.DAT",
            output_shot=f"SOUT{name}.DAT",
            output_receiver=f"ROUT{name}.DAT",
            equation_number=f"EN{name}.TXT",
        )


def _tokens(path) -> list[str]:
    return Path(path).read_text().split()


def _points_from_tokens(tokens: list[str], path) -> list[StaticPoint]:
    points = []
    for start in range(0, len(tokens), 4):
        fields = tokens[start:start + 4]
        if len(fields) < 4:
            raise StaticsFileError(f"static file {path} is shorter than expected")
        try:
            points.append(StaticPoint(int(fields[0]), float(fields[1]),
                                      float(fields[2]), float(fields[3])))
        except ValueError as exc:
            raise StaticsFileError(f"bad static point in {path}") from exc
    return points


def read_input_statics(path) -> list[StaticPoint]:
    """Read every point of a file of statics found by another method."""
    return _points_from_tokens(_tokens(path), path)


def write_input_statics(path, points) -> None:
    with open(path, "w") as fp:
        for p in points:
            fp.write(f"{p.ph}  {p.east:.6f}  {p.north:.6f}  {p.value:.6f}\n")


def read_mid_statics(path, count: int) -> list[tuple[int, float]]:
    """Read ``count`` (station, static) pairs of an uncontrolled result file."""
    tokens = _tokens(path)
    if len(tokens) < 2 * count:
        raise StaticsFileError(f"static file {path} is shorter than expected")
    pairs = []
    for start in range(0, 2 * count, 2):
        try:
            pairs.append((int(tokens[start]), float(tokens[start + 1])))
        except ValueError as exc:
            raise StaticsFileError(f"bad static value in {path}") from exc
    return pairs


def read_output_statics(path, count: int) -> list[StaticPoint]:
    """Read ``count`` points of a controlled result file."""
    tokens = _tokens(path)
    if len(tokens) < 4 * count:
        raise StaticsFileError(f"static file {path} is shorter than expected")
    return _points_from_tokens(tokens[:4 * count], path)


def write_output_statics(path, points) -> None:
    with open(path, "w") as fp:
        for p in points:
            fp.write(f"{p.ph}  {p.east:9.1f}  {p.north:10.1f}  {p.value:5.2f}\n")