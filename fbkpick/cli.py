"""Command line access to first-break files, control points and synthetic picks."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .controlfile import ControlFile
from .extract import DEFAULT_GROUP_BYTES, DEFAULT_GROUPS_PER_SHOT, extract_groups
from .records import RECORD_SIZE, FirstBreakFile, save_text
from .shotindex import ShotIndexedFile
from .synthetic import (
    DEFAULT_RECEIVE_POINTS,
    DEFAULT_SHOT_LINES,
    DEFAULT_VELOCITY,
    SurveyGeometry,
    read_statics_values,
    synthesize_first_breaks,
    write_synthetic_files,
)


def _int_list(text: str) -> list[int]:
    try:
        return [int(item) for item in text.split(",") if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a comma separated list of integers: {text}")


def _cmd_shots(args) -> int:
    with ShotIndexedFile(args.path) as index:
        print(f"shots: {index.shot_count}")
        for order, shot in enumerate(index.shots):
            print(f"{order} {shot.file_number} {shot.start_group} "
                  f"{shot.end_group} {shot.group_count}")
        if args.summary:
            index.describe(args.summary)
    return 0


def _cmd_dump(args) -> int:
    path = Path(args.path)
    if not path.is_file():
        raise FileNotFoundError(f"no such first-break file: {path}")
    with FirstBreakFile(path) as fbk:
        records = fbk.get(0, fbk.trace_count())
    save_text(args.output, records)
    print(f"traces: {len(records)}")
    return 0


def _cmd_extract(args) -> int:
    written = extract_groups(args.source, args.file_numbers, args.output,
                             args.group_bytes, args.groups_per_shot)
    print(f"groups: {written}")
    return 0


def _cmd_control(args) -> int:
    control = ControlFile()
    control.read(args.path)
    print(f"shots: {len(control.shots)}")
    print(f"receivers: {len(control.receivers)}")
    return 0


def _cmd_synth(args) -> int:
    geometry = SurveyGeometry(
        receiver_line_positions=args.receiver_lines,
        shot_point_positions=args.shot_points,
        group_interval=args.group_interval,
        shot_line_interval=args.shot_line_interval,
        distance2=args.distance2,
        shot_lines=args.shot_lines,
        receive_points=args.receive_points,
    )
    shots = read_statics_values(args.shot_statics, geometry.shot_statics_needed)
    receivers = read_statics_values(args.receiver_statics, geometry.receiver_statics_needed)
    picks = synthesize_first_breaks(geometry, shots, receivers, args.velocity)
    directory = Path(args.output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    for path in write_synthetic_files(directory, geometry, picks):
        print(path)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fbkpick", description="First-break picking and static-correction files.")
    parser.set_defaults(func=None)
    sub = parser.add_subparsers(dest="command")

    shots = sub.add_parser("shots", help="list the shots of a first-break file")
    shots.add_argument("path")
    shots.add_argument("--summary", help="also write a text summary to this file")
    shots.set_defaults(func=_cmd_shots)

    dump = sub.add_parser("dump", help="write a first-break file as text")
    dump.add_argument("path")
    dump.add_argument("output")
    dump.set_defaults(func=_cmd_dump)

    extract = sub.add_parser("extract", help="copy the first group of chosen shots")
    extract.add_argument("source")
    extract.add_argument("output")
    extract.add_argument("file_numbers", nargs="+", type=int)
    extract.add_argument("--group-bytes", type=int, default=DEFAULT_GROUP_BYTES)
    extract.add_argument("--groups-per-shot", type=int, default=DEFAULT_GROUPS_PER_SHOT)
    extract.set_defaults(func=_cmd_extract)

    control = sub.add_parser("control", help="summarise a control-point file")
    control.add_argument("path")
    control.set_defaults(func=_cmd_control)

    synth = sub.add_parser("synth", help="make synthetic first breaks")
    synth.add_argument("--shot-statics", required=True)
    synth.add_argument("--receiver-statics", required=True)
    synth.add_argument("--receiver-lines", type=_int_list, required=True)
    synth.add_argument("--shot-points", type=_int_list, required=True)
    synth.add_argument("--group-interval", type=int, required=True)
    synth.add_argument("--shot-line-interval", type=int, required=True)
    synth.add_argument("--distance2", type=int, default=0)
    synth.add_argument("--shot-lines", type=int, default=DEFAULT_SHOT_LINES)
    synth.add_argument("--receive-points", type=int, default=DEFAULT_RECEIVE_POINTS)
    synth.add_argument("--velocity", type=float, default=DEFAULT_VELOCITY)
    synth.add_argument("--output-dir", default=".")
    synth.set_defaults(func=_cmd_synth)
    return parser


def main(argv=None) -> int:
    """Run one command; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.func is None:
        parser.print_help()
        return 0
    try:
        return args.func(args)
    except (OSError, ValueError, KeyError) as exc:
        print(f"fbkpick: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())


__all__ = ["main", "RECORD_SIZE"]