import pytest

from fbkpick.controlfile import (
    ControlFile,
    ControlFileError,
    ControlPoint,
    from_grid,
    to_grid,
)


def _sample():
    return ControlFile(
        shots=[ControlPoint(501001, 1000.5, 2000.5, 3.5), ControlPoint(501002, 1010.0, 2010.0, -1.5)],
        receivers=[ControlPoint(101001, 500.0, 600.0, 2.0)],
    )


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "a.ctl"
    original = _sample()
    original.write(path)
    loaded = ControlFile()
    loaded.read(path)
    assert loaded == original


def test_written_layout(tmp_path):
    path = tmp_path / "a.ctl"
    _sample().write(path)
    lines = path.read_text().splitlines()
    assert lines[0] == "Shot control Point"
    assert lines[1] == "2"
    assert lines[4] == "Recieve Control Point"
    assert lines[5] == "1"
    assert len(lines) == 7


def test_short_point_line_raises(tmp_path):
    path = tmp_path / "bad.ctl"
    path.write_text("Shot control Point\n1\n501001 1.0 2.0\n")
    with pytest.raises(ControlFileError):
        ControlFile().read(path)


def test_missing_point_lines_raise(tmp_path):
    path = tmp_path / "bad.ctl"
    path.write_text("Shot control Point\n3\n501001 1.0 2.0 3.0\n")
    with pytest.raises(ControlFileError):
        ControlFile().read(path)


def test_failed_read_keeps_previous_points(tmp_path):
    path = tmp_path / "bad.ctl"
    path.write_text("Shot control Point\n1\nx y z w\n")
    control = _sample()
    with pytest.raises(ControlFileError):
        control.read(path)
    assert control == _sample()


def test_missing_receiver_section_gives_no_receivers(tmp_path):
    path = tmp_path / "a.ctl"
    path.write_text("Shot control Point\n1\n501001 1.0 2.0 3.0\n")
    control = ControlFile()
    control.read(path)
    assert control.shots == [ControlPoint(501001, 1.0, 2.0, 3.0)]
    assert control.receivers == []


def test_set_counts_give_zeroed_points():
    control = ControlFile()
    control.set_shot_count(3)
    control.set_receiver_count(2)
    assert control.shots == [ControlPoint()] * 3
    assert control.receivers == [ControlPoint()] * 2


def test_set_point_in_and_out_of_range():
    control = ControlFile()
    control.set_shot_count(2)
    control.set_receiver_count(1)
    point = ControlPoint(7, 1.0, 2.0, 3.0)
    control.set_shot(1, point)
    control.set_receiver(0, point)
    assert control.shots[1] == point
    assert control.receivers[0] == point
    with pytest.raises(IndexError):
        control.set_shot(2, point)
    with pytest.raises(IndexError):
        control.set_receiver(-1, point)


def test_reset_clears_points():
    control = _sample()
    control.reset()
    assert control.shots == [] and control.receivers == []


def test_to_grid_header_and_minimum_rows():
    grid = to_grid(_sample())
    assert grid[0] == ["No.", "Shot Ctl", "Rcv Ctl"]
    assert len(grid) == 10
    assert [row[0] for row in grid[1:]] == list(range(1, 10))
    assert grid[1][1:] == [501001, 101001]
    assert grid[2][1:] == [501002, None]


def test_grid_round_trip_of_station_names():
    control = _sample()
    rebuilt = from_grid(to_grid(control))
    assert [p.ph for p in rebuilt.shots] == [p.ph for p in control.shots]
    assert [p.ph for p in rebuilt.receivers] == [p.ph for p in control.receivers]


def test_from_grid_counts_to_last_filled_row_but_stops_at_gap():
    rows = [["No.", "Shot Ctl", "Rcv Ctl"], [1, 5, None], [2, None, None], [3, 7, ""]]
    control = from_grid(rows)
    assert [p.ph for p in control.shots] == [5, 0, 0]
    assert control.receivers == []