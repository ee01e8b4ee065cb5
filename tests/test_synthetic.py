import pytest

from fbkpick.statics import StaticsFileError
from fbkpick.synthetic import (
    SurveyGeometry,
    read_statics_values,
    synthesize_first_breaks,
    write_synthetic_files,
)


def small_geometry(**kwargs):
    values = dict(
        receiver_line_positions=[0, 200],
        shot_point_positions=[50, 150, 250],
        group_interval=50,
        shot_line_interval=100,
        distance2=25,
        shot_lines=2,
        receive_points=4,
    )
    values.update(kwargs)
    return SurveyGeometry(**values)


def zeros(geometry):
    return [0.0] * geometry.shot_statics_needed, [0.0] * geometry.receiver_statics_needed


def write_statics(path, values):
    path.write_text("".join(f"{i + 1} 1.0 2.0 {v}\n" for i, v in enumerate(values)))


def test_read_statics_values(tmp_path):
    path = tmp_path / "s.st"
    write_statics(path, [1.5, -2.0, 3.25])
    assert read_statics_values(path, 2) == [1.5, -2.0]
    assert read_statics_values(path, 3) == [1.5, -2.0, 3.25]


def test_read_statics_values_short_file(tmp_path):
    path = tmp_path / "s.st"
    write_statics(path, [1.0])
    with pytest.raises(StaticsFileError):
        read_statics_values(path, 2)


def test_read_statics_values_bad_token(tmp_path):
    path = tmp_path / "s.st"
    path.write_text("abc 1 2 3\n")
    with pytest.raises(StaticsFileError):
        read_statics_values(path, 1)


def test_geometry_validation():
    with pytest.raises(ValueError):
        small_geometry(group_interval=0)
    with pytest.raises(ValueError):
        small_geometry(receiver_line_positions=[])


def test_pick_count_and_order():
    geometry = small_geometry()
    shots, receivers = zeros(geometry)
    picks = synthesize_first_breaks(geometry, shots, receivers)
    assert len(picks) == 2 * 3 * 2 * 4
    numbers = [p.file_number for p in picks]
    assert numbers == sorted(numbers)
    assert set(numbers) == set(range(1, 7))


def test_station_names():
    geometry = small_geometry()
    shots, receivers = zeros(geometry)
    picks = synthesize_first_breaks(geometry, shots, receivers)
    assert picks[0].shot_ph == 501001
    assert picks[0].receiver_ph == 101001
    last = picks[-1]
    assert last.shot_ph == (501 + last.shot_line) * 1000 + last.shot_point + 1


def test_statics_shift_first_breaks():
    geometry = small_geometry()
    shots, receivers = zeros(geometry)
    base = synthesize_first_breaks(geometry, shots, receivers)
    shifted = synthesize_first_breaks(
        geometry, [2.0] * len(shots), [3.0] * len(receivers))
    for a, b in zip(base, shifted):
        assert b.first_break == pytest.approx(a.first_break - 5.0)


def test_velocity_scales_traveltime():
    geometry = small_geometry()
    shots, receivers = zeros(geometry)
    slow = synthesize_first_breaks(geometry, shots, receivers, 1500.0)
    fast = synthesize_first_breaks(geometry, shots, receivers, 3000.0)
    for a, b in zip(slow, fast):
        assert b.first_break == pytest.approx(a.first_break / 2)


def test_too_few_statics():
    geometry = small_geometry()
    shots, receivers = zeros(geometry)
    with pytest.raises(ValueError):
        synthesize_first_breaks(geometry, shots[:-1], receivers)
    with pytest.raises(ValueError):
        synthesize_first_breaks(geometry, shots, receivers[:-1])
    with pytest.raises(ValueError):
        synthesize_first_breaks(geometry, shots, receivers, 0)


def test_write_synthetic_files(tmp_path):
    geometry = small_geometry()
    shots, receivers = zeros(geometry)
    picks = synthesize_first_breaks(geometry, shots, receivers)
    paths = write_synthetic_files(tmp_path, geometry, picks)
    assert [p.name for p in paths] == ["RcvPos.txt", "ShotPos.txt", "swath000.fbd", "swath000.txt"]

    rcv = paths[0].read_text().splitlines()
    assert len(rcv) == 2 * (4 + 2 * 2)
    shot = paths[1].read_text().splitlines()
    assert len(shot) == 2 * 3
    assert shot[0].split() == ["501001", "50", "-25"]

    fbd = paths[2].read_text().splitlines()
    assert len(fbd) == len(picks)
    for line, pick in zip(fbd, picks):
        ph, rph, fb = line.split()
        assert int(ph) == pick.shot_ph
        assert int(rph) == pick.receiver_ph
        assert float(fb) == pytest.approx(pick.first_break, abs=0.05)

    table = paths[3].read_text().splitlines()
    assert len(table) == len(picks)
    assert table[0].split(",")[:3] == ["0", "0", "0"]