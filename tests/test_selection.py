import pytest

from fbkpick.selection import CheckSelection, CheckTarget, DrawMode


def _selection():
    return CheckSelection([101, 102, 103], [501, 502], 10, 14)


def test_initial_state():
    sel = _selection()
    assert sel.receiver_name == 0 and sel.shot_name == 0
    assert sel.check_target is None and sel.draw_mode is None


def test_choose_receiver():
    sel = _selection()
    assert sel.choose_receiver(2) == 103
    assert sel.choose_receiver(None) == 103
    with pytest.raises(IndexError):
        sel.choose_receiver(3)


def test_check_target_switches():
    sel = _selection()
    sel.check_receivers()
    assert sel.check_target is CheckTarget.RECEIVER
    sel.check_shots()
    assert sel.check_target is CheckTarget.SHOT


def test_draw_on_shot_line_uses_line_range():
    sel = _selection()
    assert sel.draw_on_shot_line() == 10
    assert sel.draw_mode is DrawMode.SHOT_LINE
    assert sel.shot_line_names == [10, 11, 12, 13, 14]
    assert sel.choose_shot(3) == 13
    with pytest.raises(IndexError):
        sel.choose_shot(5)


def test_draw_on_shot_point_uses_point_names():
    sel = _selection()
    assert sel.draw_on_shot_point() == 501
    assert sel.draw_mode is DrawMode.SHOT_POINT
    assert sel.choose_shot(1) == 502
    assert sel.choose_shot(None) == 502


def test_draw_on_shot_point_without_names():
    sel = CheckSelection([101], [], 1, 2)
    with pytest.raises(IndexError):
        sel.draw_on_shot_point()


def test_too_many_names_rejected():
    with pytest.raises(ValueError):
        CheckSelection(list(range(101)), [1], 0, 0)