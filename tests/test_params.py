import pytest

from fbkpick.params import (
    CoordinateSource,
    GroupRange,
    PageNumber,
    ParameterError,
    ReceiverBlock,
    RelationParameters,
    StationDisplay,
    SurveySystem,
    SwathNumber,
    SwathParameters,
)


def _good_swath(**changes):
    values = dict(distance1=0, distance2=5000, distance3=10, distance4=20,
                  first_receive_point_number=999, fold_time=1,
                  initial_velocity=1000, shot_line_from=0, shot_line_to=999)
    values.update(changes)
    return SwathParameters(**values)


def _good_survey(**changes):
    values = dict(area="area", crew="crew", group_interval=1,
                  receive_line_number=51, shot_line_interval=1000,
                  shot_point_number=1)
    values.update(changes)
    return SurveySystem(**values)


def test_group_range_defaults_are_rejected():
    with pytest.raises(ParameterError) as info:
        GroupRange().validate()
    assert info.value.name == "begin"


def test_group_range_limits():
    r = GroupRange(1, 100_000_000)
    assert r.validate() is r
    with pytest.raises(ParameterError) as info:
        GroupRange(10_000_001, 5).validate()
    assert info.value.high == 10_000_000


def test_parameter_error_is_value_error():
    with pytest.raises(ValueError):
        PageNumber(0).validate()


def test_page_number_limits():
    assert PageNumber(100_000).validate().page_number == 100_000
    with pytest.raises(ParameterError) as info:
        PageNumber(100_001).validate()
    assert info.value.value == 100_001


def test_swath_parameters_accept_bounds():
    params = _good_swath()
    assert params.validate() is params


@pytest.mark.parametrize("name,value", [
    ("distance1", 5001),
    ("fold_time", 4),
    ("fold_time", 0),
    ("initial_velocity", 999),
    ("initial_velocity", 3001),
    ("shot_line_to", 1000),
    ("first_receive_point_number", 1000),
])
def test_swath_parameters_reject(name, value):
    with pytest.raises(ParameterError) as info:
        _good_swath(**{name: value}).validate()
    assert info.value.name == name


def test_swath_defaults_fail_on_fold_time():
    with pytest.raises(ParameterError) as info:
        SwathParameters().validate()
    assert info.value.name == "fold_time"


def test_survey_system_accepts_valid():
    survey = _good_survey(first_shot_point_position=-123456)
    assert survey.validate().first_shot_point_position == -123456


@pytest.mark.parametrize("name,value", [
    ("group_interval", 501),
    ("receive_line_number", 52),
    ("shot_point_number", 0),
    ("shot_line_interval", 0),
    ("gap_of_big_number", 5001),
    ("group_number_of_small_number", -1),
])
def test_survey_system_rejects(name, value):
    with pytest.raises(ParameterError) as info:
        _good_survey(**{name: value}).validate()
    assert info.value.name == name


def test_plain_parameter_sets_keep_values():
    assert SwathNumber(7).swath_number == 7
    rel = RelationParameters(modal_group=2, time_range=400)
    assert (rel.modal_group, rel.time_range, rel.shot_from) == (2, 400, 0)
    assert StationDisplay(1, 9, 2) == StationDisplay(start_station=1, end_station=9, step=2)
    block = ReceiverBlock(101, 104, 1, 31)
    assert (block.receive_line_to, block.receive_point_to) == (104, 31)


def test_coordinate_source():
    assert CoordinateSource().reads_p190 is True
    assert CoordinateSource(1).reads_p190 is False