from datetime import timedelta

import pytest

from helpers import T0, make_points
from merge_gpx.retime import one_second_times, retime


@pytest.mark.parametrize("count", [1, 2, 7, 300])
def test_one_second_cadence_ending_before_arrival(count):
    times = one_second_times(count, T0)
    assert len(times) == count
    assert times[-1] == T0 - timedelta(seconds=1)
    assert times[0] == T0 - timedelta(seconds=count)
    for earlier, later in zip(times, times[1:]):
        assert later - earlier == timedelta(seconds=1)


def test_zero_points():
    assert one_second_times(0, T0) == []
    assert retime([], T0) == []


def test_retime_discards_existing_times():
    points = make_points([(40.0, -105.0), (40.0001, -105.0), (40.0002, -105.0)], start=T0 + timedelta(days=3))
    result = retime(points, T0)
    assert result is points
    assert [p.time for p in points] == [T0 - timedelta(seconds=s) for s in (3, 2, 1)]


def test_retime_keeps_position_and_elevation():
    points = make_points([(40.0, -105.0), (40.0001, -105.0)])
    retime(points, T0)
    assert [(p.latitude, p.longitude, p.elevation) for p in points] == [
        (40.0, -105.0, 1600.0),
        (40.0001, -105.0, 1601.0),
    ]
