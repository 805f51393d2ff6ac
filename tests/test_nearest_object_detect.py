import math

import pytest

from sensorhub.bus import Bus
from sensorhub.messages import Header, LaserScan, Time
from sensorhub.nearest_object_detect import NearestObjectDetect, find_nearest


def _scan(ranges, angle_min=-1.0, angle_increment=0.5):
    return LaserScan(
        header=Header(stamp=Time(3, 4), frame_id="laser"),
        angle_min=angle_min,
        angle_increment=angle_increment,
        ranges=list(ranges),
    )


def test_picks_smallest_finite_range():
    result = find_nearest(_scan([2.0, math.inf, 0.5, math.nan, 1.0]))
    assert result.distance == 0.5
    assert result.angle == pytest.approx(-1.0 + 2 * 0.5)


def test_first_index_wins_on_tie():
    result = find_nearest(_scan([3.0, 1.0, 1.0]))
    assert result.angle == pytest.approx(-1.0 + 0.5)


def test_no_finite_ranges_gives_none():
    assert find_nearest(_scan([math.inf, math.nan, -math.inf])) is None
    assert find_nearest(_scan([])) is None


def test_header_kept_but_frame_cleared():
    result = find_nearest(_scan([1.0]))
    assert result.header.stamp == Time(3, 4)
    assert result.header.frame_id == ""


def test_node_publishes_on_bus():
    bus = Bus()
    received = []
    bus.subscribe("nearest_object", received.append)
    with NearestObjectDetect(bus):
        bus.publish("scan", _scan([4.0, 2.0]))
        bus.publish("scan", _scan([math.inf]))
    assert [m.distance for m in received] == [2.0]


def test_close_stops_node():
    bus = Bus()
    received = []
    bus.subscribe("nearest_object", received.append)
    node = NearestObjectDetect(bus)
    node.close()
    assert bus.publish("scan", _scan([1.0])) == 0
    assert received == []