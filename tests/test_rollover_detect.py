import math

import pytest

from sensorhub.bus import Bus, ParameterError
from sensorhub.messages import Header, Imu, Time
from sensorhub.rollover_detect import RolloverDetect
from sensorhub.transforms import quaternion_from_rpy


def _imu(sec, roll_deg=0.0, pitch_deg=0.0, yaw_deg=0.0, nanosec=0):
    return Imu(
        header=Header(stamp=Time(sec, nanosec), frame_id="imu_link"),
        orientation=quaternion_from_rpy(
            math.radians(roll_deg), math.radians(pitch_deg), math.radians(yaw_deg)
        ),
    )


@pytest.mark.parametrize(
    "kwargs, name",
    [
        ({"roll_threshold": -1}, "roll_threshold"),
        ({"roll_threshold": 91}, "roll_threshold"),
        ({"pitch_threshold": -1}, "pitch_threshold"),
        ({"pitch_threshold": 91}, "pitch_threshold"),
    ],
)
def test_threshold_range(kwargs, name):
    with pytest.raises(ParameterError, match=name):
        RolloverDetect(Bus(), **kwargs)


def test_level_orientation_no_event():
    node = RolloverDetect(Bus())
    assert node.on_imu(_imu(10, roll_deg=10, pitch_deg=-20)) is None


def test_large_roll_triggers_event():
    bus = Bus()
    events = []
    bus.subscribe("rollover_event", events.append)
    with RolloverDetect(bus):
        bus.publish("imu/data", _imu(10, roll_deg=70, yaw_deg=30))
    assert len(events) == 1
    event = events[0]
    assert event.header.frame_id == "rollover_detect"
    assert event.header.stamp == Time(10, 0)
    assert event.roll_angle == pytest.approx(70)
    assert event.pitch_angle == pytest.approx(0, abs=1e-9)
    assert event.yaw_angle == pytest.approx(30)


def test_large_pitch_triggers_event():
    node = RolloverDetect(Bus(), pitch_threshold=45)
    event = node.on_imu(_imu(10, pitch_deg=-50))
    assert event.pitch_angle == pytest.approx(-50)


def test_events_rate_limited():
    node = RolloverDetect(Bus(), event_interval=2.0)
    assert node.on_imu(_imu(10, roll_deg=80)).roll_angle == pytest.approx(80)
    assert node.on_imu(_imu(11, roll_deg=80)) is None
    assert node.on_imu(_imu(12, roll_deg=80)).header.stamp == Time(12, 0)


def test_stamps_before_first_interval_suppressed():
    node = RolloverDetect(Bus())
    assert node.on_imu(_imu(0, roll_deg=80, nanosec=500_000_000)) is None