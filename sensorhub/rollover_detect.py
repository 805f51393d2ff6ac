"""Detects rollover from fused IMU orientation."""

from __future__ import annotations

import dataclasses
import logging
import math

from sensorhub.bus import Bus, ParameterError
from sensorhub.messages import Imu, RolloverEvent
from sensorhub.transforms import rpy_from_quaternion

logger = logging.getLogger(__name__)

IMU_DATA_TOPIC = "imu/data"
ROLLOVER_TOPIC = "rollover_event"
ROLLOVER_FRAME_ID = "rollover_detect"


class RolloverDetect:
    """Publishes an event when roll or pitch reaches its threshold in degrees.

    At most one event is published per ``event_interval`` seconds.
    """

    def __init__(
        self,
        bus: Bus,
        roll_threshold: float = 60.0,
        pitch_threshold: float = 60.0,
        event_interval: float = 1.0,
    ) -> None:
        logger.info("rollover_detect start..")
        if roll_threshold < 0 or roll_threshold > 90:
            raise ParameterError("roll_threshold need in range [0, 90.0]")
        if pitch_threshold < 0 or pitch_threshold > 90:
            raise ParameterError("pitch_threshold need in range [0, 90.0]")
        self.roll_threshold = roll_threshold
        self.pitch_threshold = pitch_threshold
        self.event_interval = event_interval
        self._last_event_ns = 0.0
        self._bus = bus
        bus.subscribe(IMU_DATA_TOPIC, self.on_imu)

    def on_imu(self, msg: Imu) -> RolloverEvent | None:
        """Check one orientation; return the published event, if any."""
        ts = msg.header.stamp.to_nanoseconds()
        if ts - self._last_event_ns < 1e9 * self.event_interval:
            return None

        q = msg.orientation
        roll, pitch, yaw = rpy_from_quaternion(q.x, q.y, q.z, q.w)

        if (
            abs(roll) * 180 < self.roll_threshold * math.pi
            and abs(pitch) * 180 < self.pitch_threshold * math.pi
        ):
            return None

        event = RolloverEvent(
            header=dataclasses.replace(msg.header, frame_id=ROLLOVER_FRAME_ID),
            roll_angle=math.degrees(roll),
            pitch_angle=math.degrees(pitch),
            yaw_angle=math.degrees(yaw),
        )
        self._bus.publish(ROLLOVER_TOPIC, event)
        self._last_event_ns = ts
        return event

    def close(self) -> None:
        """Stop listening for orientation data."""
        self._bus.unsubscribe(IMU_DATA_TOPIC, self.on_imu)
        logger.info("rollover_detect stop..")

    def __enter__(self) -> RolloverDetect:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()