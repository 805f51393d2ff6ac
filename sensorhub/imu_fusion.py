"""Complementary filter fusing gyroscope and accelerometer readings."""

from __future__ import annotations

import dataclasses
import logging
import math
import struct

from sensorhub.bus import Bus, ParameterError
from sensorhub.messages import Imu
from sensorhub.transforms import normalize_angle, quaternion_from_rpy

logger = logging.getLogger(__name__)

IMU_RAW_TOPIC = "imu"
IMU_DATA_TOPIC = "imu/data"
IMU_FRAME_ID = "imu_link"
ORIENTATION_COVARIANCE = (0.01, 0.0, 0.0, 0.0, 0.01, 0.0, 0.0, 0.0, 0.01)


def _single_precision(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class ImuFusion:
    """Estimates orientation from raw IMU data and republishes it.

    Roll and pitch blend integrated gyro rates (weight ``gyro_factor``)
    with the tilt seen by the accelerometer; yaw is gyro only.
    """

    def __init__(self, bus: Bus, gyro_factor: float = 0.95) -> None:
        logger.info("imu_fusion start..")
        # The factor is held in single precision.
        gyro_factor = _single_precision(gyro_factor)
        if gyro_factor < 0 or gyro_factor > 1:
            raise ParameterError("gyro_factor need in range [0, 1.0]")
        self.gyro_factor = gyro_factor
        self.roll = 0.0
        self.pitch = 0.0
        self.yaw = 0.0
        self._last_ts = 0.0
        self._bus = bus
        bus.subscribe(IMU_RAW_TOPIC, self.on_imu)

    def on_imu(self, msg: Imu) -> Imu | None:
        """Fuse one raw reading; return the published message, or None for the first."""
        ts = msg.header.stamp.to_seconds()
        if self._last_ts == 0:
            self._last_ts = ts
            return None

        dt = ts - self._last_ts
        acc = msg.linear_acceleration
        gyro = msg.angular_velocity

        roll_acc = math.atan2(acc.y, acc.z)
        pitch_acc = math.atan2(-acc.x, math.sqrt(acc.y * acc.y + acc.z * acc.z))

        roll = self.roll + gyro.x * dt
        pitch = self.pitch + gyro.y * dt
        yaw = self.yaw + gyro.z * dt

        k = self.gyro_factor
        roll = k * roll + (1 - k) * roll_acc
        pitch = k * pitch + (1 - k) * pitch_acc

        self.roll = normalize_angle(roll)
        self.pitch = normalize_angle(pitch)
        self.yaw = normalize_angle(yaw)

        fused = Imu(
            header=dataclasses.replace(msg.header, frame_id=IMU_FRAME_ID),
            orientation=quaternion_from_rpy(self.roll, self.pitch, self.yaw),
            orientation_covariance=ORIENTATION_COVARIANCE,
            angular_velocity=msg.angular_velocity,
            angular_velocity_covariance=tuple(msg.angular_velocity_covariance),
            linear_acceleration=msg.linear_acceleration,
            linear_acceleration_covariance=tuple(msg.linear_acceleration_covariance),
        )
        self._bus.publish(IMU_DATA_TOPIC, fused)
        self._last_ts = ts
        return fused

    def close(self) -> None:
        """Stop listening for raw IMU data."""
        self._bus.unsubscribe(IMU_RAW_TOPIC, self.on_imu)
        logger.info("imu_fusion stop..")

    def __enter__(self) -> ImuFusion:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()