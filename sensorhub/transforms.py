"""Angle and rotation helpers."""

from __future__ import annotations

import math

from sensorhub.messages import Quaternion


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into [-pi, pi]."""
    while angle > math.pi:
        angle -= 2.0 * math.pi
    while angle < -math.pi:
        angle += 2.0 * math.pi
    return angle


def quaternion_from_rpy(roll: float, pitch: float, yaw: float) -> Quaternion:
    """Build a quaternion from fixed-axis roll, pitch and yaw in radians."""
    cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
    cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
    cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
    return Quaternion(
        x=sr * cp * cy - cr * sp * sy,
        y=cr * sp * cy + sr * cp * sy,
        z=cr * cp * sy - sr * sp * cy,
        w=cr * cp * cy + sr * sp * sy,
    )


def _rotation_matrix(x: float, y: float, z: float, w: float) -> list[list[float]]:
    d = x * x + y * y + z * z + w * w
    if d == 0.0:
        raise ValueError("quaternion has zero length")
    s = 2.0 / d
    xs, ys, zs = x * s, y * s, z * s
    wx, wy, wz = w * xs, w * ys, w * zs
    xx, xy, xz = x * xs, x * ys, x * zs
    yy, yz, zz = y * ys, y * zs, z * zs
    return [
        [1.0 - (yy + zz), xy - wz, xz + wy],
        [xy + wz, 1.0 - (xx + zz), yz - wx],
        [xz - wy, yz + wx, 1.0 - (xx + yy)],
    ]


def rpy_from_quaternion(x: float, y: float, z: float, w: float) -> tuple[float, float, float]:
    """Return (roll, pitch, yaw) in radians of the rotation given by a quaternion."""
    m = _rotation_matrix(x, y, z, w)
    if abs(m[2][0]) >= 1.0:
        yaw = 0.0
        if m[2][0] < 0:
            pitch = math.pi / 2.0
            roll = math.atan2(m[0][1], m[0][2])
        else:
            pitch = -math.pi / 2.0
            roll = math.atan2(-m[0][1], -m[0][2])
        return roll, pitch, yaw

    pitch = -math.asin(m[2][0])
    cos_pitch = math.cos(pitch)
    roll = math.atan2(m[2][1] / cos_pitch, m[2][2] / cos_pitch)
    yaw = math.atan2(m[1][0] / cos_pitch, m[0][0] / cos_pitch)
    return roll, pitch, yaw