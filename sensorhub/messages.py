"""Message types exchanged between the sensor components."""

from __future__ import annotations

from dataclasses import dataclass, field

_NANOS_PER_SECOND = 1_000_000_000


def _zero_covariance() -> tuple[float, ...]:
    return (0.0,) * 9


@dataclass(frozen=True)
class Time:
    """A timestamp split into whole seconds and nanoseconds."""

    sec: int = 0
    nanosec: int = 0

    def to_nanoseconds(self) -> int:
        """Return the timestamp as a count of nanoseconds."""
        return self.sec * _NANOS_PER_SECOND + self.nanosec

    def to_seconds(self) -> float:
        """Return the timestamp as floating-point seconds."""
        return self.sec + self.nanosec / 1e9


@dataclass(frozen=True)
class Header:
    """Timestamp and coordinate frame of a message."""

    stamp: Time = field(default_factory=Time)
    frame_id: str = ""


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class LaserScan:
    """A planar laser scan; ``ranges[i]`` lies at ``angle_min + i * angle_increment``."""

    header: Header = field(default_factory=Header)
    angle_min: float = 0.0
    angle_max: float = 0.0
    angle_increment: float = 0.0
    time_increment: float = 0.0
    scan_time: float = 0.0
    range_min: float = 0.0
    range_max: float = 0.0
    ranges: list[float] = field(default_factory=list)
    intensities: list[float] = field(default_factory=list)


@dataclass
class Imu:
    """Inertial measurement: orientation, angular velocity and linear acceleration."""

    header: Header = field(default_factory=Header)
    orientation: Quaternion = field(default_factory=Quaternion)
    orientation_covariance: tuple[float, ...] = field(default_factory=_zero_covariance)
    angular_velocity: Vector3 = field(default_factory=Vector3)
    angular_velocity_covariance: tuple[float, ...] = field(default_factory=_zero_covariance)
    linear_acceleration: Vector3 = field(default_factory=Vector3)
    linear_acceleration_covariance: tuple[float, ...] = field(default_factory=_zero_covariance)


@dataclass
class NearestObject:
    """Distance and bearing of the closest object seen by a scan."""

    header: Header = field(default_factory=Header)
    distance: float = 0.0
    angle: float = 0.0


@dataclass
class CollisionAlertEvent:
    """Raised when an object comes closer than the alert threshold."""

    header: Header = field(default_factory=Header)
    distance: float = 0.0
    angle: float = 0.0


@dataclass
class RolloverEvent:
    """Raised when roll or pitch exceeds its threshold; angles in degrees."""

    header: Header = field(default_factory=Header)
    roll_angle: float = 0.0
    pitch_angle: float = 0.0
    yaw_angle: float = 0.0