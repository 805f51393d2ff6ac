"""Robot sensor tasks (nearest object, collision alert, IMU fusion, rollover
detection) on an in-process publish/subscribe bus, managed by a task service."""

__version__ = "1.0.0"