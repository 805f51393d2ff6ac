"""Finds the nearest object in laser scans."""

from __future__ import annotations

import dataclasses
import logging
import math

from sensorhub.bus import Bus
from sensorhub.messages import LaserScan, NearestObject

logger = logging.getLogger(__name__)

SCAN_TOPIC = "scan"
NEAREST_OBJECT_TOPIC = "nearest_object"


def find_nearest(scan: LaserScan) -> NearestObject | None:
    """Return the closest finite range of a scan, or None if there is none."""
    finite = ((i, r) for i, r in enumerate(scan.ranges) if math.isfinite(r))
    best = min(finite, key=lambda item: item[1], default=None)
    if best is None:
        return None
    index, distance = best
    return NearestObject(
        header=dataclasses.replace(scan.header, frame_id=""),
        distance=distance,
        angle=scan.angle_min + index * scan.angle_increment,
    )


class NearestObjectDetect:
    """Publishes the nearest object of every scan received."""

    def __init__(self, bus: Bus) -> None:
        logger.info("nearest_object_detect start..")
        self._bus = bus
        bus.subscribe(SCAN_TOPIC, self.on_scan)

    def on_scan(self, scan: LaserScan) -> NearestObject | None:
        """Handle one scan; return the published message, if any."""
        nearest = find_nearest(scan)
        if nearest is not None:
            self._bus.publish(NEAREST_OBJECT_TOPIC, nearest)
        return nearest

    def close(self) -> None:
        """Stop listening for scans."""
        self._bus.unsubscribe(SCAN_TOPIC, self.on_scan)
        logger.info("nearest_object_detect stop..")

    def __enter__(self) -> NearestObjectDetect:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()