"""Raises collision alerts when the nearest object comes too close."""

from __future__ import annotations

import logging

from sensorhub.bus import Bus, ParameterError
from sensorhub.messages import CollisionAlertEvent, NearestObject

logger = logging.getLogger(__name__)

NEAREST_OBJECT_TOPIC = "nearest_object"
COLLISION_ALERT_TOPIC = "collision_alert_event"


class CollisionAlert:
    """Publishes an alert when an object is within ``distance_threshold`` metres.

    At most one alert is published per ``event_interval`` seconds.
    """

    def __init__(
        self, bus: Bus, distance_threshold: float = 0.1, event_interval: float = 1.0
    ) -> None:
        logger.info("collision_alert start..")
        if distance_threshold <= 0:
            raise ParameterError("distance_threshold need > 0")
        self.distance_threshold = distance_threshold
        self.event_interval = event_interval
        self._last_event_ns = 0.0
        self._bus = bus
        bus.subscribe(NEAREST_OBJECT_TOPIC, self.on_nearest_object)

    def on_nearest_object(self, msg: NearestObject) -> CollisionAlertEvent | None:
        """Handle a nearest-object report; return the published alert, if any."""
        ts = msg.header.stamp.to_nanoseconds()
        if ts - self._last_event_ns < 1e9 * self.event_interval:
            return None
        if msg.distance > self.distance_threshold:
            return None
        event = CollisionAlertEvent(header=msg.header, distance=msg.distance, angle=msg.angle)
        self._bus.publish(COLLISION_ALERT_TOPIC, event)
        self._last_event_ns = ts
        return event

    def close(self) -> None:
        """Stop listening for nearest-object reports."""
        self._bus.unsubscribe(NEAREST_OBJECT_TOPIC, self.on_nearest_object)
        logger.info("collision_alert stop..")

    def __enter__(self) -> CollisionAlert:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()