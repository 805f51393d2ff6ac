"""Starts and stops sensor components on request, honouring their dependencies."""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from sensorhub.bus import Bus, ParameterError
from sensorhub.collision_alert import CollisionAlert
from sensorhub.imu_fusion import ImuFusion
from sensorhub.nearest_object_detect import NearestObjectDetect
from sensorhub.rollover_detect import RolloverDetect

logger = logging.getLogger(__name__)


class TaskId(enum.IntEnum):
    """Request codes; each unregister code is its register code plus one."""

    REGISTER_NEAREST_OBJECT_DETECTION = 1
    UNREGISTER_NEAREST_OBJECT_DETECTION = 2
    REGISTER_IMU_FUSION = 3
    UNREGISTER_IMU_FUSION = 4
    REGISTER_LOCALIZATION_FUSION = 5
    UNREGISTER_LOCALIZATION_FUSION = 6
    REGISTER_ROLLOVER_DETECTION = 7
    UNREGISTER_ROLLOVER_DETECTION = 8
    REGISTER_COLLISION_ALERT = 9
    UNREGISTER_COLLISION_ALERT = 10


_REGISTER_IDS = frozenset(t for t in TaskId if t.name.startswith("REGISTER_"))
_UNREGISTER_IDS = frozenset(t for t in TaskId if t.name.startswith("UNREGISTER_"))

_DEPENDENCIES: Mapping[int, frozenset[int]] = {
    TaskId.REGISTER_COLLISION_ALERT: frozenset({TaskId.REGISTER_NEAREST_OBJECT_DETECTION}),
    TaskId.REGISTER_ROLLOVER_DETECTION: frozenset({TaskId.REGISTER_IMU_FUSION}),
    TaskId.REGISTER_LOCALIZATION_FUSION: frozenset({TaskId.REGISTER_IMU_FUSION}),
}


class Component(Protocol):
    def close(self) -> None: ...


ComponentFactory = Callable[[Bus], Any]

DEFAULT_FACTORIES: Mapping[int, ComponentFactory] = {
    TaskId.REGISTER_NEAREST_OBJECT_DETECTION: NearestObjectDetect,
    TaskId.REGISTER_IMU_FUSION: ImuFusion,
    TaskId.REGISTER_ROLLOVER_DETECTION: RolloverDetect,
    TaskId.REGISTER_COLLISION_ALERT: CollisionAlert,
}


@dataclass
class TaskResponse:
    """Outcome of a task request."""

    success: bool = False
    err_info: str = ""


class SensorService:
    """Manages the running sensor components attached to a bus."""

    def __init__(self, bus: Bus, factories: Mapping[int, ComponentFactory] | None = None) -> None:
        logger.info("sensor_service start..")
        self._bus = bus
        self._factories = dict(DEFAULT_FACTORIES if factories is None else factories)
        self._components: dict[int, Component] = {}
        self._lock = threading.Lock()

    def _dependencies_ready(self, task_id: int) -> bool:
        return all(dep in self._components for dep in _DEPENDENCIES.get(task_id, ()))

    def _could_stop(self, task_id: int) -> bool:
        return not any(
            task_id in _DEPENDENCIES.get(running, ()) for running in self._components
        )

    def start_task(self, task_id: int) -> TaskResponse:
        """Start the component for a register code."""
        with self._lock:
            if not self._dependencies_ready(task_id):
                ids = "".join(f"{int(dep)}," for dep in sorted(_DEPENDENCIES[task_id]))
                return TaskResponse(err_info=f"dependency tasks (id: {ids}) not enabled")

            if task_id in self._components:
                return TaskResponse(success=True)

            factory = self._factories.get(task_id)
            if factory is None:
                logger.error("task id: %s unknown", int(task_id))
                return TaskResponse(err_info="unknown task id")

            try:
                component = factory(self._bus)
            except (ParameterError, RuntimeError) as exc:
                logger.error("load task failed: %s", exc)
                return TaskResponse(err_info=str(exc))

            self._components[task_id] = component
            logger.info("load task success")
            return TaskResponse(success=True)

    def stop_task(self, task_id: int) -> TaskResponse:
        """Stop the component for an unregister code."""
        with self._lock:
            start_id = task_id - 1
            if start_id not in self._components:
                return TaskResponse(success=True)
            if not self._could_stop(start_id):
                return TaskResponse(err_info="can not stop, running tasks depend on it")
            self._components.pop(start_id).close()
            return TaskResponse(success=True)

    def handle_request(self, task_id: int) -> TaskResponse:
        """Dispatch a request code to start or stop a task."""
        if task_id in _REGISTER_IDS:
            return self.start_task(task_id)
        if task_id in _UNREGISTER_IDS:
            return self.stop_task(task_id)
        logger.error("task id is invalid: %s", task_id)
        return TaskResponse(success=False, err_info="unknow task_id")

    def running_tasks(self) -> tuple[TaskId, ...]:
        """Return the register codes of running tasks in ascending order."""
        with self._lock:
            return tuple(TaskId(t) for t in sorted(self._components))

    def close(self) -> None:
        """Stop every running component, dependents first."""
        with self._lock:
            for task_id in sorted(self._components, reverse=True):
                self._components.pop(task_id).close()
        logger.info("sensor_service stop..")

    def __enter__(self) -> SensorService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()