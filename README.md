# sensorhub

Sensor processing tasks for a mobile robot, connected through a small
in-process publish/subscribe bus and switched on and off by a task service.
It has no dependencies outside the standard library.

## Tasks

| Task | Listens on | Publishes on | What it does |
|------|------------|--------------|--------------|
| `NearestObjectDetect` | `scan` | `nearest_object` | Finds the closest finite range in a laser scan and reports its distance and angle (`angle_min + index * angle_increment`). The frame id is cleared. Scans with no finite range publish nothing. |
| `CollisionAlert` | `nearest_object` | `collision_alert_event` | Raises an event when the nearest object is within `distance_threshold` metres (default `0.1`, must be `> 0`), at most once per `event_interval` seconds (default `1.0`). |
| `ImuFusion` | `imu` | `imu/data` | Complementary filter: roll and pitch blend integrated gyro rates (weight `gyro_factor`, default `0.95`, must lie in `[0, 1]`) with the tilt seen by the accelerometer; yaw is integrated gyro only. Angles are wrapped into `[-pi, pi]`. The first message only sets the start time and publishes nothing. The output carries frame id `imu_link`, the orientation quaternion and a diagonal orientation covariance of `0.01`. |
| `RolloverDetect` | `imu/data` | `rollover_event` | Raises an event when roll or pitch reaches its threshold in degrees (`roll_threshold`, `pitch_threshold`, each default `60`, each in `[0, 90]`), at most once per `event_interval` seconds (default `1.0`). The event has frame id `rollover_detect` and angles in degrees. |

Invalid parameters raise `sensorhub.bus.ParameterError` (a `ValueError`)
when a task is created.

Event intervals are measured on the message header stamps, starting from
a stamp of zero.

Each task's handler (`on_scan`, `on_nearest_object`, `on_imu`) can also be
called directly; it returns the message it published, or `None`.

## Messages

`sensorhub.messages` holds plain data classes for the messages carried on
the bus: `Time`, `Header`, `Vector3`, `Quaternion`, `LaserScan`, `Imu`,
`NearestObject`, `CollisionAlertEvent` and `RolloverEvent`. A `Time`
converts itself with `to_seconds()` and `to_nanoseconds()`.

## Angle helpers

`sensorhub.transforms` provides:

* `normalize_angle(angle)` – wraps radians into `[-pi, pi]`
* `quaternion_from_rpy(roll, pitch, yaw)` – returns a `Quaternion`
* `rpy_from_quaternion(x, y, z, w)` – returns `(roll, pitch, yaw)`;
  raises `ValueError` for a zero-length quaternion

## Using the bus

`Bus.publish(topic, message)` calls every subscriber of the topic in the
calling thread and returns how many there were. `Bus.unsubscribe` raises
`ValueError` for a callback that is not subscribed.

```python
from sensorhub.bus import Bus
from sensorhub.nearest_object_detect import NearestObjectDetect
from sensorhub.collision_alert import CollisionAlert

bus = Bus()
detector = NearestObjectDetect(bus)
alert = CollisionAlert(bus, distance_threshold=0.3, event_interval=1.0)

bus.subscribe("collision_alert_event", lambda event: print("too close:", event))

# ... publish LaserScan messages on "scan" with bus.publish("scan", scan)

alert.close()
detector.close()
```

Each task subscribes on creation and unsubscribes when `close()` is called;
tasks are also context managers. `find_nearest(scan)` in
`sensorhub.nearest_object_detect` gives the nearest object of a single scan
without a bus.

## Task service

`sensorhub.sensor_service.SensorService(bus, factories=None)` starts and
stops tasks on request. Requests are `TaskId` values; each unregister code
is its register code plus one:

| Register | Unregister |
|----------|------------|
| `REGISTER_NEAREST_OBJECT_DETECTION` (1) | `UNREGISTER_NEAREST_OBJECT_DETECTION` (2) |
| `REGISTER_IMU_FUSION` (3) | `UNREGISTER_IMU_FUSION` (4) |
| `REGISTER_LOCALIZATION_FUSION` (5) | `UNREGISTER_LOCALIZATION_FUSION` (6) |
| `REGISTER_ROLLOVER_DETECTION` (7) | `UNREGISTER_ROLLOVER_DETECTION` (8) |
| `REGISTER_COLLISION_ALERT` (9) | `UNREGISTER_COLLISION_ALERT` (10) |

`handle_request(task_id)` dispatches to `start_task` or `stop_task`; each
returns a `TaskResponse` with `success` and `err_info`. Requests fail when:

* the id is not a known code;
* a dependency is not running (collision alert needs nearest object
  detection; rollover detection and localization fusion need IMU fusion);
* no factory is registered for the task;
* creating the task raises `ParameterError` or `RuntimeError` (the message
  becomes `err_info`);
* a task to be stopped has a running task that depends on it.

Starting a task that is already running, or stopping one that is not,
succeeds without doing anything. `running_tasks()` lists the active
register codes in ascending order, and `close()` stops everything,
highest code first. The service is a context manager.

`factories` maps register codes to callables that take the bus and return
an object with a `close()` method. By default the four tasks above are
created with their default parameters.

## What it does not do

* There is no localization fusion task: `REGISTER_LOCALIZATION_FUSION`
  fails with an unknown task id unless you supply a factory for it.
* The bus is in-process only; there is no network transport, and nothing
  exposes the task service to other processes.
* There is no command-line program; the package is used as a library.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.