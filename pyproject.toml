[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorhub"
version = "1.0.0"
description = "Robot sensor processing tasks (nearest object, collision alert, IMU fusion, rollover detection) managed by a task service over an in-process message bus"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "robotics",
    "sensors",
    "imu",
    "laser-scan",
    "sensor-fusion",
    "complementary-filter",
    "collision-detection",
    "rollover-detection",
    "publish-subscribe",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sensorhub"]

[tool.hatch.build.targets.sdist]
include = ["sensorhub", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
packages = ["sensorhub"]
