import math

import pytest

from sensorhub.transforms import normalize_angle, quaternion_from_rpy, rpy_from_quaternion


def test_normalize_keeps_angle_in_range():
    assert normalize_angle(0.5) == 0.5


@pytest.mark.parametrize("angle", [-20.0, -7.0, -3.5, -1.0, 0.0, 2.0, 4.0, 9.5, 31.0])
def test_normalize_result_within_pi_and_equivalent(angle):
    result = normalize_angle(angle)
    assert -math.pi <= result <= math.pi
    assert math.cos(result) == pytest.approx(math.cos(angle))
    assert math.sin(result) == pytest.approx(math.sin(angle))


def test_normalize_wraps_full_turn():
    assert normalize_angle(0.25 + 2 * math.pi) == pytest.approx(0.25)


def test_identity_quaternion():
    q = quaternion_from_rpy(0.0, 0.0, 0.0)
    assert (q.x, q.y, q.z, q.w) == (0.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize(
    "rpy",
    [(0.1, 0.2, 0.3), (-1.0, 0.5, 2.5), (2.9, -1.2, -3.0), (0.0, 0.0, 1.0)],
)
def test_round_trip(rpy):
    q = quaternion_from_rpy(*rpy)
    assert q.x**2 + q.y**2 + q.z**2 + q.w**2 == pytest.approx(1.0)
    assert rpy_from_quaternion(q.x, q.y, q.z, q.w) == pytest.approx(rpy)


def test_non_unit_quaternion_gives_same_angles():
    q = quaternion_from_rpy(0.3, -0.4, 1.1)
    scaled = rpy_from_quaternion(q.x * 3, q.y * 3, q.z * 3, q.w * 3)
    assert scaled == pytest.approx((0.3, -0.4, 1.1))


def test_gimbal_lock_pitch():
    q = quaternion_from_rpy(0.0, math.pi / 2, 0.0)
    _, pitch, _ = rpy_from_quaternion(q.x, q.y, q.z, q.w)
    assert pitch == pytest.approx(math.pi / 2)


def test_zero_quaternion_rejected():
    with pytest.raises(ValueError):
        rpy_from_quaternion(0.0, 0.0, 0.0, 0.0)