import pytest

from sensorhub.bus import Bus, ParameterError


def test_publish_reaches_subscribers_in_order():
    bus = Bus()
    seen = []
    bus.subscribe("t", lambda m: seen.append(("a", m)))
    bus.subscribe("t", lambda m: seen.append(("b", m)))
    assert bus.publish("t", 7) == 2
    assert seen == [("a", 7), ("b", 7)]


def test_publish_without_subscribers_delivers_to_none():
    assert Bus().publish("nobody", object()) == 0


def test_topics_are_separate():
    bus = Bus()
    seen = []
    bus.subscribe("x", seen.append)
    bus.publish("y", 1)
    assert seen == []


def test_unsubscribe_stops_delivery():
    bus = Bus()
    seen = []
    bus.subscribe("t", seen.append)
    bus.unsubscribe("t", seen.append)
    assert bus.publish("t", 1) == 0
    assert seen == []


def test_unsubscribe_unknown_raises():
    with pytest.raises(ValueError):
        Bus().unsubscribe("t", print)


def test_parameter_error_is_value_error():
    error = ParameterError("bad")
    assert issubclass(ParameterError, ValueError)
    assert str(error) == "bad"