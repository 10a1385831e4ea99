"""Single-Slot Channel: last value wins, no backlog, late subscribers."""

from fireproof_login.core.event_channel import SingleSlotChannel


def test_new_channel_is_empty():
    channel = SingleSlotChannel()
    assert channel.value is None
    assert channel.version == 0


def test_publish_overwrites_previous_value():
    channel = SingleSlotChannel()
    channel.publish("a")
    channel.publish("b")
    assert channel.value == "b"
    assert channel.version == 2


def test_observer_receives_each_publish():
    channel = SingleSlotChannel()
    seen = []
    channel.observe(seen.append)
    channel.publish(1)
    channel.publish(2)
    assert seen == [1, 2]


def test_late_observer_gets_only_latest_value():
    channel = SingleSlotChannel()
    channel.publish(1)
    channel.publish(2)
    seen = []
    channel.observe(seen.append)
    assert seen == [2]


def test_observer_on_empty_channel_gets_nothing_until_publish():
    channel = SingleSlotChannel()
    seen = []
    channel.observe(seen.append)
    assert seen == []


def test_unsubscribe_stops_delivery():
    channel = SingleSlotChannel()
    seen = []
    unsubscribe = channel.observe(seen.append)
    channel.publish(1)
    unsubscribe()
    unsubscribe()
    channel.publish(2)
    assert seen == [1]


def test_published_since():
    channel = SingleSlotChannel()
    channel.publish("old")
    mark = channel.version
    assert channel.published_since(mark) is None
    channel.publish("new")
    assert channel.published_since(mark) == "new"
