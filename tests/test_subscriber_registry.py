from core.subscriber_interface import ISubscriber
from core.subscriber_registry import SubscriberRegistry


class RecordingSubscriber(ISubscriber):
    def __init__(self, sid, fail=False):
        self.sid = sid
        self.fail = fail
        self.messages = []

    @property
    def subscriber_id(self):
        return self.sid

    def send(self, message):
        if self.fail:
            raise ConnectionError("socket closed")
        self.messages.append(message)


def test_broadcast_reaches_every_subscriber():
    registry = SubscriberRegistry()
    viewers = [RecordingSubscriber(f"sid-{i}") for i in range(3)]
    for viewer in viewers:
        registry.add(viewer)

    delivered = registry.broadcast({"type": "TRAFFIC_UPDATE", "data": {"id": 1}})

    assert delivered == 3
    assert all(viewer.messages == [{"type": "TRAFFIC_UPDATE", "data": {"id": 1}}] for viewer in viewers)


def test_failing_subscriber_does_not_block_others():
    registry = SubscriberRegistry()
    before = RecordingSubscriber("before")
    broken = RecordingSubscriber("broken", fail=True)
    after = RecordingSubscriber("after")
    for viewer in (before, broken, after):
        registry.add(viewer)

    delivered = registry.broadcast({"n": 1})

    assert delivered == 2
    assert before.messages == [{"n": 1}]
    assert after.messages == [{"n": 1}]
    assert len(registry) == 2

    # Dropped subscriber is skipped on later broadcasts
    assert registry.broadcast({"n": 2}) == 2


def test_remove_unknown_subscriber_is_noop():
    registry = SubscriberRegistry()
    registry.remove("missing")
    assert len(registry) == 0


def test_broadcast_with_no_subscribers():
    assert SubscriberRegistry().broadcast({"n": 1}) == 0
