from fives.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_silent():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_bound_method_kept_alive_without_external_reference():
    bus = EventBus()
    hits = []

    class Listener:
        def on_event(self, sender, **kwargs):
            hits.append(kwargs["n"])

    bus.subscribe("ping", Listener().on_event)
    bus.emit("ping", n=3)

    assert hits == [3]
