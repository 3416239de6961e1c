from datetime import datetime, timedelta

import pytest

from storefront.storage.events import CART_UPDATED, EventChannel
from storefront.storage.local_storage import StorageEvent, StorageRegistry


class Recorder:
    def __init__(self):
        self.events: list[StorageEvent] = []

    def __call__(self, event: StorageEvent) -> None:
        self.events.append(event)


def test_values_are_stored_as_strings(context):
    context.set_item("count", 5)

    assert context.get_item("count") == "5"
    assert context.get_item("missing") is None


def test_contexts_of_one_client_share_data(context, other_context):
    context.set_item("cartItems", "[]")
    assert other_context.get_item("cartItems") == "[]"


def test_clients_do_not_share_data(registry, context):
    context.set_item("cartItems", "[]")
    stranger = registry.get_or_create_area("client-2").context("main")

    assert stranger.get_item("cartItems") is None


def test_write_notifies_other_contexts_only(context, other_context):
    mine, theirs = Recorder(), Recorder()
    context.add_storage_listener(mine)
    other_context.add_storage_listener(theirs)

    context.set_item("cartItems", "[1]")

    assert mine.events == []
    assert theirs.events == [
        StorageEvent(key="cartItems", old_value=None, new_value="[1]", source_context="main")
    ]


def test_unchanged_value_fires_nothing(context, other_context):
    context.set_item("k", "v")
    recorder = Recorder()
    other_context.add_storage_listener(recorder)

    context.set_item("k", "v")

    assert recorder.events == []


def test_remove_fires_with_old_value(context, other_context):
    context.set_item("k", "v")
    recorder = Recorder()
    other_context.add_storage_listener(recorder)

    context.remove_item("k")
    context.remove_item("k")

    assert context.get_item("k") is None
    assert [(e.key, e.old_value, e.new_value) for e in recorder.events] == [("k", "v", None)]


def test_clear_fires_once_with_no_key(context, other_context):
    context.set_item("a", "1")
    context.set_item("b", "2")
    recorder = Recorder()
    other_context.add_storage_listener(recorder)

    context.clear()
    context.clear()

    assert context.keys() == []
    assert len(recorder.events) == 1
    assert recorder.events[0].key is None


def test_removed_listener_is_not_called(context, other_context):
    recorder = Recorder()
    remove = other_context.add_storage_listener(recorder)
    remove()

    context.set_item("k", "v")

    assert recorder.events == []


def test_failing_listener_does_not_stop_others(context, other_context, caplog):
    def broken(event):
        raise RuntimeError("boom")

    recorder = Recorder()
    other_context.add_storage_listener(broken)
    other_context.add_storage_listener(recorder)

    context.set_item("k", "v")

    assert len(recorder.events) == 1
    assert "Storage listener failed" in caplog.text


def test_closed_context_gets_no_events(area, context, other_context):
    recorder = Recorder()
    other_context.add_storage_listener(recorder)

    assert area.close_context("second-tab") is True
    context.set_item("k", "v")

    assert recorder.events == []
    assert area.close_context("second-tab") is False


def test_registry_areas():
    registry = StorageRegistry()
    area = registry.get_or_create_area("c1")

    assert registry.get_or_create_area("c1") is area
    assert registry.get_area("c1") is area
    assert area.context("t1") is area.context("t1")
    assert registry.delete_area("c1") is True
    assert registry.get_area("c1") is None
    assert registry.delete_area("c1") is False


def test_event_channel_delivers_in_subscription_order():
    channel = EventChannel()
    calls = []
    channel.subscribe(CART_UPDATED, lambda: calls.append("badge"))
    channel.subscribe(CART_UPDATED, lambda: calls.append("cart page"))

    assert channel.publish(CART_UPDATED) == 2
    assert calls == ["badge", "cart page"]


def test_event_channel_unsubscribe():
    channel = EventChannel()
    calls = []

    def callback():
        calls.append(1)

    unsubscribe = channel.subscribe(CART_UPDATED, callback)
    channel.subscribe(CART_UPDATED, callback)
    assert channel.subscriber_count(CART_UPDATED) == 1

    unsubscribe()
    channel.publish(CART_UPDATED)

    assert calls == []
    assert channel.publish("unknown") == 0


def test_event_channel_survives_failing_subscriber(caplog):
    channel = EventChannel()
    calls = []

    def broken():
        raise ValueError("bad view")

    channel.subscribe(CART_UPDATED, broken)
    channel.subscribe(CART_UPDATED, lambda: calls.append(1))

    channel.publish(CART_UPDATED)

    assert calls == [1]
    assert "cart:updated" in caplog.text


@pytest.mark.parametrize("name", [CART_UPDATED, "other"])
def test_subscriber_may_unsubscribe_while_notified(name):
    channel = EventChannel()
    calls = []

    def once():
        calls.append(1)
        stop()

    stop = channel.subscribe(name, once)
    channel.publish(name)
    channel.publish(name)

    assert calls == [1]


def age(obj, hours):
    obj.updated_at = datetime.utcnow() - timedelta(hours=hours)


def test_cleanup_removes_idle_areas(registry):
    idle = registry.get_or_create_area("idle")
    idle.context("main").set_item("cartItems", "[]")
    active = registry.get_or_create_area("active")
    age(idle, 25)

    assert registry.cleanup_old_areas(max_age_hours=24) == 1
    assert registry.get_area("idle") is None
    assert registry.get_area("active") is active
    assert idle.contexts == {}


def test_cleanup_closes_idle_contexts_of_active_areas(registry):
    area = registry.get_or_create_area("c1")
    old_tab = area.context("old-tab")
    area.context("main")
    recorder = Recorder()
    old_tab.add_storage_listener(recorder)
    age(old_tab, 30)

    assert registry.cleanup_old_areas(max_age_hours=24) == 0
    assert list(area.contexts) == ["main"]

    area.context("main").set_item("k", "v")
    assert recorder.events == []


def test_writes_keep_an_area_alive(registry):
    area = registry.get_or_create_area("c1")
    ctx = area.context("main")
    age(area, 25)
    age(ctx, 25)

    ctx.set_item("k", "v")

    assert registry.cleanup_old_areas(max_age_hours=24) == 0
    assert list(area.contexts) == ["main"]


def test_view_does_not_open_a_context(area, context):
    context.set_item("k", "v")

    reader = area.view("another-tab")

    assert reader.get_item("k") == "v"
    assert "another-tab" not in area.contexts
    assert area.view("main") is context
