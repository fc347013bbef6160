import pytest

from appdeck.application.context import AppUtils, ContextBuilder, UiRefs
from appdeck.application.lifecycle import AppInstance
from appdeck.application.resource_tracker import ResourceTracker
from appdeck.application.shared_state import SharedState
from appdeck.domain.models import AppRegistration
from appdeck.domain.signals import Signal
from appdeck.ui.headless import HeadlessNode, HeadlessUtilityLibrary


def _instance(app_id):
    registration = AppRegistration(
        id=app_id,
        name=app_id.title(),
        icon="X",
        icon_color="#000000",
        description="",
        order=0,
        on_open=lambda _ctx: None,
    )
    return AppInstance(registration, ResourceTracker(app_id), UiRefs(HeadlessNode("container")))


def test_context_exposes_live_state_and_shared_references():
    shared = SharedState()
    builder = ContextBuilder(shared, HeadlessUtilityLibrary())
    instance = _instance("todo")

    first = builder.build(instance)
    first.state["todos"] = ["milk"]
    second = builder.build(instance)

    assert second.state is instance.state
    assert second.state["todos"] == ["milk"]
    assert first.shared is shared
    assert second.ui is instance.ui
    assert first.app_id == "todo"
    assert first.delta_time is None
    assert isinstance(first.utils, AppUtils)


def test_shared_state_is_identical_across_apps():
    shared = SharedState()
    builder = ContextBuilder(shared, HeadlessUtilityLibrary())

    todo = builder.build(_instance("todo"))
    clock = builder.build(_instance("clock"))
    todo.shared["theme"] = "dark"

    assert clock.shared is todo.shared
    assert clock.shared.theme == "dark"


def test_delta_time_only_when_requested():
    builder = ContextBuilder(SharedState(), HeadlessUtilityLibrary())
    instance = _instance("clock")

    assert builder.build(instance, delta_time=0.016).delta_time == 0.016
    assert builder.build(instance, delta_time=0.0).delta_time == 0.0
    with pytest.raises(ValueError):
        builder.build(instance, delta_time=-0.1)


def test_utils_connect_is_bound_to_the_owning_tracker():
    builder = ContextBuilder(SharedState(), HeadlessUtilityLibrary())
    todo = _instance("todo")
    clock = _instance("clock")
    signal = Signal("shared-source")

    todo_connection = builder.build(todo).utils.connect(signal, lambda: None)
    clock_connection = builder.build(clock).utils.connect(signal, lambda: None)

    assert todo.tracker.tracked == (todo_connection,)
    assert clock.tracker.tracked == (clock_connection,)
    todo.tracker.release_all()
    assert todo_connection.connected is False
    assert clock_connection.connected is True


def test_utils_tween_and_track_are_recorded():
    library = HeadlessUtilityLibrary()
    builder = ContextBuilder(SharedState(), library)
    instance = _instance("todo")
    ctx = builder.build(instance)
    label = ctx.utils.create_label(ctx.ui.content, "hi")
    external = Signal().connect(lambda: None)

    tween = ctx.utils.tween(label, "opacity", 0.0, 1.0, 0.5)
    ctx.utils.track(external)

    assert instance.tracker.tracked == (tween, external)
    assert label.props["opacity"] == 0.0


def test_ui_refs_names_and_content_fallback():
    root = HeadlessNode("container")
    body = HeadlessNode("frame", root)

    plain = UiRefs(root)
    named = UiRefs(root, content=body, title="Todo")

    assert plain.content is root
    assert named.content is body
    assert named["title"] == "Todo"
    assert "title" in named
    assert named.names() == ("root", "content", "title")
    with pytest.raises(AttributeError):
        getattr(plain, "missing")
