import pytest

from appdeck.apps import BUILTIN_APPS, register_builtin_apps
from appdeck.apps.stopwatch import format_elapsed
from appdeck.apps.todo import MAX_TODO_LENGTH, add_todo


def _labels(node):
    return [child.props.get("text") for child in node.descendants() if child.kind == "label"]


def _button(node, text):
    for child in node.descendants():
        if child.kind == "button" and child.props.get("text") == text:
            return child
    raise AssertionError(f"no {text!r} button under {node!r}")


def _entry(node):
    return next(child for child in node.descendants() if child.kind == "entry")


@pytest.fixture
def builtin_runtime(runtime):
    assert register_builtin_apps(runtime.registry) == ["todo", "stopwatch"]
    return runtime


def test_builtin_registrations_keep_declared_metadata(builtin_runtime):
    todo = builtin_runtime.registry.get("todo")
    stopwatch = builtin_runtime.registry.get("stopwatch")

    assert [config.id for config in BUILTIN_APPS] == ["todo", "stopwatch"]
    assert todo.icon_color == "#3FB983"
    assert todo.has_update is False
    assert stopwatch.has_update is True
    assert set(builtin_runtime.launcher.icons) == {"todo", "stopwatch"}


def test_todo_add_and_remove_items_through_the_ui(builtin_runtime):
    instance = builtin_runtime.lifecycle.open("todo")
    content = instance.ui.content
    entry = _entry(content)

    builtin_runtime.library.set_text(entry, "  buy milk ")
    _button(content, "Add").click()
    builtin_runtime.library.set_text(entry, "call mom")
    entry.fire("<Return>", None)

    assert [todo["text"] for todo in instance.state["todos"]] == ["buy milk", "call mom"]
    assert instance.state["status"].props["text"] == "2 items"
    assert builtin_runtime.library.get_text(entry) == ""
    assert builtin_runtime.library.notifications[-1] == ("success", "Added: call mom")

    first_row = instance.state["rows"][1]
    _button(first_row, "Done").click()

    assert first_row.destroyed
    assert [todo["text"] for todo in instance.state["todos"]] == ["call mom"]
    assert instance.state["status"].props["text"] == "1 item"


def test_todo_empty_entry_warns(builtin_runtime):
    instance = builtin_runtime.lifecycle.open("todo")

    _button(instance.ui.content, "Add").click()

    assert instance.state["todos"] == []
    assert builtin_runtime.library.notifications == [("warning", "Type something to add.")]
    assert "No items yet." in _labels(instance.ui.content)


def test_todo_close_publishes_count_and_releases_everything(builtin_runtime):
    instance = builtin_runtime.lifecycle.open("todo")
    utils = builtin_runtime.lifecycle.contexts.build(instance).utils
    add_todo(instance.state, utils, "x" * 200)
    entry = instance.state["entry"]

    assert len(instance.state["todos"][0]["text"]) == MAX_TODO_LENGTH
    assert len(instance.tracker) == 1
    builtin_runtime.lifecycle.close("todo")

    assert builtin_runtime.shared["todo.open_items"] == 1
    assert entry.destroyed
    assert builtin_runtime.host.live_nodes() == []

    reopened = builtin_runtime.lifecycle.open("todo")
    assert reopened.state["todos"] == []


def test_stopwatch_counts_only_while_running(builtin_runtime):
    instance = builtin_runtime.lifecycle.open("stopwatch")
    content = instance.ui.content

    builtin_runtime.scheduler.tick(0.5)
    assert instance.state["elapsed"] == 0.0

    _button(content, "Start").click()
    assert instance.state["toggle"].props["text"] == "Stop"
    for dt in (0.016, 0.016, 0.033):
        builtin_runtime.scheduler.tick(dt)

    assert instance.state["elapsed"] == pytest.approx(0.065)
    assert instance.state["display"].props["text"] == format_elapsed(instance.state["elapsed"])


def test_stopwatch_lap_and_reset(builtin_runtime):
    instance = builtin_runtime.lifecycle.open("stopwatch")
    content = instance.ui.content
    _button(content, "Start").click()
    builtin_runtime.clock.advance(0.25)
    builtin_runtime.scheduler.tick(0.25)

    _button(content, "Lap").click()
    assert builtin_runtime.shared["stopwatch.last_lap"] == pytest.approx(0.25)
    assert builtin_runtime.library.notifications[-1] == ("info", "Lap 1: 00:00.25")

    _button(content, "Reset").click()
    assert instance.state["running"] is False
    assert instance.state["elapsed"] == 0.0
    assert instance.state["display"].props["text"] == "00:00.00"
    assert instance.state["display"].props["foreground"] == "#3FB983"
    assert "click" in builtin_runtime.library.sounds_played
    assert builtin_runtime.library.active_tweens == 1

    builtin_runtime.lifecycle.close("stopwatch")
    assert builtin_runtime.library.active_tweens == 0


def test_finished_reset_flashes_do_not_accumulate_in_the_tracker(builtin_runtime):
    instance = builtin_runtime.lifecycle.open("stopwatch")
    reset_button = _button(instance.ui.content, "Reset")
    baseline = len(instance.tracker)

    for _ in range(500):
        reset_button.click()
        builtin_runtime.library.advance(1.0)

    assert builtin_runtime.library.active_tweens == 0
    assert len(instance.tracker) <= baseline + 1


def test_format_elapsed():
    assert format_elapsed(0.0) == "00:00.00"
    assert format_elapsed(61.5) == "01:01.50"
    assert format_elapsed(-3.0) == "00:00.00"
