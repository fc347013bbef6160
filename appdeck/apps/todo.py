"""Todo list: entry + add button, one removable row per item."""

from __future__ import annotations

from functools import partial
from typing import Any

from ..application.context import AppContext, AppUtils
from ..domain.models import AppConfig

MAX_TODO_LENGTH = 120


def _on_open(ctx: AppContext) -> None:
    state = ctx.state
    utils = ctx.utils
    state["todos"] = []
    state["rows"] = {}
    state["next_id"] = 1

    form = utils.create_element("frame", ctx.ui.content)
    entry = utils.create_element("entry", form)
    utils.create_button(form, "Add", command=partial(_add_from_entry, state, utils))
    items = utils.create_element("frame", ctx.ui.content)
    status = utils.create_label(ctx.ui.content, "No items yet.")
    state["entry"] = entry
    state["items"] = items
    state["status"] = status
    utils.connect(entry, partial(_on_submit, state, utils), "<Return>")


def _on_close(ctx: AppContext) -> None:
    ctx.shared["todo.open_items"] = len(ctx.state.get("todos", []))


def _on_submit(state: dict[str, Any], utils: AppUtils, _event: Any = None) -> None:
    _add_from_entry(state, utils)


def _add_from_entry(state: dict[str, Any], utils: AppUtils) -> None:
    text = utils.get_text(state["entry"]).strip()
    if not text:
        utils.notify("Type something to add.", "warning")
        return
    add_todo(state, utils, text)
    utils.set_text(state["entry"], "")


def add_todo(state: dict[str, Any], utils: AppUtils, text: str) -> int:
    todo_id = state["next_id"]
    state["next_id"] = todo_id + 1
    state["todos"].append({"id": todo_id, "text": text[:MAX_TODO_LENGTH]})

    row = utils.create_element("frame", state["items"])
    utils.create_label(row, text[:MAX_TODO_LENGTH])
    utils.create_button(row, "Done", command=partial(remove_todo, state, utils, todo_id))
    state["rows"][todo_id] = row
    _refresh_status(state, utils)
    utils.notify(f"Added: {text[:MAX_TODO_LENGTH]}", "success")
    return todo_id


def remove_todo(state: dict[str, Any], utils: AppUtils, todo_id: int) -> None:
    row = state["rows"].pop(todo_id, None)
    if row is None:
        return
    state["todos"] = [todo for todo in state["todos"] if todo["id"] != todo_id]
    utils.destroy_element(row)
    _refresh_status(state, utils)


def _refresh_status(state: dict[str, Any], utils: AppUtils) -> None:
    count = len(state["todos"])
    if count == 0:
        text = "No items yet."
    elif count == 1:
        text = "1 item"
    else:
        text = f"{count} items"
    utils.set_text(state["status"], text)


TODO_APP = AppConfig(
    id="todo",
    name="Todo",
    icon="✓",
    icon_color="#3FB983",
    description="Keep a short list while the app is open.",
    on_open=_on_open,
    on_close=_on_close,
)
