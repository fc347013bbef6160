"""Stopwatch driven by per-frame updates."""

from __future__ import annotations

from functools import partial
from typing import Any

from ..application.context import AppContext, AppUtils
from ..domain.models import AppConfig

FLASH_COLOR = "#3FB983"
TEXT_COLOR = "#1F2328"


def format_elapsed(seconds: float) -> str:
    minutes, rest = divmod(max(0.0, seconds), 60.0)
    return f"{int(minutes):02d}:{rest:05.2f}"


def _on_open(ctx: AppContext) -> None:
    state = ctx.state
    utils = ctx.utils
    state.update(running=False, elapsed=0.0, laps=[])
    state["display"] = utils.create_label(ctx.ui.content, format_elapsed(0.0))
    controls = utils.create_grid(ctx.ui.content, columns=3)
    state["toggle"] = utils.create_button(
        controls, "Start", command=partial(toggle_running, state, utils)
    )
    utils.create_button(controls, "Lap", command=partial(record_lap, state, utils, ctx.shared))
    utils.create_button(controls, "Reset", command=partial(reset, state, utils))


def _on_update(ctx: AppContext) -> None:
    state = ctx.state
    if not state["running"]:
        return
    state["elapsed"] += ctx.delta_time or 0.0
    ctx.utils.set_text(state["display"], format_elapsed(state["elapsed"]))


def toggle_running(state: dict[str, Any], utils: AppUtils) -> None:
    state["running"] = not state["running"]
    utils.set_text(state["toggle"], "Stop" if state["running"] else "Start")


def record_lap(state: dict[str, Any], utils: AppUtils, shared: Any) -> None:
    lap = state["elapsed"]
    state["laps"].append(lap)
    shared["stopwatch.last_lap"] = lap
    utils.notify(f"Lap {len(state['laps'])}: {format_elapsed(lap)}", "info")


def reset(state: dict[str, Any], utils: AppUtils) -> None:
    state.update(running=False, elapsed=0.0, laps=[])
    utils.set_text(state["toggle"], "Start")
    utils.set_text(state["display"], format_elapsed(0.0))
    utils.play_sound("click")
    utils.tween(state["display"], "foreground", FLASH_COLOR, TEXT_COLOR, 0.4)


STOPWATCH_APP = AppConfig(
    id="stopwatch",
    name="Stopwatch",
    icon="⏱",
    icon_color="#4F8EF7",
    description="Counts time while open; laps are shared with other apps.",
    on_open=_on_open,
    on_update=_on_update,
)
