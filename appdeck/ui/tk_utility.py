"""Utility library over tkinter widgets, bindings and ``after`` jobs."""

from __future__ import annotations

import logging
import time
import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Optional

from ..domain.signals import Signal, Subscription
from .common import NOTIFICATION_SOUNDS, normalize_level
from .sound import SoundPlayer
from .tween import TweenHandle

ELEMENT_FACTORIES: dict[str, Callable[..., tk.Misc]] = {
    "frame": ttk.Frame,
    "label": ttk.Label,
    "button": ttk.Button,
    "entry": ttk.Entry,
    "checkbutton": ttk.Checkbutton,
    "scale": ttk.Scale,
    "progressbar": ttk.Progressbar,
    "separator": ttk.Separator,
    "canvas": tk.Canvas,
    "listbox": tk.Listbox,
    "text": tk.Text,
}

VARIABLE_EVENTS = ("write", "read", "unset")

Notifier = Callable[[str, str, Optional[int]], None]


class TkBinding:
    """Event binding added with ``add="+"``; disconnect removes only this one."""

    def __init__(self, widget: tk.Misc, sequence: str, funcid: str) -> None:
        self.widget = widget
        self.sequence = sequence
        self.funcid = funcid
        self._connected = True

    @property
    def connected(self) -> bool:
        return self._connected

    def disconnect(self) -> None:
        if not self._connected:
            return
        self._connected = False
        try:
            if not self.widget.winfo_exists():
                return
            # Misc.unbind(sequence, funcid) drops every handler on older Pythons.
            script = self.widget.bind(self.sequence) or ""
            kept = [line for line in script.split("\n") if line and self.funcid not in line]
            self.widget.bind(self.sequence, "\n".join(kept))
            self.widget.deletecommand(self.funcid)
        except tk.TclError:
            pass


class TkVariableTrace:
    def __init__(self, variable: tk.Variable, mode: str, cbname: str) -> None:
        self.variable = variable
        self.mode = mode
        self.cbname = cbname
        self._connected = True

    @property
    def connected(self) -> bool:
        return self._connected

    def disconnect(self) -> None:
        if not self._connected:
            return
        self._connected = False
        try:
            self.variable.trace_remove(self.mode, self.cbname)
        except tk.TclError:
            pass


class TkUtilityLibrary:
    def __init__(
        self,
        *,
        notifier: Optional[Notifier] = None,
        sound: SoundPlayer | None = None,
        frame_interval_ms: int = 16,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("appdeck")
        self.notifier = notifier
        self.sound = sound or SoundPlayer(enabled=False, logger=self.logger)
        self.frame_interval_ms = max(1, int(frame_interval_ms))

    def create_element(self, kind: str, parent: Any, **options: Any) -> tk.Misc:
        factory = ELEMENT_FACTORIES.get(kind)
        if factory is None:
            raise ValueError(f"Unknown element kind: {kind}")
        cell = options.pop("cell", None)
        pack = options.pop("pack", None)
        widget = factory(parent, **options)
        self._place(widget, parent, cell=cell, pack=pack)
        return widget

    def create_button(
        self,
        parent: Any,
        text: str,
        command: Optional[Callable[[], Any]] = None,
        **options: Any,
    ) -> tk.Misc:
        if command is not None:
            options["command"] = command
        return self.create_element("button", parent, text=text, **options)

    def create_label(self, parent: Any, text: str = "", **options: Any) -> tk.Misc:
        return self.create_element("label", parent, text=text, **options)

    def create_grid(self, parent: Any, columns: int = 2, **options: Any) -> tk.Misc:
        columns = int(columns)
        if columns < 1:
            raise ValueError("Grid needs at least one column")
        frame = self.create_element("frame", parent, **options)
        for column in range(columns):
            frame.columnconfigure(column, weight=1, uniform="cells")
        frame.appdeck_columns = columns
        frame.appdeck_next_cell = 0
        return frame

    def destroy_element(self, node: Any) -> None:
        node.destroy()

    def get_text(self, node: Any) -> str:
        if isinstance(node, tk.Text):
            return node.get("1.0", "end-1c")
        if isinstance(node, (tk.Entry, ttk.Entry)):
            return node.get()
        return str(node.cget("text"))

    def set_text(self, node: Any, text: str) -> None:
        if isinstance(node, tk.Text):
            node.delete("1.0", tk.END)
            node.insert("1.0", text)
        elif isinstance(node, (tk.Entry, ttk.Entry)):
            node.delete(0, tk.END)
            node.insert(0, text)
        else:
            node.configure(text=text)

    def notify(self, message: str, level: str = "info", duration_ms: Optional[int] = None) -> None:
        level = normalize_level(level)
        self.logger.info("Notification [%s]: %s", level, message)
        if self.notifier is not None:
            self.notifier(str(message), level, duration_ms)
        self.play_sound(NOTIFICATION_SOUNDS[level])

    def tween(
        self,
        node: Any,
        prop: str,
        start: Any,
        end: Any,
        duration: float,
        easing: str = "in_out",
    ) -> Subscription:
        pending: dict[str, Any] = {"job": None, "last": time.perf_counter()}

        def _cancel() -> None:
            job = pending["job"]
            pending["job"] = None
            if job is not None:
                try:
                    node.after_cancel(job)
                except tk.TclError:
                    pass

        handle = TweenHandle(
            lambda value: node.configure(**{prop: value}),
            start,
            end,
            duration,
            easing=easing,
            on_cancel=_cancel,
        )

        def _step() -> None:
            pending["job"] = None
            now = time.perf_counter()
            dt = now - pending["last"]
            pending["last"] = now
            try:
                done = handle.advance(dt)
            except tk.TclError:
                self.logger.debug("Tween target is gone; stopping %s tween", prop)
                handle.disconnect()
                return
            if not done:
                pending["job"] = node.after(self.frame_interval_ms, _step)

        node.configure(**{prop: start})
        pending["job"] = node.after(self.frame_interval_ms, _step)
        return handle

    def play_sound(self, name: str) -> bool:
        return self.sound.play(name)

    def connect(
        self, source: Any, handler: Callable[..., Any], event: Optional[str] = None
    ) -> Subscription:
        if isinstance(source, Signal):
            return source.connect(handler)
        if isinstance(source, tk.Variable):
            mode = event or "write"
            if mode not in VARIABLE_EVENTS:
                raise ValueError(f"Unknown variable trace mode: {mode}")
            return TkVariableTrace(source, mode, source.trace_add(mode, handler))
        if isinstance(source, tk.Misc):
            if not event:
                raise ValueError("Connecting to a widget needs an event sequence")
            return TkBinding(source, event, source.bind(event, handler, add="+"))
        raise TypeError(f"Cannot connect to {type(source).__name__}")

    def _place(self, widget: tk.Misc, parent: Any, *, cell=None, pack=None) -> None:
        columns = getattr(parent, "appdeck_columns", None)
        if columns:
            if cell is None:
                index = parent.appdeck_next_cell
                parent.appdeck_next_cell = index + 1
                cell = divmod(index, columns)
            row, column = cell
            widget.grid(row=row, column=column, sticky="nsew", padx=2, pady=2)
            return
        widget.pack(**(pack if pack is not None else {"fill": "x", "pady": 2}))
