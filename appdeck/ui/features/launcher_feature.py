"""Dock of launch icons, one per registered app."""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Callable, Optional

from ...domain.models import AppRegistration
from ..common import DOCK_ACTIVE_MARK, DOCK_BACKGROUND, readable_text_color


class LauncherFeature:
    """Renders icon buttons; clicking one toggles its app."""

    def __init__(self, parent: tk.Misc, *, logger: logging.Logger | None = None) -> None:
        self.parent = parent
        self.logger = logger or logging.getLogger("appdeck")
        self.on_activate: Optional[Callable[[str], object]] = None
        self.buttons: dict[str, tk.Button] = {}
        self.markers: dict[str, tk.Frame] = {}
        self.active: dict[str, bool] = {}

    def bind_activate(self, callback: Callable[[str], object]) -> None:
        self.on_activate = callback

    def app_registered(self, registration: AppRegistration) -> None:
        row = tk.Frame(self.parent, background=DOCK_BACKGROUND)
        row.pack(fill="x", pady=4)
        marker = tk.Frame(row, width=4, background=DOCK_BACKGROUND)
        marker.pack(side="left", fill="y")
        button = tk.Button(
            row,
            text=registration.icon,
            width=3,
            relief="flat",
            borderwidth=0,
            font=("TkDefaultFont", 14, "bold"),
            background=registration.icon_color,
            foreground=readable_text_color(registration.icon_color),
            activebackground=registration.icon_color,
            command=lambda app_id=registration.id: self._activate(app_id),
        )
        button.pack(side="left", padx=(4, 6), ipady=4)
        self.buttons[registration.id] = button
        self.markers[registration.id] = marker
        self.active[registration.id] = False

    def app_state_changed(self, app_id: str, active: bool) -> None:
        self.active[app_id] = bool(active)
        marker = self.markers.get(app_id)
        if marker is None:
            return
        marker.configure(background=DOCK_ACTIVE_MARK if active else DOCK_BACKGROUND)

    def _activate(self, app_id: str) -> None:
        if self.on_activate is None:
            self.logger.debug("Launcher click ignored before runtime binding: %s", app_id)
            return
        self.on_activate(app_id)
