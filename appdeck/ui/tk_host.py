"""Tkinter host: per-app container frames inside the shared app area."""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..application.context import UiRefs
from ..domain.models import AppRegistration
from .common import readable_text_color


class TkHost:
    """Builds one framed window per open app.

    Destroying the container frame destroys every widget parented under it,
    however deep, which is how app-created widgets are cleaned up.
    """

    def __init__(
        self,
        app_area: tk.Misc,
        *,
        logger: logging.Logger | None = None,
        on_close_request: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.app_area = app_area
        self.logger = logger or logging.getLogger("appdeck")
        self.on_close_request = on_close_request

    def build_container(self, registration: AppRegistration) -> UiRefs:
        color = registration.icon_color
        text_color = readable_text_color(color)
        root = ttk.Frame(self.app_area, style="AppWindow.TFrame", padding=1)
        root.pack(side="left", fill="both", expand=True, padx=6, pady=6)
        header = tk.Frame(root, background=color)
        header.pack(fill="x")
        title = tk.Label(
            header,
            text=f"{registration.icon}  {registration.name}",
            background=color,
            foreground=text_color,
            anchor="w",
        )
        title.pack(side="left", fill="x", expand=True, padx=8, pady=4)
        close_button = tk.Button(
            header,
            text="×",
            relief="flat",
            background=color,
            foreground=text_color,
            activebackground=color,
            borderwidth=0,
            command=lambda app_id=registration.id: self._request_close(app_id),
        )
        close_button.pack(side="right", padx=4)
        content = ttk.Frame(root, style="AppContent.TFrame", padding=8)
        content.pack(fill="both", expand=True)
        return UiRefs(root, content=content, header=header, title=title)

    def destroy_container(self, ui: UiRefs) -> None:
        root = ui.root
        try:
            exists = bool(root.winfo_exists())
        except tk.TclError:
            return
        if exists:
            root.destroy()

    def _request_close(self, app_id: str) -> None:
        if self.on_close_request is None:
            return
        # The button lives inside the container being destroyed; let its command return first.
        self.app_area.after_idle(lambda: self.on_close_request(app_id))
