"""Transient toast notifications stacked in the window corner."""

from __future__ import annotations

import tkinter as tk
from typing import Optional

from ..common import MAX_VISIBLE_NOTIFICATIONS, NOTIFICATION_COLORS, normalize_level


class NotificationFeature:
    def __init__(self, root: tk.Misc, *, default_duration_ms: int = 3000) -> None:
        self.root = root
        self.default_duration_ms = max(1, int(default_duration_ms))
        self.stack = tk.Frame(root)
        self._toasts: list[tuple[tk.Label, str]] = []

    def show(self, message: str, level: str = "info", duration_ms: Optional[int] = None) -> None:
        level = normalize_level(level)
        background, foreground = NOTIFICATION_COLORS[level]
        toast = tk.Label(
            self.stack,
            text=message,
            background=background,
            foreground=foreground,
            padx=12,
            pady=6,
            wraplength=320,
            justify="left",
        )
        toast.pack(side="bottom", anchor="e", pady=(4, 0))
        self.stack.place(relx=1.0, rely=1.0, x=-12, y=-12, anchor="se")
        self.stack.lift()
        duration = self.default_duration_ms if duration_ms is None else max(1, int(duration_ms))
        job = self.root.after(duration, lambda: self._dismiss(toast))
        self._toasts.append((toast, job))
        while len(self._toasts) > MAX_VISIBLE_NOTIFICATIONS:
            oldest, oldest_job = self._toasts[0]
            try:
                self.root.after_cancel(oldest_job)
            except tk.TclError:
                pass
            self._dismiss(oldest)

    @property
    def visible_count(self) -> int:
        return len(self._toasts)

    def clear(self) -> None:
        for toast, job in list(self._toasts):
            try:
                self.root.after_cancel(job)
            except tk.TclError:
                pass
            self._dismiss(toast)

    def _dismiss(self, toast: tk.Label) -> None:
        self._toasts = [entry for entry in self._toasts if entry[0] is not toast]
        if toast.winfo_exists():
            toast.destroy()
        if not self._toasts:
            self.stack.place_forget()
