"""Shared UI constants and small helpers."""

from __future__ import annotations

UI_SURFACE = "#F5F6F8"
UI_PANEL = "#FFFFFF"
UI_TEXT = "#1F2328"
UI_MUTED = "#6B7280"
DOCK_BACKGROUND = "#22262E"
DOCK_ACTIVE_MARK = "#F2B83A"

NOTIFICATION_LEVELS = ("info", "success", "warning", "error")
NOTIFICATION_COLORS = {
    "info": ("#2F6FD0", "#FFFFFF"),
    "success": ("#2E9E6A", "#FFFFFF"),
    "warning": ("#D49A1F", "#1F2328"),
    "error": ("#C8423B", "#FFFFFF"),
}
NOTIFICATION_SOUNDS = {
    "info": "notify",
    "success": "success",
    "warning": "notify",
    "error": "error",
}
MAX_VISIBLE_NOTIFICATIONS = 4


def normalize_level(level: str | None) -> str:
    candidate = str(level or "").strip().lower()
    return candidate if candidate in NOTIFICATION_LEVELS else "info"


def readable_text_color(hex_color: str) -> str:
    """Black or white, whichever reads better on ``hex_color``."""
    value = hex_color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    try:
        red, green, blue = (int(value[index : index + 2], 16) for index in (0, 2, 4))
    except ValueError:
        return UI_TEXT
    luminance = 0.299 * red + 0.587 * green + 0.114 * blue
    return UI_TEXT if luminance > 160 else "#FFFFFF"
