"""App declarations, stored registrations and lifecycle states."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from ..application.context import AppContext

STATE_CLOSED = "closed"
STATE_OPENING = "opening"
STATE_OPEN = "open"
STATE_CLOSING = "closing"
LIVE_STATES = frozenset({STATE_OPENING, STATE_OPEN})

PHASE_OPEN = "open"
PHASE_CLOSE = "close"
PHASE_UPDATE = "update"

DEFAULT_ICON_COLORS = (
    "#4F8EF7",
    "#F76E4F",
    "#3FB983",
    "#B36BF2",
    "#F2B83A",
    "#3AC4D6",
    "#E45C9A",
    "#8A9BA8",
)

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

AppCallback = Callable[["AppContext"], None]


@dataclass(frozen=True)
class AppConfig:
    """What an app author declares. ``id`` is derived from ``name`` when omitted."""

    name: str
    on_open: Optional[AppCallback]
    on_close: Optional[AppCallback] = None
    on_update: Optional[AppCallback] = None
    id: Optional[str] = None
    icon: str = ""
    icon_color: str = ""
    description: str = ""


@dataclass(frozen=True)
class AppRegistration:
    id: str
    name: str
    icon: str
    icon_color: str
    description: str
    order: int
    on_open: AppCallback
    on_close: Optional[AppCallback] = None
    on_update: Optional[AppCallback] = None

    @property
    def has_update(self) -> bool:
        return self.on_update is not None


def is_hex_color(value: str) -> bool:
    return bool(_HEX_COLOR_RE.match(value or ""))


def default_icon_color(order: int) -> str:
    return DEFAULT_ICON_COLORS[order % len(DEFAULT_ICON_COLORS)]


def default_icon(name: str) -> str:
    stripped = name.strip()
    return stripped[:1].upper() if stripped else "?"
