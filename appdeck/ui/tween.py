"""Cancellable property animation shared by the headless and Tk libraries."""

from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np

from ..domain.models import is_hex_color

EASINGS: dict[str, Callable[[float], float]] = {
    "linear": lambda t: t,
    "in": lambda t: t * t,
    "out": lambda t: 1.0 - (1.0 - t) ** 2,
    "in_out": lambda t: float(0.5 - 0.5 * np.cos(np.pi * t)),
}


def hex_to_rgb(value: str) -> np.ndarray:
    text = value.lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    return np.array([int(text[index : index + 2], 16) for index in (0, 2, 4)], dtype=np.float64)


def rgb_to_hex(rgb: np.ndarray) -> str:
    clipped = np.clip(np.rint(rgb), 0, 255).astype(int)
    return "#{:02x}{:02x}{:02x}".format(*clipped)


def interpolate(start: Any, end: Any, t: float) -> Any:
    """Blend numbers or hex colors; ``t`` is clamped to [0, 1]."""
    t = min(1.0, max(0.0, float(t)))
    if isinstance(start, str) and isinstance(end, str):
        if not (is_hex_color(start) and is_hex_color(end)):
            raise ValueError(f"Cannot tween between {start!r} and {end!r}")
        low = hex_to_rgb(start)
        return rgb_to_hex(low + (hex_to_rgb(end) - low) * t)
    value = float(start) + (float(end) - float(start)) * t
    if isinstance(start, int) and isinstance(end, int):
        return int(round(value))
    return value


class TweenHandle:
    """Advances an animation by explicit time steps.

    Disconnecting stops it where it is; ``on_cancel`` lets the owning library
    drop any scheduled step.
    """

    def __init__(
        self,
        apply: Callable[[Any], None],
        start: Any,
        end: Any,
        duration: float,
        easing: str = "in_out",
        on_cancel: Optional[Callable[[], None]] = None,
    ) -> None:
        if easing not in EASINGS:
            raise ValueError(f"Unknown easing: {easing}")
        interpolate(start, end, 0.0)
        self._apply = apply
        self.start = start
        self.end = end
        self.duration = max(0.0, float(duration))
        self.easing = easing
        self.elapsed = 0.0
        self.finished = False
        self.cancelled = False
        self._on_cancel = on_cancel

    @property
    def connected(self) -> bool:
        return not (self.finished or self.cancelled)

    @property
    def progress(self) -> float:
        if self.duration <= 0.0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)

    def advance(self, dt: float) -> bool:
        """Step by ``dt`` seconds and apply the value; True once done."""
        if not self.connected:
            return True
        self.elapsed += max(0.0, float(dt))
        progress = self.progress
        self._apply(interpolate(self.start, self.end, EASINGS[self.easing](progress)))
        if progress >= 1.0:
            self.finished = True
        return self.finished

    def disconnect(self) -> None:
        if not self.connected:
            return
        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()
