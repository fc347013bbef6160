"""UI notification hooks for the application layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class UiHooks:
    warn: Callable[[str], None]
    info: Callable[[str], None]
    error: Callable[[str], None]


def notification_ui_hooks(notify: Callable[..., object]) -> UiHooks:
    """Route hook messages to a ``notify(message, level)`` surface."""
    return UiHooks(
        warn=lambda message: notify(message, "warning"),
        info=lambda message: notify(message, "info"),
        error=lambda message: notify(message, "error"),
    )


def logging_ui_hooks(logger: logging.Logger) -> UiHooks:
    return UiHooks(warn=logger.warning, info=logger.info, error=logger.error)
