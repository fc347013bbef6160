"""Built-in sample apps."""

from __future__ import annotations

from ..application.registry import AppRegistry
from .stopwatch import STOPWATCH_APP
from .todo import TODO_APP

BUILTIN_APPS = (TODO_APP, STOPWATCH_APP)


def register_builtin_apps(registry: AppRegistry) -> list[str]:
    return [registry.register(config) for config in BUILTIN_APPS]


__all__ = ["BUILTIN_APPS", "STOPWATCH_APP", "TODO_APP", "register_builtin_apps"]
