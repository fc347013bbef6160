"""Error taxonomy for registration, lookup and callback failures."""

from __future__ import annotations

from dataclasses import dataclass


class AppDeckError(Exception):
    """Base class for runtime errors."""


class InvalidConfig(AppDeckError, ValueError):
    """An app declaration is missing required fields or has malformed ones."""


class DuplicateApp(AppDeckError):
    def __init__(self, app_id: str) -> None:
        super().__init__(f"App '{app_id}' is already registered")
        self.app_id = app_id


class UnknownApp(AppDeckError, LookupError):
    def __init__(self, app_id: str) -> None:
        super().__init__(f"App '{app_id}' is not registered")
        self.app_id = app_id


class CallbackFailed(AppDeckError):
    """An app callback raised; produced by the failure boundary, never raised out of it."""

    def __init__(self, app_id: str, phase: str, error: BaseException) -> None:
        super().__init__(f"{app_id}.{phase} failed: {type(error).__name__}: {error}")
        self.app_id = app_id
        self.phase = phase
        self.error = error
        self.__cause__ = error


@dataclass(frozen=True)
class OpenFailed:
    """Result returned by ``LifecycleManager.open`` when no instance could be opened."""

    app_id: str
    reason: str
    failure: CallbackFailed | None = None

    def __bool__(self) -> bool:
        return False
