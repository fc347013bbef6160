"""App registry: stable identifiers mapped to validated declarations."""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from ..domain.errors import DuplicateApp, InvalidConfig, UnknownApp
from ..domain.models import (
    AppConfig,
    AppRegistration,
    default_icon,
    default_icon_color,
    is_hex_color,
)
from ..utils import slugify

RegistrationListener = Callable[[AppRegistration], None]


class AppRegistry:
    """Validated app registrations keyed by id, in registration order."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("appdeck")
        self._registrations: dict[str, AppRegistration] = {}
        self._listeners: list[RegistrationListener] = []

    def add_listener(self, listener: RegistrationListener) -> None:
        """Call ``listener`` for every registration, including existing ones."""
        self._listeners.append(listener)
        for registration in list(self._registrations.values()):
            self._notify(listener, registration)

    def register(self, config: AppConfig) -> str:
        """Validate and store ``config``; returns the app identifier."""
        if not isinstance(config, AppConfig):
            raise InvalidConfig(f"Expected AppConfig, got {type(config).__name__}")
        name = config.name.strip() if isinstance(config.name, str) else ""
        if not name:
            raise InvalidConfig("App name must be a non-empty string")
        if config.on_open is None or not callable(config.on_open):
            raise InvalidConfig(f"App '{name}' must declare a callable on_open")
        for slot in ("on_close", "on_update"):
            callback = getattr(config, slot)
            if callback is not None and not callable(callback):
                raise InvalidConfig(f"App '{name}': {slot} must be callable when given")
        icon_color = (config.icon_color or "").strip()
        if icon_color and not is_hex_color(icon_color):
            raise InvalidConfig(f"App '{name}': icon_color must be a #RGB or #RRGGBB color")

        order = len(self._registrations)
        app_id = self._resolve_id(config, name, order)
        registration = AppRegistration(
            id=app_id,
            name=name,
            icon=(config.icon or "").strip() or default_icon(name),
            icon_color=icon_color or default_icon_color(order),
            description=(config.description or "").strip(),
            order=order,
            on_open=config.on_open,
            on_close=config.on_close,
            on_update=config.on_update,
        )
        self._registrations[app_id] = registration
        self.logger.info("Registered app: id=%s name=%s", app_id, name)
        for listener in list(self._listeners):
            self._notify(listener, registration)
        return app_id

    def get(self, app_id: str) -> AppRegistration:
        try:
            return self._registrations[app_id]
        except (KeyError, TypeError):
            raise UnknownApp(str(app_id)) from None

    def list(self) -> list[AppRegistration]:
        return list(self._registrations.values())

    def __contains__(self, app_id: object) -> bool:
        return app_id in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)

    def __iter__(self) -> Iterator[AppRegistration]:
        return iter(self.list())

    def _resolve_id(self, config: AppConfig, name: str, order: int) -> str:
        if config.id is not None:
            app_id = config.id.strip() if isinstance(config.id, str) else ""
            if not app_id:
                raise InvalidConfig(f"App '{name}': id must be a non-empty string when given")
            if app_id in self._registrations:
                raise DuplicateApp(app_id)
            return app_id
        base = slugify(name) or "app"
        if base not in self._registrations:
            return base
        candidate = f"{base}_{order + 1}"
        suffix = order + 1
        while candidate in self._registrations:
            suffix += 1
            candidate = f"{base}_{suffix}"
        return candidate

    def _notify(self, listener: RegistrationListener, registration: AppRegistration) -> None:
        try:
            listener(registration)
        except Exception:
            self.logger.exception("Registration listener failed for %s", registration.id)
