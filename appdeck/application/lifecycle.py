"""Per-app state machine: closed -> opening -> open -> closing -> closed."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

from ..domain.errors import CallbackFailed, OpenFailed
from ..domain.models import (
    LIVE_STATES,
    PHASE_CLOSE,
    PHASE_OPEN,
    PHASE_UPDATE,
    STATE_CLOSED,
    STATE_CLOSING,
    STATE_OPEN,
    STATE_OPENING,
    AppRegistration,
)
from .context import ContextBuilder, UiRefs
from .failure_boundary import FailureBoundary
from .ports import HostUiPort, LauncherPort
from .registry import AppRegistry
from .resource_tracker import ResourceTracker


class AppInstance:
    """Runtime record for one open attempt of a registration."""

    def __init__(
        self,
        registration: AppRegistration,
        tracker: ResourceTracker,
        ui: UiRefs,
    ) -> None:
        self.registration = registration
        self.tracker = tracker
        self.ui = ui
        self.state: dict[str, Any] = {}
        self.state_name = STATE_CLOSED
        self.update_failures = 0
        self.update_count = 0
        self.opened_at: Optional[float] = None

    @property
    def app_id(self) -> str:
        return self.registration.id

    @property
    def is_open(self) -> bool:
        return self.state_name == STATE_OPEN

    def __repr__(self) -> str:
        return f"<AppInstance {self.app_id} {self.state_name}>"


class LifecycleManager:
    """Opens and closes app instances; at most one live instance per app."""

    def __init__(
        self,
        registry: AppRegistry,
        host: HostUiPort,
        contexts: ContextBuilder,
        boundary: FailureBoundary,
        *,
        launcher: Optional[LauncherPort] = None,
        logger: logging.Logger | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.registry = registry
        self.clock = clock
        self.host = host
        self.contexts = contexts
        self.boundary = boundary
        self.launcher = launcher
        self.logger = logger or logging.getLogger("appdeck")
        # Insertion order doubles as opening order.
        self._instances: dict[str, AppInstance] = {}

    def open(self, app_id: str) -> AppInstance | OpenFailed:
        registration = self.registry.get(app_id)
        existing = self._instances.get(registration.id)
        if existing is not None:
            if existing.state_name in LIVE_STATES:
                return existing
            self.logger.warning("Open ignored while %s is closing", registration.id)
            return OpenFailed(registration.id, "closing")

        ui = self.host.build_container(registration)
        instance = AppInstance(
            registration,
            ResourceTracker(registration.id, self.logger),
            ui,
        )
        instance.state_name = STATE_OPENING
        self._instances[registration.id] = instance
        self.logger.debug("Opening app: %s", registration.id)

        failure = self.boundary.invoke(
            registration.id,
            PHASE_OPEN,
            registration.on_open,
            self.contexts.build(instance),
        )
        if failure is not None:
            self.close(registration.id)
            return OpenFailed(registration.id, "on_open failed", failure)
        if self._instances.get(registration.id) is not instance:
            return OpenFailed(registration.id, "closed during open")

        instance.state_name = STATE_OPEN
        instance.opened_at = self.clock()
        self.logger.info("Opened app: %s", registration.id)
        if self.launcher is not None:
            self.launcher.app_state_changed(registration.id, True)
        return instance

    def close(self, app_id: str) -> bool:
        """Tear down the live instance of ``app_id``; False when nothing was open."""
        registration = self.registry.get(app_id)
        instance = self._instances.get(registration.id)
        if instance is None or instance.state_name == STATE_CLOSING:
            return False
        was_open = instance.state_name == STATE_OPEN
        instance.state_name = STATE_CLOSING
        self.logger.debug("Closing app: %s", registration.id)
        try:
            if registration.on_close is not None:
                self.boundary.invoke(
                    registration.id,
                    PHASE_CLOSE,
                    registration.on_close,
                    self.contexts.build(instance),
                )
        finally:
            self._teardown(instance)
        self.logger.info("Closed app: %s", registration.id)
        if was_open and self.launcher is not None:
            self.launcher.app_state_changed(registration.id, False)
        return True

    def toggle(self, app_id: str) -> AppInstance | OpenFailed | None:
        if self.is_open(app_id):
            self.close(app_id)
            return None
        return self.open(app_id)

    def close_all(self) -> int:
        closed = 0
        for app_id in reversed(list(self._instances)):
            if self.close(app_id):
                closed += 1
        return closed

    def is_open(self, app_id: str) -> bool:
        instance = self._instances.get(app_id)
        return instance is not None and instance.state_name == STATE_OPEN

    def get_instance(self, app_id: str) -> Optional[AppInstance]:
        return self._instances.get(app_id)

    def is_current(self, instance: AppInstance) -> bool:
        return self._instances.get(instance.app_id) is instance

    def open_instances(self) -> list[AppInstance]:
        return [
            instance for instance in self._instances.values() if instance.state_name == STATE_OPEN
        ]

    def dispatch_update(self, instance: AppInstance, delta_time: float) -> Optional[CallbackFailed]:
        callback = instance.registration.on_update
        if callback is None:
            return None
        instance.update_count += 1
        return self.boundary.invoke(
            instance.app_id,
            PHASE_UPDATE,
            callback,
            self.contexts.build(instance, delta_time=delta_time),
        )

    def _teardown(self, instance: AppInstance) -> None:
        # Subscriptions may point at nodes in the container, so they go first.
        try:
            instance.tracker.release_all()
            self.host.destroy_container(instance.ui)
        finally:
            instance.state.clear()
            instance.state_name = STATE_CLOSED
            if self._instances.get(instance.app_id) is instance:
                del self._instances[instance.app_id]
