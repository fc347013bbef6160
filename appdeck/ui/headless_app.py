"""Bounded frame loop over the in-memory host, for machines without a display."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..application.bootstrap import RuntimeServices, initialize_runtime_services
from ..application.registry import AppRegistry
from ..application.ui_hooks import notification_ui_hooks
from ..config import HostConfig
from ..domain.errors import OpenFailed
from .desktop_types import DesktopApp
from .headless import HeadlessHost, HeadlessUtilityLibrary, RecordingLauncher
from .sound import SoundPlayer

HEADLESS_FRAMES = 120

AppRegistrar = Callable[[AppRegistry], object]


class HeadlessDesktopApp(DesktopApp):
    """Opens every registered app, runs a fixed number of frames, closes everything."""

    def __init__(
        self,
        *,
        config: HostConfig,
        logger: logging.Logger,
        register_apps: Optional[AppRegistrar] = None,
        frames: int = HEADLESS_FRAMES,
    ) -> None:
        self.config = config
        self.logger = logger
        self.title = f"{config.window_title} (headless)"
        self.register_apps = register_apps
        self.frames = max(0, int(frames))
        self.host = HeadlessHost()
        self.library = HeadlessUtilityLibrary(
            sound=SoundPlayer(enabled=config.sound_enabled, logger=logger),
            logger=logger,
        )
        self.launcher = RecordingLauncher(logger)
        # Simulated time: advances by one frame interval per frame.
        self.elapsed = 0.0
        self.services: RuntimeServices = initialize_runtime_services(
            config=config,
            logger=logger,
            host=self.host,
            library=self.library,
            ui_hooks=notification_ui_hooks(self.library.notify),
            launcher=self.launcher,
            clock=self._clock,
        )
        if self.register_apps is not None:
            self.register_apps(self.services.registry)

    def launch(self) -> None:
        lifecycle = self.services.lifecycle
        opened = 0
        for registration in self.services.registry.list():
            if not isinstance(lifecycle.open(registration.id), OpenFailed):
                opened += 1
        dt = self.config.frame_interval_ms / 1000.0
        for _ in range(self.frames):
            self.elapsed += dt
            self.services.scheduler.tick(dt)
            self.library.advance(dt)
        closed = lifecycle.close_all()
        self.logger.info(
            "Headless run finished: apps=%s opened=%s frames=%s closed=%s live_nodes=%s",
            len(self.services.registry),
            opened,
            self.frames,
            closed,
            len(self.host.live_nodes()),
        )

    def _clock(self) -> float:
        return self.elapsed
