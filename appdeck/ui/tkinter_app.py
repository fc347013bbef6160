"""Tkinter desktop host: launcher dock, app area, toasts and the frame loop."""
from __future__ import annotations

import logging
import time
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..application.bootstrap import RuntimeServices, initialize_runtime_services
from ..application.registry import AppRegistry
from ..application.ui_hooks import notification_ui_hooks
from ..config import HostConfig
from .common import DOCK_BACKGROUND, UI_MUTED, UI_PANEL, UI_SURFACE
from .desktop_types import DesktopApp
from .features import LauncherFeature, NotificationFeature
from .sound import SoundPlayer
from .tk_host import TkHost
from .tk_utility import TkUtilityLibrary

AppRegistrar = Callable[[AppRegistry], object]


class TkinterDesktopApp(DesktopApp):
    def __init__(
        self,
        *,
        config: HostConfig,
        logger: logging.Logger,
        register_apps: Optional[AppRegistrar] = None,
        sd_module=None,
    ) -> None:
        self.config = config
        self.logger = logger
        self.title = config.window_title
        self.register_apps = register_apps
        self.sd_module = sd_module
        self.root: tk.Tk | None = None
        self.dock: tk.Frame | None = None
        self.app_area: ttk.Frame | None = None
        self.notifications: NotificationFeature | None = None
        self.launcher: LauncherFeature | None = None
        self.host: TkHost | None = None
        self.services: RuntimeServices | None = None
        self.frame_job: str | None = None
        self._last_frame_at = 0.0

    def launch(self) -> None:
        self._ensure_root()
        assert self.root is not None
        self.logger.info("Desktop host running: %s", self.title)
        self.root.mainloop()

    def build_for_test(self) -> tk.Tk:
        self._ensure_root()
        assert self.root is not None
        return self.root

    def _ensure_root(self) -> None:
        if self.root is not None:
            return
        root = tk.Tk()
        root.title(self.title)
        root.geometry(f"{self.config.window_width}x{self.config.window_height}")
        root.minsize(480, 320)
        self.root = root
        self._configure_theme()
        self._build_layout()
        self._init_runtime()
        root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._schedule_first_frame()

    def _configure_theme(self) -> None:
        style = ttk.Style(self.root)
        if "clam" in style.theme_names():
            style.theme_use("clam")
        style.configure("AppArea.TFrame", background=UI_SURFACE)
        style.configure("AppWindow.TFrame", background=UI_MUTED)
        style.configure("AppContent.TFrame", background=UI_PANEL)

    def _build_layout(self) -> None:
        assert self.root is not None
        self.dock = tk.Frame(self.root, background=DOCK_BACKGROUND, width=64)
        self.dock.pack(side="left", fill="y")
        self.app_area = ttk.Frame(self.root, style="AppArea.TFrame")
        self.app_area.pack(side="left", fill="both", expand=True)

    def _init_runtime(self) -> None:
        assert self.root is not None and self.dock is not None and self.app_area is not None
        self.notifications = NotificationFeature(
            self.root, default_duration_ms=self.config.notification_duration_ms
        )
        library = TkUtilityLibrary(
            notifier=self.notifications.show,
            sound=SoundPlayer(
                enabled=self.config.sound_enabled,
                logger=self.logger,
                sd_module=self.sd_module,
            ),
            frame_interval_ms=self.config.frame_interval_ms,
            logger=self.logger,
        )
        self.launcher = LauncherFeature(self.dock, logger=self.logger)
        self.host = TkHost(self.app_area, logger=self.logger)
        services = initialize_runtime_services(
            config=self.config,
            logger=self.logger,
            host=self.host,
            library=library,
            ui_hooks=notification_ui_hooks(library.notify),
            launcher=self.launcher,
        )
        self.launcher.bind_activate(services.lifecycle.toggle)
        self.host.on_close_request = services.lifecycle.close
        self.services = services
        if self.register_apps is not None:
            self.register_apps(services.registry)

    def _schedule_first_frame(self) -> None:
        assert self.root is not None
        self._last_frame_at = time.perf_counter()
        self.frame_job = self.root.after(self.config.frame_interval_ms, self._on_frame)

    def _on_frame(self) -> None:
        self.frame_job = None
        if self.root is None or self.services is None:
            return
        now = time.perf_counter()
        dt = now - self._last_frame_at
        self._last_frame_at = now
        try:
            self.services.scheduler.tick(dt)
        finally:
            if self.root is not None:
                self.frame_job = self.root.after(self.config.frame_interval_ms, self._on_frame)

    def _on_close(self) -> None:
        if self.root is not None and self.frame_job is not None:
            try:
                self.root.after_cancel(self.frame_job)
            except tk.TclError:
                pass
        self.frame_job = None
        if self.services is not None:
            closed = self.services.lifecycle.close_all()
            self.logger.info("Shutting down: closed %s app(s)", closed)
        if self.notifications is not None:
            self.notifications.clear()
        if self.root is not None:
            self.root.destroy()
            self.root = None


def create_tkinter_app(
    *,
    config: HostConfig,
    logger: logging.Logger,
    register_apps: Optional[AppRegistrar] = None,
    sd_module=None,
) -> TkinterDesktopApp:
    return TkinterDesktopApp(
        config=config,
        logger=logger,
        register_apps=register_apps,
        sd_module=sd_module,
    )
