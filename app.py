"""Desktop entrypoint for AppDeck."""

from __future__ import annotations

import logging

from appdeck.apps import register_builtin_apps
from appdeck.config import HostConfig, load_config
from appdeck.logging_config import setup_logging
from appdeck.ui.desktop_types import DesktopApp
from appdeck.ui.headless_app import HeadlessDesktopApp

CONFIG = load_config()
logger = setup_logging(CONFIG)


def create_desktop_app(
    config: HostConfig | None = None,
    log: logging.Logger | None = None,
) -> DesktopApp:
    config = config or CONFIG
    log = log or logger
    register_apps = register_builtin_apps if config.builtin_apps_enabled else None
    if config.headless:
        return HeadlessDesktopApp(config=config, logger=log, register_apps=register_apps)
    # tkinter is only needed for the windowed host.
    from appdeck.ui.tkinter_app import create_tkinter_app

    return create_tkinter_app(config=config, logger=log, register_apps=register_apps)


def launch() -> None:
    logger.info("Starting AppDeck")
    logger.info("Log file: %s", CONFIG.log_file)
    logger.debug(
        "Host config: LOG_LEVEL=%s FILE_LOG_LEVEL=%s LOG_DIR=%s WINDOW=%sx%s "
        "FRAME_INTERVAL_MS=%s MAX_FRAME_DELTA=%s MAX_UPDATE_FAILURES=%s "
        "NOTIFY_DURATION_MS=%s SOUND_ENABLED=%s BUILTIN_APPS=%s HEADLESS=%s",
        CONFIG.log_level,
        CONFIG.file_log_level,
        CONFIG.log_dir,
        CONFIG.window_width,
        CONFIG.window_height,
        CONFIG.frame_interval_ms,
        CONFIG.max_frame_delta,
        CONFIG.max_update_failures,
        CONFIG.notification_duration_ms,
        CONFIG.sound_enabled,
        CONFIG.builtin_apps_enabled,
        CONFIG.headless,
    )
    desktop_app = create_desktop_app()
    desktop_app.launch()


if __name__ == "__main__":
    launch()
