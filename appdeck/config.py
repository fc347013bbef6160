"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .utils import env_flag, parse_float_env, parse_int_env, resolve_path


@dataclass(frozen=True)
class HostConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    window_title: str = "AppDeck"
    window_width: int = 960
    window_height: int = 640
    frame_interval_ms: int = 16
    max_frame_delta: float = 0.25
    max_update_failures: int = 3
    notification_duration_ms: int = 3000
    sound_enabled: bool = True
    builtin_apps_enabled: bool = True
    headless: bool = False


def load_config() -> HostConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").strip().upper() or "DEBUG"
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"appdeck_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    window_title = os.getenv("APPDECK_WINDOW_TITLE", "AppDeck").strip() or "AppDeck"
    window_width = parse_int_env("APPDECK_WINDOW_WIDTH", 960, min_value=320, max_value=7680)
    window_height = parse_int_env("APPDECK_WINDOW_HEIGHT", 640, min_value=240, max_value=4320)
    frame_interval_ms = parse_int_env(
        "APPDECK_FRAME_INTERVAL_MS", 16, min_value=1, max_value=1000
    )
    max_frame_delta = parse_float_env(
        "APPDECK_MAX_FRAME_DELTA",
        0.25,
        min_value=0.01,
        max_value=5.0,
    )
    max_update_failures = parse_int_env(
        "APPDECK_MAX_UPDATE_FAILURES", 3, min_value=0, max_value=1000
    )
    notification_duration_ms = parse_int_env(
        "APPDECK_NOTIFY_DURATION_MS",
        3000,
        min_value=250,
        max_value=60000,
    )
    return HostConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        window_title=window_title,
        window_width=window_width,
        window_height=window_height,
        frame_interval_ms=frame_interval_ms,
        max_frame_delta=max_frame_delta,
        max_update_failures=max_update_failures,
        notification_duration_ms=notification_duration_ms,
        sound_enabled=env_flag("APPDECK_SOUND_ENABLED", "1"),
        builtin_apps_enabled=env_flag("APPDECK_BUILTIN_APPS", "1"),
        headless=env_flag("APPDECK_HEADLESS", "0"),
    )
