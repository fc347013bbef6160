"""Shared fixtures: a recording logger, a manual clock and a headless runtime."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from appdeck.application.bootstrap import initialize_runtime_services
from appdeck.application.ui_hooks import notification_ui_hooks
from appdeck.config import HostConfig
from appdeck.ui.headless import HeadlessHost, HeadlessUtilityLibrary, RecordingLauncher


class _Logger:
    def __init__(self):
        self.debugs = []
        self.infos = []
        self.warnings = []
        self.errors = []
        self.exceptions = []

    def debug(self, message, *args):
        self.debugs.append(message % args if args else message)

    def info(self, message, *args):
        self.infos.append(message % args if args else message)

    def warning(self, message, *args):
        self.warnings.append(message % args if args else message)

    def error(self, message, *args):
        self.errors.append(message % args if args else message)

    def exception(self, message, *args):
        self.exceptions.append(message % args if args else message)


class _Clock:
    def __init__(self, now=10.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, dt):
        self.now += dt


def build_config(tmp_path: Path, **overrides) -> HostConfig:
    log_dir = tmp_path / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    values = {
        "log_level": "INFO",
        "file_log_level": "DEBUG",
        "log_dir": str(log_dir),
        "log_file": str(log_dir / "appdeck.log"),
        "sound_enabled": False,
    }
    values.update(overrides)
    return HostConfig(**values)


@pytest.fixture
def logger():
    return _Logger()


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        return build_config(tmp_path, **overrides)

    return _make


@pytest.fixture
def host_config(make_config):
    return make_config()


@pytest.fixture
def runtime(logger, host_config):
    clock = _Clock()
    host = HeadlessHost()
    library = HeadlessUtilityLibrary(logger=logger)
    launcher = RecordingLauncher(logger)
    services = initialize_runtime_services(
        config=host_config,
        logger=logger,
        host=host,
        library=library,
        ui_hooks=notification_ui_hooks(library.notify),
        launcher=launcher,
        clock=clock,
    )
    return SimpleNamespace(
        services=services,
        registry=services.registry,
        lifecycle=services.lifecycle,
        scheduler=services.scheduler,
        shared=services.shared_state,
        host=host,
        library=library,
        launcher=launcher,
        logger=logger,
        clock=clock,
    )
