"""Runtime assembly: registry, lifecycle, scheduler and shared state."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import HostConfig
from .context import ContextBuilder
from .failure_boundary import FailureBoundary, hooks_reporter
from .lifecycle import LifecycleManager
from .ports import HostUiPort, LauncherPort, UtilityLibrary
from .registry import AppRegistry
from .scheduler import UpdateScheduler
from .shared_state import SharedState
from .ui_hooks import UiHooks


@dataclass(frozen=True)
class RuntimeServices:
    registry: AppRegistry
    lifecycle: LifecycleManager
    scheduler: UpdateScheduler
    shared_state: SharedState
    boundary: FailureBoundary
    ui_hooks: UiHooks
    host: HostUiPort
    library: UtilityLibrary
    launcher: Optional[LauncherPort]


def initialize_runtime_services(
    *,
    config: HostConfig,
    logger: logging.Logger,
    host: HostUiPort,
    library: UtilityLibrary,
    ui_hooks: UiHooks,
    launcher: Optional[LauncherPort] = None,
    shared_state: Optional[SharedState] = None,
    clock: Callable[[], float] = time.perf_counter,
) -> RuntimeServices:
    """Construct the runtime once per process and return the service bundle."""
    shared_state = shared_state if shared_state is not None else SharedState()
    registry = AppRegistry(logger)
    if launcher is not None:
        registry.add_listener(launcher.app_registered)
    boundary = FailureBoundary(logger, hooks_reporter(ui_hooks))
    lifecycle = LifecycleManager(
        registry,
        host,
        ContextBuilder(shared_state, library),
        boundary,
        launcher=launcher,
        logger=logger,
        clock=clock,
    )
    scheduler = UpdateScheduler(
        lifecycle,
        max_consecutive_failures=config.max_update_failures,
        max_frame_delta=config.max_frame_delta,
        logger=logger,
    )
    logger.debug(
        "Runtime ready: max_update_failures=%s max_frame_delta=%s",
        config.max_update_failures,
        config.max_frame_delta,
    )
    return RuntimeServices(
        registry=registry,
        lifecycle=lifecycle,
        scheduler=scheduler,
        shared_state=shared_state,
        boundary=boundary,
        ui_hooks=ui_hooks,
        host=host,
        library=library,
        launcher=launcher,
    )
