"""Application layer: app registry, lifecycle and update dispatch."""

from .bootstrap import RuntimeServices, initialize_runtime_services
from .context import AppContext, AppUtils, ContextBuilder, UiRefs
from .failure_boundary import FailureBoundary, format_failure, hooks_reporter
from .lifecycle import AppInstance, LifecycleManager
from .ports import HostUiPort, LauncherPort, UtilityLibrary
from .registry import AppRegistry
from .resource_tracker import ResourceTracker
from .scheduler import UpdateScheduler
from .shared_state import SharedState
from .ui_hooks import UiHooks, logging_ui_hooks, notification_ui_hooks

__all__ = [
    "AppContext",
    "AppInstance",
    "AppRegistry",
    "AppUtils",
    "ContextBuilder",
    "FailureBoundary",
    "HostUiPort",
    "LauncherPort",
    "LifecycleManager",
    "ResourceTracker",
    "RuntimeServices",
    "SharedState",
    "UiHooks",
    "UiRefs",
    "UpdateScheduler",
    "UtilityLibrary",
    "format_failure",
    "hooks_reporter",
    "initialize_runtime_services",
    "logging_ui_hooks",
    "notification_ui_hooks",
]
