"""AppDeck: host runtime for small apps sharing one desktop surface."""

from .application import (
    AppContext,
    AppInstance,
    AppRegistry,
    LifecycleManager,
    ResourceTracker,
    SharedState,
    UpdateScheduler,
    initialize_runtime_services,
)
from .domain import (
    AppConfig,
    CallbackFailed,
    DuplicateApp,
    InvalidConfig,
    OpenFailed,
    Signal,
    UnknownApp,
)

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "AppContext",
    "AppInstance",
    "AppRegistry",
    "CallbackFailed",
    "DuplicateApp",
    "InvalidConfig",
    "LifecycleManager",
    "OpenFailed",
    "ResourceTracker",
    "SharedState",
    "Signal",
    "UnknownApp",
    "UpdateScheduler",
    "initialize_runtime_services",
]
