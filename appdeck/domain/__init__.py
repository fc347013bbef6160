"""Domain types shared by the runtime and the host adapters."""

from .errors import (
    AppDeckError,
    CallbackFailed,
    DuplicateApp,
    InvalidConfig,
    OpenFailed,
    UnknownApp,
)
from .models import (
    PHASE_CLOSE,
    PHASE_OPEN,
    PHASE_UPDATE,
    STATE_CLOSED,
    STATE_CLOSING,
    STATE_OPEN,
    STATE_OPENING,
    AppConfig,
    AppRegistration,
)
from .signals import Connection, Signal, Subscription

__all__ = [
    "AppConfig",
    "AppDeckError",
    "AppRegistration",
    "CallbackFailed",
    "Connection",
    "DuplicateApp",
    "InvalidConfig",
    "OpenFailed",
    "PHASE_CLOSE",
    "PHASE_OPEN",
    "PHASE_UPDATE",
    "STATE_CLOSED",
    "STATE_CLOSING",
    "STATE_OPEN",
    "STATE_OPENING",
    "Signal",
    "Subscription",
    "UnknownApp",
]
