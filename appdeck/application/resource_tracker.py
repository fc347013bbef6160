"""Per-instance bookkeeping for subscriptions that must be released on close."""

from __future__ import annotations

import logging
from typing import Any

from ..domain.signals import Subscription


def _is_connected(handle: Any) -> bool:
    return bool(handle.connected)


class ResourceTracker:
    """Records subscription handles and disconnects them exactly once.

    UI nodes are not recorded here: anything parented under the instance
    container is destroyed together with the container subtree.
    """

    def __init__(self, owner: str, logger: logging.Logger | None = None) -> None:
        self.owner = owner
        self.logger = logger or logging.getLogger("appdeck")
        self._handles: list[Subscription] = []
        self._handle_ids: set[int] = set()
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    @property
    def tracked(self) -> tuple[Subscription, ...]:
        return tuple(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, handle: object) -> bool:
        return id(handle) in self._handle_ids

    def track(self, handle: Subscription) -> Subscription:
        """Record ``handle`` and return it unchanged."""
        if not callable(getattr(handle, "disconnect", None)) or not hasattr(handle, "connected"):
            raise TypeError(
                f"Cannot track {type(handle).__name__}: subscription handles need "
                "connected and disconnect()"
            )
        if self._released:
            # The owning instance is gone; nothing would ever release this handle.
            self.logger.warning(
                "Subscription tracked after %s closed; disconnecting immediately", self.owner
            )
            self._disconnect(handle)
            return handle
        key = id(handle)
        if key not in self._handle_ids:
            self._prune()
            self._handle_ids.add(key)
            self._handles.append(handle)
        return handle

    def release_all(self) -> int:
        """Disconnect every recorded handle in recording order."""
        handles = self._handles
        self._handles = []
        self._handle_ids = set()
        self._released = True
        released = 0
        for handle in handles:
            if self._disconnect(handle):
                released += 1
        if handles:
            self.logger.debug(
                "Released subscriptions for %s: tracked=%s disconnected=%s",
                self.owner,
                len(handles),
                released,
            )
        return released

    def _prune(self) -> None:
        # Finished tweens and manually disconnected handles need no release.
        live = [handle for handle in self._handles if _is_connected(handle)]
        if len(live) != len(self._handles):
            self._handles = live
            self._handle_ids = {id(handle) for handle in live}

    def _disconnect(self, handle: Subscription) -> bool:
        try:
            if not _is_connected(handle):
                return False
            handle.disconnect()
        except Exception:
            self.logger.exception("Failed to disconnect %r owned by %s", handle, self.owner)
            return False
        return True
