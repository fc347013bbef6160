"""Per-frame ``on_update`` dispatch to every open instance."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.models import STATE_OPEN
from .lifecycle import AppInstance, LifecycleManager


class UpdateScheduler:
    """Called once per host frame with the frame delta in seconds.

    An instance's first update gets the time since it entered Open, capped at
    the frame delta; later updates get the frame delta.

    Instances whose ``on_update`` fails ``max_consecutive_failures`` times in
    a row are closed; 0 disables the policy.
    """

    def __init__(
        self,
        lifecycle: LifecycleManager,
        *,
        max_consecutive_failures: int = 3,
        max_frame_delta: Optional[float] = None,
        clock: Optional[Callable[[], float]] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.lifecycle = lifecycle
        self.max_consecutive_failures = max(0, int(max_consecutive_failures))
        self.max_frame_delta = max_frame_delta
        self.logger = logger or logging.getLogger("appdeck")
        # Shares the lifecycle clock so open stamps and frame times compare.
        self._clock = clock if clock is not None else lifecycle.clock
        self._last_time = self._clock()
        self.frame_count = 0

    def tick(self, dt: float | None = None) -> int:
        """Dispatch one frame; returns how many instances were updated."""
        now = self._clock()
        if dt is None:
            dt = now - self._last_time
        self._last_time = now
        dt = max(0.0, float(dt))
        if self.max_frame_delta is not None:
            dt = min(dt, self.max_frame_delta)
        self.frame_count += 1

        # Snapshot first: instances opened by a callback wait for the next frame.
        pending = [
            instance
            for instance in self.lifecycle.open_instances()
            if instance.registration.has_update
        ]
        dispatched = 0
        for instance in pending:
            if instance.state_name != STATE_OPEN or not self.lifecycle.is_current(instance):
                continue
            failure = self.lifecycle.dispatch_update(instance, self._delta_for(instance, dt, now))
            dispatched += 1
            if failure is None:
                instance.update_failures = 0
                continue
            instance.update_failures += 1
            if (
                self.max_consecutive_failures
                and instance.update_failures >= self.max_consecutive_failures
                and self.lifecycle.is_current(instance)
            ):
                self.logger.warning(
                    "Closing %s after %s consecutive update failures",
                    instance.app_id,
                    instance.update_failures,
                )
                self.lifecycle.close(instance.app_id)
        return dispatched

    def _delta_for(self, instance: AppInstance, dt: float, now: float) -> float:
        if instance.update_count or instance.opened_at is None:
            return dt
        return min(dt, max(0.0, now - instance.opened_at))
