"""Isolated failure boundary around every app callback invocation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..domain.errors import CallbackFailed
from ..domain.models import PHASE_CLOSE, PHASE_OPEN, PHASE_UPDATE
from .ui_hooks import UiHooks

FailureReporter = Callable[[CallbackFailed], None]

_PHASE_LABELS = {
    PHASE_OPEN: "opening",
    PHASE_CLOSE: "closing",
    PHASE_UPDATE: "updating",
}


def format_failure(failure: CallbackFailed) -> str:
    phase = _PHASE_LABELS.get(failure.phase, failure.phase)
    return f"'{failure.app_id}' failed while {phase}: {failure.error}"


def hooks_reporter(hooks: UiHooks) -> FailureReporter:
    def _report(failure: CallbackFailed) -> None:
        hooks.error(format_failure(failure))

    return _report


class FailureBoundary:
    """Runs a callback and converts any exception into a reported ``CallbackFailed``."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        reporter: Optional[FailureReporter] = None,
    ) -> None:
        self.logger = logger or logging.getLogger("appdeck")
        self.reporter = reporter
        self.failure_count = 0

    def invoke(
        self,
        app_id: str,
        phase: str,
        callback: Callable[[Any], Any],
        context: Any,
    ) -> Optional[CallbackFailed]:
        try:
            callback(context)
        except Exception as exc:
            failure = CallbackFailed(app_id, phase, exc)
            self.failure_count += 1
            self.logger.exception("App callback failed: app=%s phase=%s", app_id, phase)
            self._report(failure)
            return failure
        return None

    def _report(self, failure: CallbackFailed) -> None:
        if self.reporter is None:
            return
        try:
            self.reporter(failure)
        except Exception:
            self.logger.exception(
                "Failure reporter raised: app=%s phase=%s", failure.app_id, failure.phase
            )
