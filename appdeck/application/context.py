"""Per-callback context handed to app callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from ..domain.signals import Subscription
from .ports import UtilityLibrary
from .resource_tracker import ResourceTracker
from .shared_state import SharedState

if TYPE_CHECKING:
    from .lifecycle import AppInstance


class UiRefs:
    """Named UI references pre-created with the instance container.

    ``root`` is the container itself. Hosts may add more names (``content``,
    ``title``); ``content`` falls back to ``root``.
    """

    def __init__(self, root: Any, **named: Any) -> None:
        named.setdefault("content", root)
        self._refs: dict[str, Any] = {"root": root, **named}

    def __getattr__(self, name: str) -> Any:
        refs = self.__dict__.get("_refs", {})
        if name in refs:
            return refs[name]
        raise AttributeError(name)

    def __getitem__(self, name: str) -> Any:
        return self._refs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._refs

    def names(self) -> tuple[str, ...]:
        return tuple(self._refs)


class AppUtils:
    """Utility library facade whose resource-creating calls are tracked per instance."""

    def __init__(self, library: UtilityLibrary, tracker: ResourceTracker) -> None:
        self._library = library
        self._tracker = tracker

    def connect(
        self, source: Any, handler: Callable[..., Any], event: Optional[str] = None
    ) -> Subscription:
        return self._tracker.track(self._library.connect(source, handler, event))

    def track(self, handle: Subscription) -> Subscription:
        """Hand over a subscription created elsewhere so it is released on close."""
        return self._tracker.track(handle)

    def tween(
        self,
        node: Any,
        prop: str,
        start: Any,
        end: Any,
        duration: float,
        easing: str = "in_out",
    ) -> Subscription:
        return self._tracker.track(
            self._library.tween(node, prop, start, end, duration, easing=easing)
        )

    def create_element(self, kind: str, parent: Any, **options: Any) -> Any:
        return self._library.create_element(kind, parent, **options)

    def create_button(
        self, parent: Any, text: str, command: Optional[Callable[[], Any]] = None, **options: Any
    ) -> Any:
        return self._library.create_button(parent, text, command, **options)

    def create_label(self, parent: Any, text: str = "", **options: Any) -> Any:
        return self._library.create_label(parent, text, **options)

    def create_grid(self, parent: Any, columns: int = 2, **options: Any) -> Any:
        return self._library.create_grid(parent, columns, **options)

    def destroy_element(self, node: Any) -> None:
        self._library.destroy_element(node)

    def get_text(self, node: Any) -> str:
        return self._library.get_text(node)

    def set_text(self, node: Any, text: str) -> None:
        self._library.set_text(node, text)

    def notify(self, message: str, level: str = "info", duration_ms: Optional[int] = None) -> None:
        self._library.notify(message, level, duration_ms)

    def play_sound(self, name: str) -> bool:
        return self._library.play_sound(name)


@dataclass
class AppContext:
    app_id: str
    ui: UiRefs
    state: dict[str, Any]
    shared: SharedState
    utils: AppUtils
    delta_time: Optional[float] = None


class ContextBuilder:
    def __init__(self, shared: SharedState, library: UtilityLibrary) -> None:
        self.shared = shared
        self.library = library

    def build(self, instance: "AppInstance", delta_time: Optional[float] = None) -> AppContext:
        if delta_time is not None and delta_time < 0:
            raise ValueError("delta_time must be non-negative")
        return AppContext(
            app_id=instance.app_id,
            ui=instance.ui,
            state=instance.state,
            shared=self.shared,
            utils=AppUtils(self.library, instance.tracker),
            delta_time=delta_time,
        )
