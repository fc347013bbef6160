"""Boundaries to the host UI, the utility library and the launcher surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

from ..domain.signals import Subscription

if TYPE_CHECKING:
    from ..domain.models import AppRegistration
    from .context import UiRefs


class HostUiPort(Protocol):
    """Creates and destroys the sandboxed per-app container subtree."""

    def build_container(self, registration: "AppRegistration") -> "UiRefs":
        """Create the container under the shared app area and return its named refs."""

    def destroy_container(self, ui: "UiRefs") -> None:
        """Recursively destroy the container; calling twice is harmless."""


class UtilityLibrary(Protocol):
    """Stateless helpers apps use to build UI and hook events."""

    def create_element(self, kind: str, parent: Any, **options: Any) -> Any: ...

    def create_button(
        self, parent: Any, text: str, command: Optional[Callable[[], Any]] = None, **options: Any
    ) -> Any: ...

    def create_label(self, parent: Any, text: str = "", **options: Any) -> Any: ...

    def create_grid(self, parent: Any, columns: int = 2, **options: Any) -> Any: ...

    def destroy_element(self, node: Any) -> None: ...

    def get_text(self, node: Any) -> str: ...

    def set_text(self, node: Any, text: str) -> None: ...

    def notify(self, message: str, level: str = "info", duration_ms: Optional[int] = None) -> None: ...

    def tween(
        self,
        node: Any,
        prop: str,
        start: Any,
        end: Any,
        duration: float,
        easing: str = "in_out",
    ) -> Subscription: ...

    def play_sound(self, name: str) -> bool: ...

    def connect(
        self, source: Any, handler: Callable[..., Any], event: Optional[str] = None
    ) -> Subscription: ...


class LauncherPort(Protocol):
    """Icon surface that shows one launch affordance per registered app."""

    def app_registered(self, registration: "AppRegistration") -> None: ...

    def app_state_changed(self, app_id: str, active: bool) -> None: ...
