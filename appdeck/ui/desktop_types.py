"""Desktop shell contract shared by the windowed and headless hosts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..application.bootstrap import RuntimeServices


class DesktopApp(Protocol):
    """Owns one set of runtime services and feeds it frames."""

    title: str
    services: Optional["RuntimeServices"]

    def launch(self) -> None:
        """Run the frame loop until the shell closes or its frame budget is spent."""
