"""In-memory host used without a display and in tests.

Nodes form a plain parent/child tree. Destroying a node destroys its whole
subtree and drops every handler attached to the nodes inside it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional

from ..application.context import UiRefs
from ..domain.models import AppRegistration
from ..domain.signals import Signal, Subscription
from .common import NOTIFICATION_SOUNDS, normalize_level
from .sound import SoundPlayer
from .tween import TweenHandle


class HeadlessNode:
    def __init__(self, kind: str, parent: Optional["HeadlessNode"] = None, **props: Any) -> None:
        if parent is not None and parent.destroyed:
            raise RuntimeError(f"Cannot parent {kind} under a destroyed {parent.kind}")
        self.kind = kind
        self.parent = parent
        self.props: dict[str, Any] = dict(props)
        self.children: list[HeadlessNode] = []
        self.destroyed = False
        self._events: dict[str, Signal] = {}
        if parent is not None:
            parent.children.append(self)

    def event(self, name: str) -> Signal:
        if self.destroyed:
            raise RuntimeError(f"{self.kind} node is destroyed")
        signal = self._events.get(name)
        if signal is None:
            signal = self._events[name] = Signal(name)
        return signal

    def fire(self, name: str, *args: Any) -> None:
        signal = self._events.get(name)
        if signal is not None and not self.destroyed:
            signal.fire(*args)

    def click(self) -> None:
        self.fire("activated")

    def configure(self, **props: Any) -> None:
        self.props.update(props)

    def cget(self, key: str) -> Any:
        return self.props.get(key)

    def descendants(self) -> Iterator["HeadlessNode"]:
        for child in self.children:
            yield child
            yield from child.descendants()

    def handler_count(self) -> int:
        return sum(signal.connection_count for signal in self._events.values())

    def destroy(self) -> None:
        if self.destroyed:
            return
        for child in list(self.children):
            child.destroy()
        for signal in self._events.values():
            signal.disconnect_all()
        self._events.clear()
        self.destroyed = True
        if self.parent is not None and self in self.parent.children:
            self.parent.children.remove(self)

    def __repr__(self) -> str:
        state = " destroyed" if self.destroyed else ""
        return f"<HeadlessNode {self.kind}{state} children={len(self.children)}>"


class HeadlessHost:
    def __init__(self) -> None:
        self.app_area = HeadlessNode("app_area")
        self.containers_built = 0
        self.containers_destroyed = 0

    def build_container(self, registration: AppRegistration) -> UiRefs:
        root = HeadlessNode(
            "container",
            self.app_area,
            name=registration.id,
            title=registration.name,
        )
        self.containers_built += 1
        return UiRefs(root)

    def destroy_container(self, ui: UiRefs) -> None:
        root = ui.root
        if root.destroyed:
            return
        root.destroy()
        self.containers_destroyed += 1

    def live_nodes(self) -> list[HeadlessNode]:
        return list(self.app_area.descendants())


class HeadlessUtilityLibrary:
    def __init__(
        self,
        *,
        sound: SoundPlayer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("appdeck")
        self.sound = sound or SoundPlayer(enabled=False, logger=self.logger)
        self.notifications: list[tuple[str, str]] = []
        self.sounds_played: list[str] = []
        self._tweens: list[TweenHandle] = []

    def create_element(self, kind: str, parent: Any, **options: Any) -> HeadlessNode:
        return HeadlessNode(kind, parent, **options)

    def create_button(
        self,
        parent: Any,
        text: str,
        command: Optional[Callable[[], Any]] = None,
        **options: Any,
    ) -> HeadlessNode:
        button = HeadlessNode("button", parent, text=text, **options)
        if command is not None:
            # Owned by the button; destroyed with it.
            button.event("activated").connect(command)
        return button

    def create_label(self, parent: Any, text: str = "", **options: Any) -> HeadlessNode:
        return HeadlessNode("label", parent, text=text, **options)

    def create_grid(self, parent: Any, columns: int = 2, **options: Any) -> HeadlessNode:
        if int(columns) < 1:
            raise ValueError("Grid needs at least one column")
        return HeadlessNode("grid", parent, columns=int(columns), **options)

    def destroy_element(self, node: Any) -> None:
        node.destroy()

    def get_text(self, node: Any) -> str:
        return str(node.props.get("text", ""))

    def set_text(self, node: Any, text: str) -> None:
        node.configure(text=str(text))

    def notify(self, message: str, level: str = "info", duration_ms: Optional[int] = None) -> None:
        level = normalize_level(level)
        self.notifications.append((level, str(message)))
        self.logger.info("Notification [%s]: %s", level, message)
        self.play_sound(NOTIFICATION_SOUNDS[level])

    def tween(
        self,
        node: Any,
        prop: str,
        start: Any,
        end: Any,
        duration: float,
        easing: str = "in_out",
    ) -> Subscription:
        handle = TweenHandle(
            lambda value: node.configure(**{prop: value}),
            start,
            end,
            duration,
            easing=easing,
        )
        node.configure(**{prop: start})
        self._tweens.append(handle)
        return handle

    def advance(self, dt: float) -> None:
        """Step running tweens; the headless frame loop calls this each frame."""
        for handle in list(self._tweens):
            handle.advance(dt)
        self._tweens = [handle for handle in self._tweens if handle.connected]

    @property
    def active_tweens(self) -> int:
        return sum(1 for handle in self._tweens if handle.connected)

    def play_sound(self, name: str) -> bool:
        self.sounds_played.append(name)
        return self.sound.play(name)

    def connect(
        self, source: Any, handler: Callable[..., Any], event: Optional[str] = None
    ) -> Subscription:
        if isinstance(source, Signal):
            return source.connect(handler)
        if isinstance(source, HeadlessNode):
            if not event:
                raise ValueError("Connecting to a node needs an event name")
            return source.event(event).connect(handler)
        raise TypeError(f"Cannot connect to {type(source).__name__}")


class RecordingLauncher:
    """Launcher surface for headless runs: remembers icons and active flags."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("appdeck")
        self.icons: dict[str, AppRegistration] = {}
        self.active: dict[str, bool] = {}

    def app_registered(self, registration: AppRegistration) -> None:
        self.icons[registration.id] = registration
        self.active.setdefault(registration.id, False)
        self.logger.debug(
            "Launcher icon: id=%s name=%s icon=%s tint=%s",
            registration.id,
            registration.name,
            registration.icon,
            registration.icon_color,
        )

    def app_state_changed(self, app_id: str, active: bool) -> None:
        self.active[app_id] = bool(active)
