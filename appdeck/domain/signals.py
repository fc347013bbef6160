"""Disposable subscription handles and a minimal in-process event source."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Subscription(Protocol):
    """A handle that can be disconnected; extra disconnects are no-ops."""

    @property
    def connected(self) -> bool: ...

    def disconnect(self) -> None: ...


class Connection:
    """Handle returned by :meth:`Signal.connect`."""

    __slots__ = ("_signal", "_handler", "_connected")

    def __init__(self, signal: "Signal", handler: Callable[..., Any]) -> None:
        self._signal = signal
        self._handler = handler
        self._connected = True

    @property
    def connected(self) -> bool:
        return self._connected

    def disconnect(self) -> None:
        if not self._connected:
            return
        self._connected = False
        self._signal._detach(self)

    def __repr__(self) -> str:
        state = "connected" if self._connected else "disconnected"
        return f"<Connection {self._signal.name or '?'} {state}>"


class Signal:
    """Fires handlers in connection order."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._connections: list[Connection] = []

    def connect(self, handler: Callable[..., Any]) -> Connection:
        if not callable(handler):
            raise TypeError("Signal handler must be callable")
        connection = Connection(self, handler)
        self._connections.append(connection)
        return connection

    def fire(self, *args: Any, **kwargs: Any) -> None:
        # Handlers disconnected mid-fire are skipped.
        for connection in list(self._connections):
            if connection.connected:
                connection._handler(*args, **kwargs)

    def disconnect_all(self) -> None:
        for connection in list(self._connections):
            connection.disconnect()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    def _detach(self, connection: Connection) -> None:
        try:
            self._connections.remove(connection)
        except ValueError:
            pass
