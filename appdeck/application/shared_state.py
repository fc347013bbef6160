"""Process-wide key/value store visible to every app instance."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Iterator, Mapping


class SharedState(MutableMapping):
    """Mutable mapping that also allows attribute access (``shared.theme``).

    One instance is created at startup and injected into every context.
    There is no locking: all callbacks run on the host update thread.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        object.__setattr__(self, "_values", dict(initial or {}))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        try:
            return object.__getattribute__(self, "_values")[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self._values[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def snapshot(self) -> dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"SharedState({self._values!r})"
