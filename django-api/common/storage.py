"""Key/value storage local to one browsing context.

The cart and the anonymous guest markers live here. In production this is the
Django session; tests and non-interactive callers use the in-memory or null
variants.
"""

from abc import ABC, abstractmethod
from typing import Any

from django.contrib.sessions.backends.base import SessionBase


class KeyValueStorage(ABC):
    """Interface for a small JSON-safe key/value record."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a JSON-safe value under key."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...


class SessionStorage(KeyValueStorage):
    """Storage backed by the visitor's Django session."""

    def __init__(self, session: SessionBase) -> None:
        self._session = session

    def get(self, key: str) -> Any | None:
        return self._session.get(key)

    def set(self, key: str, value: Any) -> None:
        self._session[key] = value

    def delete(self, key: str) -> None:
        self._session.pop(key, None)


class MemoryStorage(KeyValueStorage):
    """Process-local storage, used by tests and scripts."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class NullStorage(KeyValueStorage):
    """Storage for contexts without persistence; reads are always empty."""

    def get(self, key: str) -> Any | None:
        return None

    def set(self, key: str, value: Any) -> None:
        pass

    def delete(self, key: str) -> None:
        pass
