"""Per-date "already registered a guest" markers for anonymous visitors.

Markers live in the visitor's own storage (the session), so clearing cookies
resets them. That weakness is accepted: the limit is a speed bump, not a cap.
"""

from datetime import date

from common.storage import KeyValueStorage


def marker_key(day: date) -> str:
    return f"guest_signup_{day.isoformat()}"


class GuestMarkerStore:
    def __init__(self, storage: KeyValueStorage) -> None:
        self._storage = storage

    def has_marker(self, day: date) -> bool:
        return bool(self._storage.get(marker_key(day)))

    def set_marker(self, day: date) -> None:
        self._storage.set(marker_key(day), "1")
