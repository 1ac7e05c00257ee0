"""In-flight write guard keyed by visitor and date.

cache.add is atomic on every Django cache backend, so only one request can
hold a key at a time. The key expires after the write timeout, which also
bounds how long a stuck write can block the visitor. Each hold stores its own
token, so a hold that outlived its key never releases a newer holder's slot.
"""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

from django.core.cache import cache

from signups.domain.errors import CheckInInProgressError


class InFlightGuard:
    def __init__(self, timeout: int) -> None:
        self._timeout = timeout

    @staticmethod
    def key(actor: str, day: date) -> str:
        return f"signups:inflight:{actor}:{day.isoformat()}"

    @contextmanager
    def hold(self, actor: str, day: date) -> Iterator[None]:
        """Hold the (actor, day) slot for the duration of the block.

        Raises:
            CheckInInProgressError: If another request holds the slot.
        """
        key = self.key(actor, day)
        token = uuid.uuid4().hex
        if not cache.add(key, token, timeout=self._timeout):
            raise CheckInInProgressError()
        try:
            yield
        finally:
            if cache.get(key) == token:
                cache.delete(key)
