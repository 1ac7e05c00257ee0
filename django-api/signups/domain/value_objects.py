"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Self


@dataclass(frozen=True, order=True)
class GameDate:
    """A calendar day at the venue, written YYYY-MM-DD on the wire."""

    value: date

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not isinstance(value, str) or len(value) != 10:
            raise ValueError("Game date must be YYYY-MM-DD")
        return cls(value=datetime.strptime(value, "%Y-%m-%d").date())

    def __str__(self) -> str:
        return self.value.isoformat()
