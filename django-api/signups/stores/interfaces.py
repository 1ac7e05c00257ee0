"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date

from signups.domain import NewSignup, Signup


class SignupStore(ABC):
    """Interface for signup persistence operations.

    insert is not idempotent: callers must check for an existing member
    signup first.
    """

    @abstractmethod
    def insert(self, signup: NewSignup) -> Signup:
        """Persist a signup and return it.

        Raises:
            DuplicateSignupError: If the backend enforces member uniqueness.
            SignupStoreError: If the write fails.
        """
        ...

    @abstractmethod
    def count_by_date(self, day: date) -> int:
        """Return the number of signups (members and guests) for day."""
        ...

    @abstractmethod
    def counts_by_dates(self, days: Sequence[date]) -> list[int]:
        """Return one count per day, in the order given."""
        ...

    @abstractmethod
    def all(self) -> list[Signup]:
        """Return every signup, guests included."""
        ...

    @abstractmethod
    def find_member_signup(self, person_id: str, day: date) -> Signup | None:
        """Return the non-guest signup for person_id on day, if any."""
        ...
