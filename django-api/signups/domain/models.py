"""Domain models representing persisted and derived signup state.

These are pure domain objects with no API input rules.
Django ORM models are in signups/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


@dataclass(frozen=True)
class NewSignup:
    """Insert payload for a Signup.

    person_id is absent for guests; sponsor_* are set only when a signed-in
    user registered the guest.
    """

    display_name: str
    date: date
    person_id: str | None = None
    email: str | None = None
    is_guest: bool = False
    sponsor_id: str | None = None
    sponsor_name: str | None = None
    sponsor_email: str | None = None


@dataclass(frozen=True)
class Signup:
    """Domain representation of a Signup."""

    id: str
    display_name: str
    date: date
    created_at: datetime
    person_id: str | None = None
    email: str | None = None
    is_guest: bool = False
    sponsor_id: str | None = None
    sponsor_name: str | None = None
    sponsor_email: str | None = None


class SignupState(Enum):
    """Where a visitor stands for one date. Derived, never stored."""

    NOT_SIGNED_UP = "NOT_SIGNED_UP"
    SIGNED_UP = "SIGNED_UP"
    GUEST_LIMIT_REACHED = "GUEST_LIMIT_REACHED"
    PAST = "PAST"


class PromptAction(Enum):
    """What a prompt button does. Each resolves to a redirect for a date."""

    GUEST_SIGNUP = "GUEST_SIGNUP"
    SIGN_IN = "SIGN_IN"
    BROWSE_CLIPS = "BROWSE_CLIPS"
    DISMISS = "DISMISS"

    def target(self, day: date, sign_in_url: str) -> str | None:
        if self is PromptAction.GUEST_SIGNUP:
            return f"/guest-signup?date={day.isoformat()}"
        if self is PromptAction.SIGN_IN:
            return sign_in_url
        if self is PromptAction.BROWSE_CLIPS:
            return f"/clips?date={day.isoformat()}"
        return None


@dataclass(frozen=True)
class Idle:
    """No prompt is showing."""


@dataclass(frozen=True)
class ConfirmPrompt:
    message: str
    on_confirm: PromptAction
    on_cancel: PromptAction


Prompt = Idle | ConfirmPrompt


class CheckInStatus(Enum):
    SIGNED_UP = "SIGNED_UP"
    CONFIRM = "CONFIRM"
    REFUSED = "REFUSED"
    PAST = "PAST"


@dataclass(frozen=True)
class CheckInOutcome:
    """Result of asking to check in for a date.

    count is the refreshed signup count, present only after a write.
    link is the read-only destination offered for past dates.
    """

    status: CheckInStatus
    date: date
    prompt: Prompt = Idle()
    message: str = ""
    count: int | None = None
    link: str | None = None


@dataclass(frozen=True)
class GameDay:
    """One column of the weekly board."""

    date: date
    weekday: str
    hours: str
    special: str
    price: str
    discount_price: str | None
    late_pricing: str | None
    count: int
    state: SignupState
