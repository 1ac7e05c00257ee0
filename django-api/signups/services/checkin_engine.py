"""Check-in engine - decides what happens when a visitor asks to play.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Return domain models or raise domain errors

The invariant this module exists for: at most one member (non-guest) signup
per person and date. A member asking again is offered the guest flow instead.

Known race: the existence check and the insert are separate store calls. The
in-flight guard serialises requests from one visitor; across processes the
database constraint turns a lost race into DuplicateSignupError.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import date

from django.utils import timezone

from common.auth import AuthContext
from common.errors import ValidationFailedError
from signups.domain import (
    CheckInOutcome,
    CheckInStatus,
    ConfirmPrompt,
    GameDate,
    GameDay,
    NewSignup,
    PromptAction,
    Signup,
    SignupState,
)
from signups.domain.errors import DuplicateSignupError, GuestLimitReachedError, InvalidDateError
from signups.domain.schedule import REGULAR_PRICE, WEEKDAY_NAMES, day_info, week_dates
from signups.stores.guest_markers import GuestMarkerStore
from signups.stores.inflight import InFlightGuard
from signups.stores.interfaces import SignupStore

logger = logging.getLogger(__name__)

SPONSOR_FALLBACK_NAME = "Authenticated User"
MEMBER_FALLBACK_NAME = "Player"


def parse_game_date(value: str | None) -> date:
    """Parse a YYYY-MM-DD string.

    Raises:
        InvalidDateError: If value is missing or malformed.
    """
    if not value:
        raise InvalidDateError()
    try:
        return GameDate.from_string(value).value
    except ValueError:
        raise InvalidDateError()


class CheckInEngine:
    """Signup state machine for the weekly game-day board."""

    def __init__(
        self,
        store: SignupStore,
        markers: GuestMarkerStore,
        guard: InFlightGuard,
        sign_in_url: str,
        today: Callable[[], date] = timezone.localdate,
    ) -> None:
        self._store = store
        self._markers = markers
        self._guard = guard
        self._sign_in_url = sign_in_url
        self._today = today

    def state_for(self, auth: AuthContext, day: date) -> SignupState:
        """Derive the visitor's state for day from the store and markers."""
        if day < self._today():
            return SignupState.PAST
        if auth.identity is not None:
            existing = self._store.find_member_signup(auth.identity.id, day)
            return SignupState.SIGNED_UP if existing is not None else SignupState.NOT_SIGNED_UP
        if self._markers.has_marker(day):
            return SignupState.GUEST_LIMIT_REACHED
        return SignupState.NOT_SIGNED_UP

    def request_check_in(self, auth: AuthContext, value: str | None) -> CheckInOutcome:
        """Handle a check-in request for the date written in value.

        Raises:
            InvalidDateError: If value is not a date.
            CheckInInProgressError: If this visitor is already writing for the date.
            SignupStoreError: If the store fails; nothing is retried.
        """
        day = parse_game_date(value)

        if day < self._today():
            return CheckInOutcome(
                status=CheckInStatus.PAST,
                date=day,
                message="This game day has passed",
                link=PromptAction.BROWSE_CLIPS.target(day, self._sign_in_url),
            )

        if auth.identity is None:
            if self._markers.has_marker(day):
                logger.info("refused anonymous check-in for %s: guest limit reached", day)
                return CheckInOutcome(
                    status=CheckInStatus.REFUSED,
                    date=day,
                    message="You have already signed up a guest for this date. Sign in to check in.",
                    link=PromptAction.SIGN_IN.target(day, self._sign_in_url),
                )
            return CheckInOutcome(
                status=CheckInStatus.CONFIRM,
                date=day,
                prompt=ConfirmPrompt(
                    message="Create an account to check in, or continue as a guest?",
                    on_confirm=PromptAction.SIGN_IN,
                    on_cancel=PromptAction.GUEST_SIGNUP,
                ),
            )

        identity = auth.identity
        with self._guard.hold(auth.actor, day):
            if self._store.find_member_signup(identity.id, day) is not None:
                return self._guest_offer(day)
            try:
                self._store.insert(
                    NewSignup(
                        display_name=identity.display_name or identity.email or MEMBER_FALLBACK_NAME,
                        date=day,
                        person_id=identity.id,
                        email=identity.email,
                    )
                )
            except DuplicateSignupError:
                return self._guest_offer(day)

        logger.info("member %s checked in for %s", identity.id, day)
        return CheckInOutcome(
            status=CheckInStatus.SIGNED_UP,
            date=day,
            message="You're checked in",
            count=self._store.count_by_date(day),
        )

    def submit_guest(self, auth: AuthContext, value: str | None, guest_name: str | None) -> Signup:
        """Register a named guest for a date.

        Signed-in visitors sponsor the guest and have no cap. Anonymous
        visitors may register one guest per date per session.

        Raises:
            ValidationFailedError: If the name is blank or the date has passed.
            InvalidDateError: If the date is missing or malformed.
            GuestLimitReachedError: If an anonymous visitor already registered a guest.
            SignupStoreError: If the store fails.
        """
        name = (guest_name or "").strip()
        if not name:
            raise ValidationFailedError("Name is required", field="name")
        day = parse_game_date(value)
        if day < self._today():
            raise ValidationFailedError("This game day has passed", field="date")

        identity = auth.identity
        if identity is None and self._markers.has_marker(day):
            logger.info("refused anonymous guest signup for %s: guest limit reached", day)
            raise GuestLimitReachedError(self._sign_in_url)

        with self._guard.hold(auth.actor, day):
            signup = self._store.insert(
                NewSignup(
                    display_name=name,
                    date=day,
                    is_guest=True,
                    sponsor_id=identity.id if identity else None,
                    sponsor_name=(identity.display_name or SPONSOR_FALLBACK_NAME) if identity else None,
                    sponsor_email=identity.email if identity else None,
                )
            )
            if identity is None:
                self._markers.set_marker(day)

        logger.info("guest signup for %s (sponsored=%s)", day, identity is not None)
        return signup

    def counts(self, values: Sequence[str]) -> list[int]:
        """Signup counts for each date string, in order.

        Raises:
            InvalidDateError: If any value is not a date.
        """
        return self._store.counts_by_dates([parse_game_date(value) for value in values])

    def week_board(self, auth: AuthContext) -> list[GameDay]:
        """The current Monday-start week with counts and the visitor's state."""
        days = week_dates(self._today())
        counts = self._store.counts_by_dates(days)
        board = []
        for day, count in zip(days, counts):
            info = day_info(day)
            board.append(
                GameDay(
                    date=day,
                    weekday=WEEKDAY_NAMES[day.weekday()],
                    hours=info.hours,
                    special=info.special,
                    price=REGULAR_PRICE,
                    discount_price=info.discount_price,
                    late_pricing=info.late_pricing,
                    count=count,
                    state=self.state_for(auth, day),
                )
            )
        return board

    def players(self) -> list[Signup]:
        """Member signups only; guests are not listed publicly."""
        return [signup for signup in self._store.all() if not signup.is_guest]

    def _guest_offer(self, day: date) -> CheckInOutcome:
        return CheckInOutcome(
            status=CheckInStatus.CONFIRM,
            date=day,
            prompt=ConfirmPrompt(
                message="You're already checked in for this date. Sign up a guest instead?",
                on_confirm=PromptAction.GUEST_SIGNUP,
                on_cancel=PromptAction.DISMISS,
            ),
        )
