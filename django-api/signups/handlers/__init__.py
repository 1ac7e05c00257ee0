from signups.handlers.views import (
    CheckInView,
    GuestSignupView,
    PlayerListView,
    ScheduleView,
    SignupCountsView,
)

__all__ = [
    "CheckInView",
    "GuestSignupView",
    "PlayerListView",
    "ScheduleView",
    "SignupCountsView",
]
