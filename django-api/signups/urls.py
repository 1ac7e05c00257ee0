from django.urls import path

from signups.handlers import (
    CheckInView,
    GuestSignupView,
    PlayerListView,
    ScheduleView,
    SignupCountsView,
)

urlpatterns = [
    path("schedule", ScheduleView.as_view(), name="schedule"),
    path("signups/counts", SignupCountsView.as_view(), name="signup-counts"),
    path("signups/check-in", CheckInView.as_view(), name="check-in"),
    path("signups/guests", GuestSignupView.as_view(), name="guest-signup"),
    path("players", PlayerListView.as_view(), name="player-list"),
]
