"""The venue's weekly timetable.

Weekdays are indexed Monday=0 .. Sunday=6.
"""

from dataclasses import dataclass
from datetime import date, timedelta

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

REGULAR_PRICE = "$50"
DISCOUNT_PRICE = "$25"


@dataclass(frozen=True)
class DayInfo:
    hours: str
    special: str
    discount_price: str | None = None
    late_window: str | None = None

    @property
    def late_pricing(self) -> str | None:
        if self.late_window is None:
            return None
        return f"{DISCOUNT_PRICE} ({self.late_window})"


WEEK = (
    DayInfo(hours="12PM-10PM", special="50% OFF", discount_price=DISCOUNT_PRICE),
    DayInfo(hours="12PM-10PM", special="50% OFF", discount_price=DISCOUNT_PRICE),
    DayInfo(hours="12PM-10PM", special="SPEEDSOFT", late_window="7PM-10PM"),
    DayInfo(hours="12PM-10PM", special="FREE RENTAL", late_window="7PM-10PM"),
    DayInfo(hours="12PM-11PM", special="Regular", late_window="8PM-11PM"),
    DayInfo(hours="10AM-12AM", special="Regular", late_window="9PM-12AM"),
    DayInfo(hours="10AM-11PM", special="Regular", late_window="8PM-11PM"),
)


def week_dates(today: date) -> list[date]:
    """The Monday-to-Sunday week containing today."""
    monday = today - timedelta(days=today.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]


def day_info(day: date) -> DayInfo:
    return WEEK[day.weekday()]
