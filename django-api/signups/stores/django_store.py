"""Django ORM implementation of the SignupStore.

Per-date counts are cached; signals.py drops a date's entry whenever a signup
for that date is saved or deleted.
"""

import logging
from collections.abc import Sequence
from datetime import date

from django.conf import settings
from django.core.cache import cache
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count

from signups import models
from signups.domain import NewSignup, Signup
from signups.domain.errors import DuplicateSignupError, SignupStoreError
from signups.stores.interfaces import SignupStore

logger = logging.getLogger(__name__)


def count_cache_key(day: date) -> str:
    return f"signups:count:{day.isoformat()}"


def to_domain(row: models.Signup) -> Signup:
    return Signup(
        id=str(row.id),
        display_name=row.display_name,
        date=row.date,
        created_at=row.created_at,
        person_id=row.person_id,
        email=row.email,
        is_guest=row.is_guest,
        sponsor_id=row.sponsor_id,
        sponsor_name=row.sponsor_name,
        sponsor_email=row.sponsor_email,
    )


class DjangoSignupStore(SignupStore):
    """Signup store backed by the signups table."""

    def insert(self, signup: NewSignup) -> Signup:
        try:
            with transaction.atomic():
                row = models.Signup.objects.create(
                    person_id=signup.person_id,
                    display_name=signup.display_name,
                    email=signup.email,
                    is_guest=signup.is_guest,
                    sponsor_id=signup.sponsor_id,
                    sponsor_name=signup.sponsor_name,
                    sponsor_email=signup.sponsor_email,
                    date=signup.date,
                )
        except IntegrityError as exc:
            raise DuplicateSignupError() from exc
        except DatabaseError as exc:
            logger.exception("signup insert failed for %s", signup.date)
            raise SignupStoreError() from exc
        return to_domain(row)

    def count_by_date(self, day: date) -> int:
        return self.counts_by_dates([day])[0]

    def counts_by_dates(self, days: Sequence[date]) -> list[int]:
        keys = {day: count_cache_key(day) for day in days}
        cached = cache.get_many(list(keys.values()))
        missing = [day for day in days if keys[day] not in cached]
        if missing:
            try:
                rows = (
                    models.Signup.objects.filter(date__in=missing)
                    .values("date")
                    .annotate(total=Count("id"))
                )
                fresh = {row["date"]: row["total"] for row in rows}
            except DatabaseError as exc:
                raise SignupStoreError() from exc
            found = {keys[day]: fresh.get(day, 0) for day in missing}
            cache.set_many(found, timeout=settings.SIGNUPS["COUNT_CACHE_TIMEOUT"])
            cached.update(found)
        return [cached[keys[day]] for day in days]

    def all(self) -> list[Signup]:
        try:
            return [to_domain(row) for row in models.Signup.objects.all()]
        except DatabaseError as exc:
            raise SignupStoreError() from exc

    def find_member_signup(self, person_id: str, day: date) -> Signup | None:
        try:
            row = models.Signup.objects.filter(
                person_id=person_id, date=day, is_guest=False
            ).first()
        except DatabaseError as exc:
            raise SignupStoreError() from exc
        return to_domain(row) if row is not None else None
