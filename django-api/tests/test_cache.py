"""Tests for signup count caching.

Run with: pytest tests/test_cache.py -v
"""

from datetime import date

import pytest
from django.core.cache import cache

from signups import models
from signups.domain import NewSignup
from signups.stores.django_store import DjangoSignupStore, count_cache_key

GAME_DAY = date(2025, 6, 13)


@pytest.mark.django_db
class TestCountCache:
    def test_counts_are_cached_per_date(self):
        store = DjangoSignupStore()
        assert store.counts_by_dates([GAME_DAY]) == [0]
        assert cache.get(count_cache_key(GAME_DAY)) == 0

    def test_cached_count_is_served_without_query(self, django_assert_num_queries):
        store = DjangoSignupStore()
        store.count_by_date(GAME_DAY)
        with django_assert_num_queries(0):
            assert store.count_by_date(GAME_DAY) == 0

    def test_missing_dates_are_fetched_in_one_query(self, django_assert_num_queries):
        store = DjangoSignupStore()
        with django_assert_num_queries(1):
            store.counts_by_dates([GAME_DAY, date(2025, 6, 14), date(2025, 6, 15)])

    def test_signup_save_invalidates_count(self, django_capture_on_commit_callbacks):
        store = DjangoSignupStore()
        store.count_by_date(GAME_DAY)
        with django_capture_on_commit_callbacks(execute=True):
            models.Signup.objects.create(display_name="Bob", date=GAME_DAY, is_guest=True)
        assert cache.get(count_cache_key(GAME_DAY)) is None
        assert store.count_by_date(GAME_DAY) == 1

    def test_signup_delete_invalidates_count(self, django_capture_on_commit_callbacks):
        store = DjangoSignupStore()
        with django_capture_on_commit_callbacks(execute=True):
            signup = store.insert(NewSignup(display_name="Bob", date=GAME_DAY, is_guest=True))
        assert store.count_by_date(GAME_DAY) == 1
        with django_capture_on_commit_callbacks(execute=True):
            models.Signup.objects.filter(id=signup.id).delete()
        assert store.count_by_date(GAME_DAY) == 0

    def test_invalidation_waits_for_commit(self, django_capture_on_commit_callbacks):
        store = DjangoSignupStore()
        store.count_by_date(GAME_DAY)
        with django_capture_on_commit_callbacks() as callbacks:
            store.insert(NewSignup(display_name="Bob", date=GAME_DAY, is_guest=True))
            assert cache.get(count_cache_key(GAME_DAY)) == 0
        assert len(callbacks) == 1
        callbacks[0]()
        assert cache.get(count_cache_key(GAME_DAY)) is None

    def test_other_dates_keep_their_entry(self, django_capture_on_commit_callbacks):
        store = DjangoSignupStore()
        other = date(2025, 6, 14)
        store.counts_by_dates([GAME_DAY, other])
        with django_capture_on_commit_callbacks(execute=True):
            store.insert(NewSignup(display_name="Bob", date=GAME_DAY, is_guest=True))
        assert cache.get(count_cache_key(other)) == 0
        assert cache.get(count_cache_key(GAME_DAY)) is None
