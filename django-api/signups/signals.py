"""Django signals for cache invalidation."""

import logging
from functools import partial

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from signups.models import Signup
from signups.stores.django_store import count_cache_key

logger = logging.getLogger(__name__)


def _drop_count(day) -> None:
    cache.delete(count_cache_key(day))
    logger.debug("invalidated signup count for %s", day)


@receiver([post_save, post_delete], sender=Signup)
def invalidate_signup_count_cache(sender, instance, **kwargs):
    """Invalidate the count for a signup's date once the change is committed."""
    transaction.on_commit(partial(_drop_count, instance.date))
