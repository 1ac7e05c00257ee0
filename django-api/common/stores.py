"""Store lookup from settings.

Each feature names its store class by dotted path so deployments (and tests)
can swap the persistence layer without touching services.
"""

from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from common.errors import StoreNotConfiguredError


def load_store(block: str, key: str, feature: str) -> Any:
    """Instantiate the store class configured at settings.<block>[<key>].

    Raises:
        StoreNotConfiguredError: If the setting is missing or empty.
    """
    path = getattr(settings, block, {}).get(key)
    if not path:
        raise StoreNotConfiguredError(feature)
    return import_string(path)()
