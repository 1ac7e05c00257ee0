"""Cart change notifications.

cart_updated fires after every persisted cart write with the new items.
Any number of receivers may listen.
"""

import logging

from django.dispatch import Signal, receiver

from shop.domain.orders import cart_item_count

logger = logging.getLogger(__name__)

cart_updated = Signal()


@receiver(cart_updated)
def log_cart_change(sender, items, **kwargs):
    """Trace cart writes at debug level."""
    logger.debug("cart updated: %d line(s), %d item(s)", len(items), cart_item_count(items))
