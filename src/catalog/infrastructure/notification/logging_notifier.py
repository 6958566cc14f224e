"""ProductUpdatedNotifier that writes events to the application log."""

from __future__ import annotations

import json
import logging

from catalog.application.product_updated_notifier import ProductUpdatedEvent

logger = logging.getLogger(__name__)


class LoggingProductUpdatedNotifier:

    async def notify(self, event: ProductUpdatedEvent) -> None:
        logger.info("Product updated: %s", json.dumps(event.to_dict()))
