"""Application service: Upsert Product use case.

Creates a product or fully replaces an existing one with the same id,
then tells downstream consumers about the change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from catalog.application.product_updated_notifier import (
    ProductUpdatedEvent,
    ProductUpdatedNotifier,
)
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpsertProductDeps:
    """Collaborators for one invocation, supplied by the caller."""

    product_repo: ProductRepository
    now: Callable[[], datetime]
    product_updated_notifier: ProductUpdatedNotifier


@dataclass(frozen=True)
class UpsertProductCommand:
    """Input: the full desired state of the product."""

    id: str
    name: str
    price_pence: int
    description: str = ""


@dataclass(frozen=True)
class UpsertProductResult:
    success: bool
    data: Product | None = None
    error: str | None = None

    @classmethod
    def ok(cls, product: Product) -> UpsertProductResult:
        return cls(success=True, data=product)

    @classmethod
    def fail(cls, message: str) -> UpsertProductResult:
        return cls(success=False, error=message)


async def upsert_product(
    deps: UpsertProductDeps,
    command: UpsertProductCommand,
) -> UpsertProductResult:
    """Create or update a product and notify about the change.

    Steps:
    1. Build a Product from the command, stamped with ``deps.now()``.
    2. Save (upsert) it through the repository.
    3. Project the saved product into a ProductUpdatedEvent.
    4. Send the event through the notifier, exactly once.

    Never raises: every failure becomes ``UpsertProductResult.fail``. If
    the save succeeded and the notification failed, the record stays
    changed even though the result reports failure.
    """
    logger.debug("Upserting product %r", command.id)
    saved: Product | None = None

    try:
        product = Product.create(
            id=command.id,
            name=command.name,
            price_pence=command.price_pence,
            description=command.description,
            updated_at=deps.now(),
        )
        saved = await deps.product_repo.save(product)

        event = ProductUpdatedEvent.from_product(saved)
        await deps.product_updated_notifier.notify(event)
    except Exception as exc:
        if saved is not None:
            logger.error(
                "Product %r was saved but the update notification failed: %s",
                saved.id,
                exc,
            )
        elif isinstance(exc, ValidationError):
            logger.warning("Rejected product %r: %s", command.id, exc)
        else:
            logger.error("Failed to upsert product %r: %s", command.id, exc)
        return UpsertProductResult.fail(str(exc))

    logger.info("Upserted product %r", saved.id)
    return UpsertProductResult.ok(saved)
