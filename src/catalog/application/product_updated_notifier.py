"""Notification contract for product changes and its payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from catalog.domain.model.product import Product, to_iso8601


@dataclass(frozen=True)
class ProductUpdatedEvent:
    """Output: a product as seen by downstream consumers.

    Decoupled from the entity; the timestamp is already rendered.
    """

    id: str
    name: str
    price_pence: int
    description: str
    updated_at: str  # ISO-8601, e.g. "2024-01-01T00:00:00.000Z"

    @classmethod
    def from_product(cls, product: Product) -> ProductUpdatedEvent:
        return cls(
            id=product.id,
            name=product.name,
            price_pence=product.price_pence,
            description=product.description,
            updated_at=to_iso8601(product.updated_at),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "pricePence": self.price_pence,
            "description": self.description,
            "updatedAt": self.updated_at,
        }


class ProductUpdatedNotifier(Protocol):

    async def notify(self, event: ProductUpdatedEvent) -> None:
        """Deliver *event*. Raises NotificationError if delivery fails."""
        ...
