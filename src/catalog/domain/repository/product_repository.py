"""Persistence contract for Product.

Defined in the domain layer so the domain never depends on
infrastructure. Implementations (in-memory, JSON file, SQL, ...) satisfy
it structurally; they do not need to inherit from it.
"""

from __future__ import annotations

from typing import Protocol

from catalog.domain.model.product import Product


class ProductRepository(Protocol):

    async def save(self, product: Product) -> Product:
        """Upsert *product* by id and return the persisted value.

        An existing record with the same id is fully replaced. Raises
        StorageError when the product cannot be persisted.
        """
        ...
