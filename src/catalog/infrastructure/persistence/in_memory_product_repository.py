"""In-process ProductRepository backed by a dict."""

from __future__ import annotations

from catalog.domain.model.product import Product


class InMemoryProductRepository:

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    async def save(self, product: Product) -> Product:
        self._store[product.id] = product
        return product

    def get_by_id(self, product_id: str) -> Product | None:
        """Inspection helper; not part of the repository contract."""
        return self._store.get(product_id)
