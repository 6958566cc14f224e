"""JSON-file-backed ProductRepository."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path

from catalog.domain.exceptions import StorageError, ValidationError
from catalog.domain.model.product import Product

logger = logging.getLogger(__name__)


class JsonProductRepository:
    """Keeps every product in one JSON array file.

    Blocking file access runs in a worker thread; an instance-level lock
    keeps concurrent saves through the same instance from interleaving
    their read-modify-write cycles.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = asyncio.Lock()

    # --- ProductRepository interface ------------------------------------------

    async def save(self, product: Product) -> Product:
        async with self._lock:
            try:
                await asyncio.to_thread(self._save_sync, product)
            except (OSError, ValueError, KeyError, TypeError, ValidationError) as exc:
                raise StorageError(
                    f"Could not save product '{product.id}' to {self._file_path}: {exc}"
                ) from exc
        logger.debug("Wrote product %r to %s", product.id, self._file_path)
        return product

    # --- Serialization helpers ------------------------------------------------

    def _save_sync(self, product: Product) -> None:
        self._ensure_file()
        products = self._load()
        products[product.id] = product
        self._persist(products)

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(
                f"expected a JSON array of products, got {type(raw).__name__}"
            )
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price_pence=item["price_pence"],
                description=item.get("description", ""),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price_pence": p.price_pence,
                "description": p.description,
                "updated_at": p.updated_at.isoformat(),
            }
            for p in products.values()
        ]
        # Swap in a complete file; the store is never left half-written.
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
        tmp_path.replace(self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
