"""Composition root — wires concrete implementations to the use case.

This is the only place in the codebase that knows about *all* layers.
Every call builds fresh collaborators from explicit settings; nothing is
cached at module level.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from catalog.application.product_updated_notifier import ProductUpdatedNotifier
from catalog.application.upsert_product import UpsertProductDeps
from catalog.infrastructure.notification.json_lines_notifier import (
    JsonLinesProductUpdatedNotifier,
)
from catalog.infrastructure.notification.logging_notifier import (
    LoggingProductUpdatedNotifier,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DEFAULT_DATA_DIR = Path("data")
NOTIFIER_KINDS = ("log", "file")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def product_repository(data_dir: Path) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")


def product_updated_notifier(data_dir: Path, kind: str = "log") -> ProductUpdatedNotifier:
    if kind == "log":
        return LoggingProductUpdatedNotifier()
    if kind == "file":
        return JsonLinesProductUpdatedNotifier(data_dir / "product_events.jsonl")
    raise ValueError(f"Unknown notifier kind: {kind!r}")


def make_upsert_product_deps(
    data_dir: Path = DEFAULT_DATA_DIR,
    notifier: str = "log",
) -> UpsertProductDeps:
    return UpsertProductDeps(
        product_repo=product_repository(data_dir),
        now=utc_now,
        product_updated_notifier=product_updated_notifier(data_dir, notifier),
    )
