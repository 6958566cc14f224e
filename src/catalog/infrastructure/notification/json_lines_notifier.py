"""ProductUpdatedNotifier that appends events to a JSON-lines outbox file.

Consumers tail the file; each line is one ProductUpdatedEvent.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from catalog.application.product_updated_notifier import ProductUpdatedEvent
from catalog.domain.exceptions import NotificationError


class JsonLinesProductUpdatedNotifier:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = asyncio.Lock()

    async def notify(self, event: ProductUpdatedEvent) -> None:
        line = json.dumps(event.to_dict()) + "\n"
        async with self._lock:
            try:
                await asyncio.to_thread(self._append, line)
            except OSError as exc:
                raise NotificationError(
                    f"Could not publish update for product '{event.id}': {exc}"
                ) from exc

    def _append(self, line: str) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._file_path.open("a", encoding="utf-8") as fh:
            fh.write(line)
