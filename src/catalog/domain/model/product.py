"""Product entity.

A Product is a value: once constructed it is fully valid and never
changes. Updating a product means building a new one with the same id
and handing it to the repository, which replaces the stored record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Validation lives in ``__post_init__`` so a repository reconstituting
    stored records cannot produce an invalid instance either. New products
    should come from ``Product.create()``.
    """

    id: str
    name: str
    price_pence: int
    description: str
    updated_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Product id is required")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Product name is required")
        # bool is an int subclass; True is not a price.
        if isinstance(self.price_pence, bool) or not isinstance(self.price_pence, int):
            raise ValidationError(
                f"Product price must be an integer number of pence, "
                f"got {type(self.price_pence).__name__}"
            )
        if self.price_pence < 0:
            raise ValidationError(
                f"Product price cannot be negative, got {self.price_pence}"
            )
        if not isinstance(self.description, str):
            raise ValidationError(
                f"Product description must be a string, "
                f"got {type(self.description).__name__}"
            )
        if not isinstance(self.updated_at, datetime):
            raise ValidationError(
                f"Product updated_at must be a datetime, "
                f"got {type(self.updated_at).__name__}"
            )

    # --- Factory --------------------------------------------------------------

    @classmethod
    def create(
        cls,
        *,
        id: str,
        name: str,
        price_pence: int,
        description: str,
        updated_at: datetime,
    ) -> Product:
        """Validate raw fields and build a product stamped with *updated_at*.

        The name is stored trimmed. Raises ValidationError on bad input.
        """
        if isinstance(name, str):
            name = name.strip()
        return cls(
            id=id,
            name=name,
            price_pence=price_pence,
            description=description,
            updated_at=updated_at,
        )


def to_iso8601(moment: datetime) -> str:
    """Render *moment* as UTC ISO-8601 with milliseconds, e.g.
    ``2024-01-01T00:00:00.000Z``. Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
