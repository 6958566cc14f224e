"""Unit tests for the Product entity and its factory."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, to_iso8601

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _create(**overrides) -> Product:
    """Helper to build a valid product, overriding selected fields."""
    fields = dict(
        id="p1",
        name="Widget",
        price_pence=999,
        description="d",
        updated_at=NOW,
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path(self):
        p = _create()
        assert p.id == "p1"
        assert p.name == "Widget"
        assert p.price_pence == 999
        assert p.description == "d"
        assert p.updated_at == NOW

    def test_name_is_trimmed(self):
        assert _create(name="  Widget  ").name == "Widget"

    def test_zero_price_allowed(self):
        assert _create(price_pence=0).price_pence == 0

    def test_empty_description_allowed(self):
        assert _create(description="").description == ""

    def test_is_immutable(self):
        p = _create()
        with pytest.raises(FrozenInstanceError):
            p.name = "Gadget"  # type: ignore[misc]

    def test_equal_by_value(self):
        assert _create() == _create()


class TestProductValidation:

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError, match="id is required"):
            _create(id="")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _create(name="   ")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _create(price_pence=-1)

    def test_float_price_rejected(self):
        with pytest.raises(ValidationError, match="integer number of pence"):
            _create(price_pence=9.99)

    def test_bool_price_rejected(self):
        with pytest.raises(ValidationError, match="integer number of pence"):
            _create(price_pence=True)

    def test_non_string_description_rejected(self):
        with pytest.raises(ValidationError, match="description must be a string"):
            _create(description=None)

    def test_non_datetime_timestamp_rejected(self):
        with pytest.raises(ValidationError, match="must be a datetime"):
            _create(updated_at="2024-01-01")

    def test_direct_construction_is_validated(self):
        with pytest.raises(ValidationError):
            Product(id="p1", name="", price_pence=1, description="", updated_at=NOW)


class TestToIso8601:

    def test_utc_with_milliseconds(self):
        assert to_iso8601(NOW) == "2024-01-01T00:00:00.000Z"

    def test_truncates_microseconds(self):
        moment = datetime(2024, 5, 6, 7, 8, 9, 123999, tzinfo=timezone.utc)
        assert to_iso8601(moment) == "2024-05-06T07:08:09.123Z"

    def test_converts_offset_to_utc(self):
        moment = datetime(2024, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_iso8601(moment) == "2024-01-01T00:00:00.000Z"

    def test_small_years_are_zero_padded(self):
        moment = datetime(999, 1, 1, tzinfo=timezone.utc)
        assert to_iso8601(moment) == "0999-01-01T00:00:00.000Z"

    def test_naive_treated_as_utc(self):
        assert to_iso8601(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"
