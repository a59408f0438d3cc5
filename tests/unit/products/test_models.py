"""Unit tests for the Product model.

Covers:
- Creation with all fields, UUIDv7 surrogate key and timestamps.
- Product code uniqueness.
- Database check constraints on price and quantity.
- Ordering and __str__.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


def _create(**overrides) -> Product:
    defaults = {
        "origin_country": "Bulgaria",
        "product_name": "Widget",
        "product_code": "AB12C",
        "price": Decimal("19.99"),
        "quantity": 10,
        "description": "A widget",
    }
    defaults.update(overrides)
    return Product.objects.create(**defaults)


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = _create()
        p.refresh_from_db()
        assert p.product_code == "AB12C"
        assert p.product_name == "Widget"
        assert p.origin_country == "Bulgaria"
        assert p.price == Decimal("19.99")
        assert p.quantity == 10
        assert p.description == "A widget"

    def test_id_is_uuid7(self):
        p = _create()
        assert isinstance(p.id, uuid.UUID)
        assert p.id.version == 7

    def test_timestamps_set_on_create(self):
        p = _create()
        assert p.created_at is not None
        assert p.updated_at is not None

    def test_code_is_stored_verbatim(self):
        p = _create(product_code="ab-12")
        p.refresh_from_db()
        assert p.product_code == "ab-12"


class TestProductConstraints:
    def test_duplicate_code_raises(self):
        _create()
        with pytest.raises(IntegrityError), transaction.atomic():
            _create(product_name="Second")

    def test_non_positive_price_rejected_by_database(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            _create(price=Decimal("0.00"))

    def test_negative_quantity_rejected_by_database(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            _create(quantity=-1)


class TestProductDisplay:
    def test_str(self):
        assert str(_create()) == "AB12C - Widget"

    def test_default_ordering_is_by_code(self):
        _create(product_code="ZZ1")
        _create(product_code="AA1")
        assert list(Product.objects.values_list("product_code", flat=True)) == [
            "AA1",
            "ZZ1",
        ]
