from decimal import Decimal

import pytest


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def products_manager():
    """ProductsManager wired to the real Django repository."""
    from modules.products.repositories.django_repository import ProductDjangoRepository
    from modules.products.services import ProductsManager

    return ProductsManager(repository=ProductDjangoRepository())


@pytest.fixture()
def make_product():
    """Factory for unsaved Product instances with valid defaults."""
    from modules.products.models import Product

    def _make(**overrides):
        defaults = {
            "origin_country": "Bulgaria",
            "product_name": "TestProduct",
            "product_code": "AB12C",
            "price": Decimal("1.25"),
            "quantity": 100,
            "description": "Anything for description",
        }
        defaults.update(overrides)
        return Product(**defaults)

    return _make
