"""Integration tests for the ``products`` and ``seed_products`` commands."""

from __future__ import annotations

import json
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from modules.products.management.commands.seed_products import CATALOG
from modules.products.models import Product

pytestmark = pytest.mark.integration

ADD_ARGS = [
    "--code", "AB12C",
    "--name", "TestProduct",
    "--country", "Bulgaria",
    "--price", "1.25",
    "--quantity", "100",
    "--description", "Anything for description",
]


def _run(*args, **options) -> str:
    out = StringIO()
    call_command("products", *args, stdout=out, **options)
    return out.getvalue()


class TestProductsCommand:
    def test_add_persists_product(self):
        output = _run("add", *ADD_ARGS)

        assert "Added AB12C." in output
        stored = Product.objects.get(product_code="AB12C")
        assert stored.price == Decimal("1.25")
        assert stored.quantity == 100

    def test_add_invalid_price_raises_command_error(self):
        args = list(ADD_ARGS)
        args[args.index("1.25")] = "-1"

        with pytest.raises(CommandError, match="Invalid product!"):
            _run("add", *args)
        assert Product.objects.count() == 0

    def test_add_non_numeric_price_is_invalid(self):
        args = list(ADD_ARGS)
        args[args.index("1.25")] = "cheap"

        with pytest.raises(CommandError, match="Invalid product!"):
            _run("add", *args)

    def test_update_overwrites_fields(self):
        _run("add", *ADD_ARGS)
        args = list(ADD_ARGS)
        args[args.index("TestProduct")] = "Renamed"

        output = _run("update", *args)

        assert "Updated AB12C." in output
        assert Product.objects.get(product_code="AB12C").product_name == "Renamed"

    def test_delete_removes_product(self):
        _run("add", *ADD_ARGS)

        output = _run("delete", "AB12C")

        assert "Deleted AB12C." in output
        assert not Product.objects.exists()

    def test_delete_blank_code_raises(self):
        with pytest.raises(CommandError, match="Product code cannot be empty."):
            _run("delete", " ")

    def test_list_prints_one_line_per_product(self):
        call_command("seed_products", stdout=StringIO())

        lines = _run("list").strip().splitlines()

        assert len(lines) == len(CATALOG)
        assert lines[0].startswith("BG001 | Rose Oil | Bulgaria")

    def test_list_empty_raises(self):
        with pytest.raises(CommandError, match="No product found."):
            _run("list")

    def test_get_as_json(self):
        _run("add", *ADD_ARGS)

        payload = json.loads(_run("get", "AB12C", json=True))

        assert payload["product_code"] == "AB12C"
        assert payload["origin_country"] == "Bulgaria"
        assert Decimal(payload["price"]) == Decimal("1.25")

    def test_search_filters_by_country(self):
        call_command("seed_products", stdout=StringIO())

        lines = _run("search", "Italy").strip().splitlines()

        assert [line.split(" | ")[0] for line in lines] == ["IT001", "IT002"]

    def test_search_blank_country_raises(self):
        with pytest.raises(CommandError, match="Country name cannot be empty."):
            _run("search", "")


class TestSeedProductsCommand:
    def test_seeds_catalog(self):
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == len(CATALOG)
        assert f"created={len(CATALOG)}, skipped=0" in out.getvalue()

    def test_second_run_skips_existing(self):
        call_command("seed_products", stdout=StringIO())
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == len(CATALOG)
        assert f"created=0, skipped={len(CATALOG)}" in out.getvalue()
