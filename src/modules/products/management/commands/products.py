from __future__ import annotations

from typing import Iterable

import structlog
from django.core.management.base import BaseCommand, CommandError, CommandParser

from modules.products.dtos import ProductOutputDTO
from modules.products.exceptions import (
    InvalidArgument,
    InvalidProduct,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductsManager

logger = structlog.get_logger(__name__)

PRODUCT_ERRORS = (InvalidArgument, InvalidProduct, ProductAlreadyExists, ProductNotFound)


class Command(BaseCommand):
    help = "Manage the product catalog: add, update, delete, list, get, search."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print each product as one JSON line.",
        )
        actions = parser.add_subparsers(dest="action", required=True)

        for name, help_text in (
            ("add", "Add a new product."),
            ("update", "Overwrite the product with the given code."),
        ):
            sub = actions.add_parser(name, help=help_text)
            sub.add_argument("--code", required=True)
            sub.add_argument("--name", required=True)
            sub.add_argument("--country", required=True)
            sub.add_argument("--price", required=True)
            sub.add_argument("--quantity", required=True)
            sub.add_argument("--description", required=True)

        actions.add_parser("delete", help="Delete a product by code.").add_argument("code")
        actions.add_parser("list", help="List every product.")
        actions.add_parser("get", help="Show one product by code.").add_argument("code")
        actions.add_parser(
            "search", help="List products from an origin country."
        ).add_argument("country")

    def handle(self, *args, **options):
        action = options["action"]
        self._json = options["json"]
        manager = ProductsManager(repository=ProductDjangoRepository())

        with structlog.contextvars.bound_contextvars(command="products", action=action):
            try:
                if action == "add":
                    product = manager.add(self._product_from(options))
                    self.stdout.write(self.style.SUCCESS(f"Added {product.product_code}."))
                elif action == "update":
                    product = manager.update(self._product_from(options))
                    self.stdout.write(self.style.SUCCESS(f"Updated {product.product_code}."))
                elif action == "delete":
                    manager.delete(options["code"])
                    self.stdout.write(self.style.SUCCESS(f"Deleted {options['code']}."))
                elif action == "list":
                    self._render(manager.get_all())
                elif action == "get":
                    self._render([manager.get_specific(options["code"])])
                elif action == "search":
                    self._render(manager.search_by_origin_country(options["country"]))
            except PRODUCT_ERRORS as exc:
                logger.warning("command.failed", error=str(exc))
                raise CommandError(str(exc)) from exc

    @staticmethod
    def _product_from(options: dict) -> Product:
        # Raw strings; ProductsManager.validate does the coercion.
        return Product(
            product_code=options["code"],
            product_name=options["name"],
            origin_country=options["country"],
            price=options["price"],
            quantity=options["quantity"],
            description=options["description"],
        )

    def _render(self, products: Iterable[Product]) -> None:
        for product in products:
            if self._json:
                self.stdout.write(ProductOutputDTO.from_entity(product).model_dump_json())
            else:
                self.stdout.write(
                    " | ".join(
                        str(value)
                        for value in (
                            product.product_code,
                            product.product_name,
                            product.origin_country,
                            product.price,
                            product.quantity,
                            product.description,
                        )
                    )
                )
