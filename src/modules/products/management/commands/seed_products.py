from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductsManager

CATALOG = [
    # (code, name, country, price, quantity, description)
    ("BG001", "Rose Oil", "Bulgaria", Decimal("49.90"), 40, "Distilled Kazanlak rose oil"),
    ("BG002", "Yoghurt", "Bulgaria", Decimal("1.25"), 200, "Traditional sour yoghurt"),
    ("BG003", "Lyutenitsa", "Bulgaria", Decimal("3.40"), 120, "Roasted pepper relish"),
    ("US001", "Maple Syrup", "USA", Decimal("12.50"), 60, "Grade A amber syrup"),
    ("US002", "Peanut Butter", "USA", Decimal("4.99"), 150, "Smooth peanut butter"),
    ("IT001", "Olive Oil", "Italy", Decimal("15.00"), 80, "Extra virgin olive oil"),
    ("IT002", "Parmesan", "Italy", Decimal("22.75"), 35, "Aged 24 months"),
    ("JP001", "Matcha", "Japan", Decimal("18.30"), 50, "Ceremonial grade green tea"),
    ("BR001", "Coffee Beans", "Brazil", Decimal("9.90"), 0, "Medium roast arabica"),
    ("FR001", "Brie", "France", Decimal("7.60"), 45, "Soft cow's milk cheese"),
]


class Command(BaseCommand):
    help = "Seed the catalog with demo products."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        manager = ProductsManager(repository=ProductDjangoRepository())

        created = skipped = 0
        for code, name, country, price, quantity, description in CATALOG:
            product = Product(
                product_code=code,
                product_name=name,
                origin_country=country,
                price=price,
                quantity=quantity,
                description=description,
            )
            try:
                manager.add(product)
            except ProductAlreadyExists:
                skipped += 1
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )
