from decimal import Decimal

import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("origin_country", models.CharField(db_index=True, max_length=50)),
                ("product_name", models.CharField(max_length=50)),
                ("product_code", models.CharField(max_length=10, unique=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.01"))
                        ],
                    ),
                ),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("description", models.CharField(max_length=255)),
            ],
            options={
                "db_table": "products",
                "ordering": ["product_code"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(price__gt=0),
                        name="products_price_positive",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(quantity__gte=0),
                        name="products_quantity_non_negative",
                    ),
                ],
            },
        ),
    ]
