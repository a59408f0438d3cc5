"""Product domain constants.

Field limits shared by the model, the migration and the validation DTOs,
plus the user-facing error messages raised by the manager.
"""

from decimal import Decimal

ORIGIN_COUNTRY_MAX_LENGTH = 50
PRODUCT_NAME_MAX_LENGTH = 50
PRODUCT_CODE_MAX_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 255

PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
MIN_PRICE = Decimal("0.01")

# Largest value every supported backend stores in a PositiveIntegerField.
QUANTITY_MAX = 2147483647

INVALID_PRODUCT_MESSAGE = "Invalid product!"
EMPTY_PRODUCT_CODE_MESSAGE = "Product code cannot be empty."
EMPTY_COUNTRY_MESSAGE = "Country name cannot be empty."
NO_PRODUCT_FOUND_MESSAGE = "No product found."
NO_PRODUCT_WITH_CODE_MESSAGE = "No product found with product code: {code}"
DUPLICATE_PRODUCT_CODE_MESSAGE = "Product with code '{code}' already exists."
