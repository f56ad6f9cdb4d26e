"""Skincare cabinet: cosmetic products and their expiration."""

from .expiration import (
    ExpirationInfo,
    ExpirationStatus,
    ProductExpirationTracker,
    classify_days,
    days_until_expiration,
    expiration_date,
    expiration_status_of,
)
from .models import COSMETIC_CATEGORIES, PAO_OPTIONS, CosmeticProduct, validate_product_input

__all__ = [
    "CosmeticProduct",
    "COSMETIC_CATEGORIES",
    "PAO_OPTIONS",
    "validate_product_input",
    "ExpirationStatus",
    "ExpirationInfo",
    "ProductExpirationTracker",
    "classify_days",
    "days_until_expiration",
    "expiration_date",
    "expiration_status_of",
]
