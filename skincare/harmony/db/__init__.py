"""SQLite database module for the skincare cabinet."""

from .products import ProductDB
from .schema import ensure_schema

__all__ = [
    "ProductDB",
    "ensure_schema",
]
