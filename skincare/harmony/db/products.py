"""Cosmetic product CRUD operations."""

from __future__ import annotations

import logging
import sqlite3
from datetime import date, timedelta
from pathlib import Path

from ..cabinet.models import CosmeticProduct
from .schema import ensure_schema

logger = logging.getLogger(__name__)

_COLUMNS = (
    "name", "brand", "category", "open_date", "pao_days", "image_path",
    "notes", "user_id", "created_at", "updated_at",
)

# SQLite expression for open_date + pao_days
_EXPIRES_SQL = "date(open_date, '+' || pao_days || ' days')"


class ProductDB:
    """Manages the cosmetic_products table."""

    def __init__(
        self, db_path: str | Path = "~/.config/skincare-harmony/products.db"
    ) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = ensure_schema(self._db_path)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @staticmethod
    def _user_filter(user_id: str | None) -> tuple[str, list]:
        if user_id is None:
            return "", []
        return "user_id = ? AND ", [user_id]

    def add_product(self, product: CosmeticProduct) -> int:
        """Insert a product and return its new row ID."""
        conn = self._get_conn()
        row = product.to_row()
        cur = conn.execute(
            f"""INSERT INTO cosmetic_products ({", ".join(_COLUMNS)})
                VALUES ({", ".join("?" for _ in _COLUMNS)})""",
            tuple(row[c] for c in _COLUMNS),
        )
        conn.commit()
        logger.info("Added product %d: %s", cur.lastrowid, product.name)
        return cur.lastrowid

    def get_product(self, product_id: int) -> CosmeticProduct | None:
        conn = self._get_conn()
        row = conn.execute(
            "SELECT * FROM cosmetic_products WHERE id = ?", (product_id,)
        ).fetchone()
        return CosmeticProduct.from_row(dict(row)) if row else None

    def get_products(self, user_id: str | None = None) -> list[CosmeticProduct]:
        """Return all products, newest first, optionally for one user."""
        conn = self._get_conn()
        where, params = self._user_filter(user_id)
        rows = conn.execute(
            f"SELECT * FROM cosmetic_products WHERE {where}1 = 1 "
            "ORDER BY created_at DESC, id DESC",
            params,
        ).fetchall()
        return [CosmeticProduct.from_row(dict(r)) for r in rows]

    def update_product(self, product: CosmeticProduct) -> int:
        """Overwrite a stored product.

        Returns:
            Number of rows updated (0 if the ID does not exist).

        Raises:
            ValueError: If the product has no ID.
        """
        if product.id is None:
            raise ValueError("Cannot update a product without an id")
        conn = self._get_conn()
        row = product.to_row()
        cur = conn.execute(
            f"""UPDATE cosmetic_products
                SET {", ".join(f"{c} = ?" for c in _COLUMNS)}
                WHERE id = ?""",
            (*(row[c] for c in _COLUMNS), product.id),
        )
        conn.commit()
        logger.info("Updated product %d (%d row)", product.id, cur.rowcount)
        return cur.rowcount

    def delete_product(self, product_id: int) -> int:
        """Delete a product by ID and return the number of rows removed."""
        conn = self._get_conn()
        cur = conn.execute(
            "DELETE FROM cosmetic_products WHERE id = ?", (product_id,)
        )
        conn.commit()
        logger.info("Deleted product %d (%d row)", product_id, cur.rowcount)
        return cur.rowcount

    def get_expiring_products(
        self,
        user_id: str | None,
        days: int,
        today: date | None = None,
    ) -> list[CosmeticProduct]:
        """Return products expiring within ``days``, soonest first.

        Already expired products are included.
        """
        conn = self._get_conn()
        limit = (today or date.today()) + timedelta(days=days)
        where, params = self._user_filter(user_id)
        rows = conn.execute(
            f"""SELECT * FROM cosmetic_products
                WHERE {where}{_EXPIRES_SQL} <= date(?)
                ORDER BY {_EXPIRES_SQL} ASC, id ASC""",
            (*params, limit.isoformat()),
        ).fetchall()
        return [CosmeticProduct.from_row(dict(r)) for r in rows]

    def search_products(
        self, query: str, user_id: str | None = None
    ) -> list[CosmeticProduct]:
        """Search products by name or brand (case-insensitive substring)."""
        conn = self._get_conn()
        where, params = self._user_filter(user_id)
        pattern = f"%{query}%"
        rows = conn.execute(
            f"""SELECT * FROM cosmetic_products
                WHERE {where}(name LIKE ? OR brand LIKE ?)
                ORDER BY name ASC""",
            (*params, pattern, pattern),
        ).fetchall()
        return [CosmeticProduct.from_row(dict(r)) for r in rows]
