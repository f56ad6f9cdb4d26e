"""Database schema definitions and migration helpers."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

# One script per schema version; index 0 upgrades an empty file to version 1
_MIGRATIONS: list[str] = [
    """
    CREATE TABLE IF NOT EXISTS cosmetic_products (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        brand TEXT,
        category TEXT,
        open_date TEXT NOT NULL,
        pao_days INTEGER NOT NULL,
        image_path TEXT,
        notes TEXT,
        user_id TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );

    CREATE INDEX IF NOT EXISTS idx_products_user ON cosmetic_products(user_id);
    CREATE INDEX IF NOT EXISTS idx_products_name ON cosmetic_products(name);
    """,
]

_SCHEMA_VERSION = len(_MIGRATIONS)


def _current_version(conn: sqlite3.Connection) -> int:
    conn.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER NOT NULL)")
    row = conn.execute("SELECT MAX(version) AS version FROM schema_version").fetchone()
    return row["version"] or 0


def ensure_schema(db_path: str | Path) -> sqlite3.Connection:
    """Open (or create) the products database and apply pending migrations.

    Args:
        db_path: Path to the SQLite database file; ``~`` is expanded and
            missing parent directories are created.

    Returns:
        An open sqlite3.Connection returning ``sqlite3.Row`` rows.
    """
    path = Path(db_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    version = _current_version(conn)
    for target, script in enumerate(_MIGRATIONS[version:], start=version + 1):
        conn.executescript(script)
        conn.execute("DELETE FROM schema_version")
        conn.execute("INSERT INTO schema_version (version) VALUES (?)", (target,))
        conn.commit()
        logger.info("Migrated %s to schema version %d", path, target)

    return conn
