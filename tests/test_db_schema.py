"""Tests for database schema creation and migration."""

import sqlite3

from skincare.harmony.db.schema import _MIGRATIONS, _SCHEMA_VERSION, ensure_schema


def test_ensure_schema_creates_tables(tmp_path):
    """Schema creates the products and version tables."""
    conn = ensure_schema(tmp_path / "test.db")

    tables = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
    ).fetchall()
    table_names = {row["name"] for row in tables}

    assert "cosmetic_products" in table_names
    assert "schema_version" in table_names
    conn.close()


def test_ensure_schema_sets_version(tmp_path):
    conn = ensure_schema(tmp_path / "test.db")
    row = conn.execute("SELECT version FROM schema_version").fetchone()
    assert row["version"] == _SCHEMA_VERSION
    conn.close()


def test_ensure_schema_idempotent(tmp_path):
    """Running twice keeps a single version row and existing data."""
    db_path = tmp_path / "test.db"
    conn = ensure_schema(db_path)
    conn.execute(
        """INSERT INTO cosmetic_products
           (name, open_date, pao_days, created_at, updated_at)
           VALUES ('Serum', '2024-01-01', 90, '2024-01-01T00:00:00', '2024-01-01T00:00:00')"""
    )
    conn.commit()
    conn.close()

    conn = ensure_schema(db_path)
    rows = conn.execute("SELECT version FROM schema_version").fetchall()
    assert len(rows) == 1
    count = conn.execute("SELECT COUNT(*) AS n FROM cosmetic_products").fetchone()
    assert count["n"] == 1
    conn.close()


def test_ensure_schema_creates_parent_dirs(tmp_path):
    db_path = tmp_path / "nested" / "dir" / "test.db"
    conn = ensure_schema(db_path)
    assert db_path.exists()
    conn.close()


def test_columns(tmp_path):
    conn = ensure_schema(tmp_path / "test.db")
    columns = {
        row["name"]
        for row in conn.execute("PRAGMA table_info(cosmetic_products)").fetchall()
    }
    assert {"name", "open_date", "pao_days", "user_id", "brand"} <= columns
    assert "expiration_date" not in columns
    conn.close()


def test_ensure_schema_migrates_unversioned_database(tmp_path):
    """A file with an empty version table is brought up to date."""
    db_path = tmp_path / "old.db"
    conn = sqlite3.connect(str(db_path))
    conn.execute("CREATE TABLE schema_version (version INTEGER NOT NULL)")
    conn.commit()
    conn.close()

    conn = ensure_schema(db_path)
    row = conn.execute("SELECT version FROM schema_version").fetchone()
    assert row["version"] == _SCHEMA_VERSION
    tables = {
        r["name"]
        for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    }
    assert "cosmetic_products" in tables
    conn.close()


def test_schema_version_matches_migration_count():
    assert _SCHEMA_VERSION == len(_MIGRATIONS) >= 1
