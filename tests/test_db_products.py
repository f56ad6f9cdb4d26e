"""Tests for ProductDB CRUD operations."""

from datetime import date, timedelta

import pytest

from skincare.harmony.cabinet.models import CosmeticProduct
from skincare.harmony.db.products import ProductDB

TODAY = date(2024, 6, 1)


@pytest.fixture
def db(tmp_path):
    """Create a temporary ProductDB."""
    products = ProductDB(db_path=tmp_path / "test.db")
    yield products
    products.close()


@pytest.fixture
def sample_products():
    """Sample cosmetic products for testing."""
    return [
        CosmeticProduct(
            name="Daily Sunscreen",
            brand="SunCare",
            category="Sunscreen",
            open_date=TODAY - timedelta(days=170),
            pao_days=180,
            user_id="alice",
        ),
        CosmeticProduct(
            name="Hydrating Toner",
            brand="Aqua",
            category="Toner",
            open_date=TODAY - timedelta(days=10),
            pao_days=365,
            user_id="alice",
        ),
        CosmeticProduct(
            name="Volume Mascara",
            brand="Lash Co",
            category="Mascara",
            open_date=TODAY - timedelta(days=100),
            pao_days=90,
            user_id="bob",
        ),
    ]


def test_add_product(db, sample_products):
    ids = [db.add_product(p) for p in sample_products]
    assert len(ids) == 3
    assert all(isinstance(i, int) for i in ids)
    assert len(set(ids)) == 3


def test_get_product(db, sample_products):
    product_id = db.add_product(sample_products[0])
    stored = db.get_product(product_id)

    assert stored is not None
    assert stored.id == product_id
    assert stored.name == "Daily Sunscreen"
    assert stored.open_date == sample_products[0].open_date
    assert stored.expiration_date == TODAY + timedelta(days=10)


def test_get_product_missing(db):
    assert db.get_product(999) is None


def test_get_products_empty(db):
    assert db.get_products() == []


def test_get_products_filters_by_user(db, sample_products):
    for p in sample_products:
        db.add_product(p)

    assert len(db.get_products()) == 3
    alice = db.get_products("alice")
    assert {p.name for p in alice} == {"Daily Sunscreen", "Hydrating Toner"}
    assert [p.name for p in db.get_products("bob")] == ["Volume Mascara"]
    assert db.get_products("nobody") == []


def test_get_products_newest_first(db, sample_products):
    ids = [db.add_product(p) for p in sample_products]
    listed = [p.id for p in db.get_products()]
    assert listed == list(reversed(ids))


def test_update_product(db, sample_products):
    product_id = db.add_product(sample_products[1])
    stored = db.get_product(product_id)

    count = db.update_product(stored.with_changes(pao_days=30, notes="smells odd"))
    assert count == 1

    updated = db.get_product(product_id)
    assert updated.pao_days == 30
    assert updated.notes == "smells odd"
    assert updated.name == "Hydrating Toner"


def test_update_product_without_id(db, sample_products):
    with pytest.raises(ValueError):
        db.update_product(sample_products[0])


def test_update_missing_product(db, sample_products):
    ghost = sample_products[0].with_changes(id=404)
    assert db.update_product(ghost) == 0


def test_delete_product(db, sample_products):
    ids = [db.add_product(p) for p in sample_products]
    assert db.delete_product(ids[0]) == 1
    assert db.delete_product(ids[0]) == 0

    remaining = db.get_products()
    assert len(remaining) == 2
    assert ids[0] not in {p.id for p in remaining}


def test_get_expiring_products(db, sample_products):
    """Expiring list includes expired items and is ordered by expiration."""
    for p in sample_products:
        db.add_product(p)

    # Mascara expired 10 days ago, sunscreen expires in 10 days
    expiring = db.get_expiring_products(None, 14, today=TODAY)
    assert [p.name for p in expiring] == ["Volume Mascara", "Daily Sunscreen"]

    assert [p.name for p in db.get_expiring_products("alice", 14, today=TODAY)] == [
        "Daily Sunscreen"
    ]
    assert [p.name for p in db.get_expiring_products(None, 5, today=TODAY)] == [
        "Volume Mascara"
    ]


def test_get_expiring_products_boundary(db):
    """A product expiring exactly at the end of the window is included."""
    db.add_product(
        CosmeticProduct(name="Edge", open_date=TODAY, pao_days=7)
    )
    assert len(db.get_expiring_products(None, 7, today=TODAY)) == 1
    assert db.get_expiring_products(None, 6, today=TODAY) == []


def test_search_products(db, sample_products):
    for p in sample_products:
        db.add_product(p)

    assert [p.name for p in db.search_products("toner")] == ["Hydrating Toner"]
    # Matches brand as well
    assert [p.name for p in db.search_products("lash")] == ["Volume Mascara"]
    results = db.search_products("a")
    assert [p.name for p in results] == sorted(p.name for p in results)
    assert db.search_products("mascara", user_id="alice") == []


def test_reopen_persists(tmp_path, sample_products):
    path = tmp_path / "persist.db"
    first = ProductDB(path)
    product_id = first.add_product(sample_products[0])
    first.close()

    second = ProductDB(path)
    try:
        assert second.get_product(product_id).name == "Daily Sunscreen"
    finally:
        second.close()
