"""Data models for the skincare cabinet."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Any

# Predefined cosmetic categories
COSMETIC_CATEGORIES: list[str] = [
    "Cleanser",
    "Toner",
    "Serum",
    "Moisturizer",
    "Sunscreen",
    "Foundation",
    "Concealer",
    "Powder",
    "Blush",
    "Eyeshadow",
    "Mascara",
    "Lipstick",
    "Lip Balm",
    "Eye Cream",
    "Face Mask",
    "Exfoliant",
    "Oil",
    "Primer",
    "Setting Spray",
    "Other",
]

# Period After Opening choices in days (1 month to 1 year)
PAO_OPTIONS: list[int] = [30, 60, 90, 180, 365]


@dataclass(eq=False)
class CosmeticProduct:
    """A tracked cosmetic product and its Period After Opening."""

    name: str
    open_date: date
    pao_days: int
    id: int | None = None
    brand: str | None = None
    category: str | None = None
    image_path: str | None = None
    notes: str | None = None
    user_id: str | None = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def expiration_date(self) -> date:
        return self.open_date + timedelta(days=self.pao_days)

    def with_changes(self, **changes: Any) -> CosmeticProduct:
        """Return a copy with the given fields replaced and updated_at refreshed."""
        changes.setdefault("updated_at", datetime.now())
        return replace(self, **changes)

    def to_row(self) -> dict[str, Any]:
        """Convert to a dict of column values for the database."""
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "open_date": self.open_date.isoformat(),
            "pao_days": self.pao_days,
            "image_path": self.image_path,
            "notes": self.notes,
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> CosmeticProduct:
        """Create from a database row (or any mapping with the same keys)."""
        return cls(
            id=row.get("id"),
            name=row.get("name") or "",
            brand=row.get("brand"),
            category=row.get("category"),
            open_date=date.fromisoformat(row["open_date"][:10]),
            pao_days=int(row.get("pao_days") or 0),
            image_path=row.get("image_path"),
            notes=row.get("notes"),
            user_id=row.get("user_id"),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        return isinstance(other, CosmeticProduct) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return (
            f"CosmeticProduct(id={self.id}, name={self.name}, "
            f"brand={self.brand}, expiration_date={self.expiration_date})"
        )


def validate_product_input(
    name: str,
    open_date: date | None,
    pao_days: int | None,
    today: date | None = None,
    pao_options: list[int] | None = None,
) -> None:
    """Check add-product form values.

    Raises:
        ValueError: If the name is empty, the open date is missing or in the
            future, or the PAO is not a positive number of days (or, when
            ``pao_options`` is given, not one of those choices).
    """
    if not name or not name.strip():
        raise ValueError("Product name is required")
    if open_date is None:
        raise ValueError("Open date is required")
    if open_date > (today or date.today()):
        raise ValueError(f"Open date cannot be in the future: {open_date}")
    if pao_days is None or pao_days <= 0:
        raise ValueError(f"Period After Opening must be a positive number of days: {pao_days}")
    if pao_options and pao_days not in pao_options:
        choices = ", ".join(str(d) for d in pao_options)
        raise ValueError(f"Period After Opening must be one of {choices} days: {pao_days}")
