"""Product expiration tracking based on Period After Opening."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterable

from .models import CosmeticProduct

EXPIRING_SOON_DAYS = 14


class ExpirationStatus(Enum):
    """Reminder urgency derived from days until expiration."""

    GOOD = "good"          # more than 14 days
    REMINDER = "reminder"  # 8-14 days
    WARNING = "warning"    # 4-7 days
    CRITICAL = "critical"  # 0-3 days
    EXPIRED = "expired"    # past expiration

    @property
    def display_text(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        """Highlight color name for list rendering."""
        return _STATUS_COLORS[self]

    @property
    def urgency(self) -> int:
        """0 for good up to 4 for expired."""
        return _STATUS_URGENCY[self]


_STATUS_COLORS: dict[ExpirationStatus, str] = {
    ExpirationStatus.GOOD: "green",
    ExpirationStatus.REMINDER: "blue",
    ExpirationStatus.WARNING: "orange",
    ExpirationStatus.CRITICAL: "red",
    ExpirationStatus.EXPIRED: "grey",
}

_STATUS_URGENCY: dict[ExpirationStatus, int] = {
    ExpirationStatus.GOOD: 0,
    ExpirationStatus.REMINDER: 1,
    ExpirationStatus.WARNING: 2,
    ExpirationStatus.CRITICAL: 3,
    ExpirationStatus.EXPIRED: 4,
}


@dataclass(frozen=True)
class ExpirationInfo:
    """Derived expiration data for one product."""

    expiration_date: date
    days_until_expiration: int
    status: ExpirationStatus


def _as_date(value: date | datetime) -> date:
    # datetime is a subclass of date
    if isinstance(value, datetime):
        return value.date()
    return value


def expiration_date(open_date: date | datetime, pao_days: int) -> date:
    """Opening date plus the PAO, on the calendar."""
    return _as_date(open_date) + timedelta(days=pao_days)


def days_until_expiration(expires: date | datetime, today: date | datetime) -> int:
    """Whole days from today to the expiration date; negative once expired."""
    return (_as_date(expires) - _as_date(today)).days


def classify_days(days: int) -> ExpirationStatus:
    """Map days until expiration to a status."""
    if days < 0:
        return ExpirationStatus.EXPIRED
    if days <= 3:
        return ExpirationStatus.CRITICAL
    if days <= 7:
        return ExpirationStatus.WARNING
    if days <= 14:
        return ExpirationStatus.REMINDER
    return ExpirationStatus.GOOD


def expiration_status_of(
    open_date: date | datetime,
    pao_days: int,
    now: date | datetime | None = None,
) -> ExpirationInfo:
    """Compute expiration date, days left and status for a product."""
    expires = expiration_date(open_date, pao_days)
    days = days_until_expiration(expires, now if now is not None else date.today())
    return ExpirationInfo(
        expiration_date=expires,
        days_until_expiration=days,
        status=classify_days(days),
    )


class ProductExpirationTracker:
    """Evaluates stored products against a fixed reference date.

    The tracker never modifies the products it is given.
    """

    def __init__(self, today: date | datetime | None = None) -> None:
        self._today = _as_date(today) if today is not None else date.today()

    @property
    def today(self) -> date:
        return self._today

    def status_of(self, product: CosmeticProduct) -> ExpirationInfo:
        return expiration_status_of(product.open_date, product.pao_days, self._today)

    def is_expired(self, product: CosmeticProduct) -> bool:
        return self.status_of(product).days_until_expiration < 0

    def is_expiring_soon(self, product: CosmeticProduct) -> bool:
        days = self.status_of(product).days_until_expiration
        return 0 <= days <= EXPIRING_SOON_DAYS

    def sort_by_urgency(self, products: Iterable[CosmeticProduct]) -> list[CosmeticProduct]:
        """Most urgent status first, then soonest expiration.

        Ties keep their input order.
        """
        def key(product: CosmeticProduct) -> tuple[int, int]:
            info = self.status_of(product)
            return (-info.status.urgency, info.days_until_expiration)

        return sorted(products, key=key)

    def expiring_within(
        self, products: Iterable[CosmeticProduct], days: int
    ) -> list[CosmeticProduct]:
        """Products expiring within ``days`` (already expired ones included)."""
        return [
            p for p in self.sort_by_urgency(products)
            if self.status_of(p).days_until_expiration <= days
        ]
