"""Sunscreen reminder and skincare cabinet module."""

from .cabinet import (
    CosmeticProduct,
    ExpirationInfo,
    ExpirationStatus,
    ProductExpirationTracker,
    expiration_status_of,
)
from .config import (
    CabinetConfig,
    DatabaseConfig,
    HarmonyConfig,
    ProfileConfig,
    SunscreenConfig,
    load_config,
)
from .sunscreen import (
    PA,
    SPF,
    Protection,
    ReapplicationTimerCalculator,
    compute_reapplication_minutes,
    round_down_timer,
)

__all__ = [
    "ReapplicationTimerCalculator",
    "compute_reapplication_minutes",
    "round_down_timer",
    "SPF",
    "PA",
    "Protection",
    "CosmeticProduct",
    "ExpirationStatus",
    "ExpirationInfo",
    "ProductExpirationTracker",
    "expiration_status_of",
    "HarmonyConfig",
    "DatabaseConfig",
    "ProfileConfig",
    "SunscreenConfig",
    "CabinetConfig",
    "load_config",
]
