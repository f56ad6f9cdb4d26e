"""Sunscreen reapplication timer based on UV index, skin type and protection."""

from __future__ import annotations

import logging

from .protection import PA, PA_LEVELS, SPF, SPF_OPTIONS, Protection

logger = logging.getLogger(__name__)

# (minimum UV index, base minutes, band name), checked from high to low
_UV_BANDS: list[tuple[float, int, str]] = [
    (8.0, 60, "very high"),
    (6.0, 90, "high"),
    (3.0, 120, "moderate"),
]
_LOW_UV_MINUTES = 180

_SKIN_MULTIPLIERS: dict[int, float] = {
    1: 0.8,
    2: 0.8,
    3: 1.0,
    4: 1.0,
    5: 1.2,
    6: 1.2,
}

# Minute-of-hour values that are never rounded down
_PRESERVED_REMAINDERS = frozenset({8, 18, 28, 38, 48, 58})


def base_minutes(uv_index: float) -> int:
    """Base protection time in minutes for a UV index."""
    for threshold, minutes, _ in _UV_BANDS:
        if uv_index >= threshold:
            return minutes
    return _LOW_UV_MINUTES


def uv_band(uv_index: float) -> str:
    """Descriptive UV intensity band ("very high", "high", "moderate", "low")."""
    for threshold, _, name in _UV_BANDS:
        if uv_index >= threshold:
            return name
    return "low"


def skin_multiplier(skin_type: int) -> float:
    """Multiplier for a Fitzpatrick skin type; unknown types use 1.0."""
    return _SKIN_MULTIPLIERS.get(skin_type, 1.0)


def protection_multiplier(protection: Protection | None) -> float:
    """Multiplier for the selected SPF or PA rating; anything else uses 1.0."""
    if isinstance(protection, (SPF, PA)):
        return protection.multiplier()
    return 1.0


def round_down_timer(minutes: int) -> int:
    """Round a timer down to the nearest 10 minutes.

    Values whose minute-of-hour is 8, 18, 28, 38, 48 or 58 are kept as is.
    A last digit of 8 or 9 outside those values is also left unchanged.
    """
    if minutes % 60 in _PRESERVED_REMAINDERS:
        return minutes
    last_digit = minutes % 10
    if 0 <= last_digit < 8:
        return minutes - last_digit
    return minutes


def validate_timer_input(
    uv_index: float, skin_type: int, protection: Protection
) -> None:
    """Check user-selected timer values before they reach the calculator.

    Raises:
        ValueError: If the UV index is negative, the skin type is not 1-6,
            or the SPF/PA value is not one of the selectable options.
    """
    if uv_index < 0:
        raise ValueError(f"UV index cannot be negative: {uv_index}")
    if skin_type not in _SKIN_MULTIPLIERS:
        raise ValueError(f"Skin type must be between 1 and 6: {skin_type}")
    if isinstance(protection, SPF):
        if protection.value not in SPF_OPTIONS:
            raise ValueError(
                f"SPF must be a multiple of 5 from 5 to 75: {protection.value}"
            )
    elif isinstance(protection, PA):
        if protection.level not in PA_LEVELS:
            raise ValueError(f"PA level must be between 1 and 6: {protection.level}")
    else:
        raise ValueError(f"Unknown protection selection: {protection!r}")


def compute_reapplication_minutes(
    uv_index: float | None,
    skin_type: int,
    protection: Protection | None,
) -> int:
    """Recommended minutes until sunscreen should be reapplied.

    Each adjustment is truncated to whole minutes before the next one is
    applied: UV band, then skin type, then protection factor.

    Returns:
        Rounded minute count, or 0 when no UV reading is available.
        Callers must treat 0 as "not computable" rather than a duration.
    """
    if uv_index is None:
        return 0

    minutes = base_minutes(uv_index)
    minutes = int(minutes * skin_multiplier(skin_type))
    minutes = int(minutes * protection_multiplier(protection))
    return round_down_timer(minutes)


class ReapplicationTimerCalculator:
    """Stateless calculator wrapping the reapplication timer rules."""

    def base_minutes(self, uv_index: float) -> int:
        return base_minutes(uv_index)

    def skin_multiplier(self, skin_type: int) -> float:
        return skin_multiplier(skin_type)

    def round_down(self, minutes: int) -> int:
        return round_down_timer(minutes)

    def compute(
        self,
        uv_index: float | None,
        skin_type: int,
        protection: Protection | None,
    ) -> int:
        """Compute the reapplication interval in minutes (0 if no UV data)."""
        result = compute_reapplication_minutes(uv_index, skin_type, protection)
        logger.debug(
            "timer: uv=%s skin=%s protection=%s -> %d min",
            uv_index,
            skin_type,
            protection,
            result,
        )
        return result
