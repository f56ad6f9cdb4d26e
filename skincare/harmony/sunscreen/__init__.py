"""Sunscreen reapplication timing."""

from .protection import PA, PA_LEVELS, SPF, SPF_OPTIONS, Protection, parse_protection
from .timer import (
    ReapplicationTimerCalculator,
    base_minutes,
    compute_reapplication_minutes,
    round_down_timer,
    skin_multiplier,
    uv_band,
    validate_timer_input,
)

__all__ = [
    "SPF",
    "PA",
    "Protection",
    "SPF_OPTIONS",
    "PA_LEVELS",
    "parse_protection",
    "ReapplicationTimerCalculator",
    "compute_reapplication_minutes",
    "round_down_timer",
    "base_minutes",
    "skin_multiplier",
    "uv_band",
    "validate_timer_input",
]
