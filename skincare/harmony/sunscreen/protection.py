"""Sunscreen protection ratings (SPF or PA)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

SPF_BASELINE = 30

# Selectable SPF values (5, 10, ... 75)
SPF_OPTIONS: list[int] = [(i + 1) * 5 for i in range(15)]

# Ordinal PA levels: 1 = PA+ ... 6 = PA++++++
PA_LEVELS: list[int] = [1, 2, 3, 4, 5, 6]


@dataclass(frozen=True)
class SPF:
    """Sun Protection Factor rating."""

    value: int

    @property
    def label(self) -> str:
        return f"SPF {self.value}"

    def multiplier(self) -> float:
        """Scale relative to SPF 30."""
        return self.value / SPF_BASELINE


@dataclass(frozen=True)
class PA:
    """Protection Grade of UVA, stored as its ordinal level."""

    level: int

    @property
    def label(self) -> str:
        return "PA" + "+" * self.level

    def multiplier(self) -> float:
        return float(1 + self.level)


Protection = Union[SPF, PA]


def parse_protection(scale: str, value: int) -> Protection:
    """Build a protection selection from a scale name ("spf" or "pa").

    Raises:
        ValueError: If the scale name is unknown.
    """
    match scale.lower():
        case "spf":
            return SPF(value)
        case "pa":
            return PA(value)
    raise ValueError(f"Unknown protection scale: {scale}")
