"""TOML configuration loader for Skincare Harmony."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .cabinet.models import PAO_OPTIONS
from .sunscreen.protection import Protection, parse_protection

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_DEFAULT_DB_PATH = "~/.config/skincare-harmony/products.db"


@dataclass
class DatabaseConfig:
    path: str = _DEFAULT_DB_PATH


@dataclass
class ProfileConfig:
    user_id: str = ""


@dataclass
class SunscreenConfig:
    skin_type: int = 3
    scale: str = "spf"
    spf: int = 30
    pa: int = 3

    def protection(self) -> Protection:
        """The default SPF/PA selection for the configured scale."""
        value = self.pa if self.scale.lower() == "pa" else self.spf
        return parse_protection(self.scale, value)


@dataclass
class CabinetConfig:
    reminder_days: int = 14
    pao_options: list[int] = field(default_factory=lambda: list(PAO_OPTIONS))


@dataclass
class HarmonyConfig:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    sunscreen: SunscreenConfig = field(default_factory=SunscreenConfig)
    cabinet: CabinetConfig = field(default_factory=CabinetConfig)


def load_config(path: str | Path | None = None) -> HarmonyConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The database path and user ID can be set via environment variables
    when the file leaves them empty.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    dbs = raw.get("database", {})
    prf = raw.get("profile", {})
    sun = raw.get("sunscreen", {})
    cab = raw.get("cabinet", {})

    # Resolve: config file → environment variable → default
    db_path = (
        dbs.get("path", "")
        or os.environ.get("SKINCARE_HARMONY_DB", "")
        or _DEFAULT_DB_PATH
    )
    user_id = prf.get("user_id", "") or os.environ.get("SKINCARE_HARMONY_USER", "")

    return HarmonyConfig(
        database=DatabaseConfig(path=db_path),
        profile=ProfileConfig(user_id=user_id),
        sunscreen=SunscreenConfig(
            skin_type=sun.get("skin_type", 3),
            scale=sun.get("scale", "spf"),
            spf=sun.get("spf", 30),
            pa=sun.get("pa", 3),
        ),
        cabinet=CabinetConfig(
            reminder_days=cab.get("reminder_days", 14),
            pao_options=cab.get("pao_options", list(PAO_OPTIONS)),
        ),
    )
