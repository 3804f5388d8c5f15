"""Configuration management for Apothecary.

Two sections:
- defaults: crafting defaults used when the CLI is not told otherwise
- data: where ingredient and recipe files live

Config resolution order (highest priority first):
1. Programmatic (ApothecaryConfig constructed in code)
2. Environment variables (APOTHECARY_MODE, APOTHECARY_DISCIPLINE, ...)
3. Config file (~/.config/apothecary/config.json, managed by `apothecary config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

from .core.models import CraftMode, Discipline


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "apothecary"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """Crafting defaults.

    - mode: "deterministic" or "random"
    - discipline: Herbalism, Alchemy or Poison
    - seed: random-mode seed; None draws a fresh roll each time
    """

    mode: str = CraftMode.DETERMINISTIC.value
    discipline: str = Discipline.HERBALISM.value
    seed: int | None = None


@dataclass
class DataConfig:
    """Location of ingredient and recipe files."""

    data_dir: str = "./data"


@dataclass
class ApothecaryConfig:
    """Top-level apothecary configuration.

    Examples:
        # Package use, no files needed
        config = ApothecaryConfig(defaults=DefaultsConfig(mode="random", seed=7))

        # CLI use, loads from ~/.config/apothecary/config.json
        config = ApothecaryConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    data: DataConfig = field(default_factory=DataConfig)

    @classmethod
    def load(cls) -> "ApothecaryConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    _apply_dict(config, data)
                else:
                    logger.warning("Ignoring config file %s: not an object", CONFIG_FILE)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("APOTHECARY_MODE"):
            if _valid_mode(val):
                config.defaults.mode = val
            else:
                logger.warning("Invalid APOTHECARY_MODE=%r, ignoring", val)
        if val := os.environ.get("APOTHECARY_DISCIPLINE"):
            if _valid_discipline(val):
                config.defaults.discipline = val
            else:
                logger.warning("Invalid APOTHECARY_DISCIPLINE=%r, ignoring", val)
        if val := os.environ.get("APOTHECARY_SEED"):
            try:
                config.defaults.seed = int(val)
            except ValueError:
                logger.warning("Invalid APOTHECARY_SEED=%r, ignoring", val)
        if val := os.environ.get("APOTHECARY_DATA_DIR"):
            config.data.data_dir = val

        return config

    def save(self) -> None:
        """Save config to ~/.config/apothecary/config.json."""
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "defaults": asdict(self.defaults),
            "data": asdict(self.data),
        }

    @property
    def data_dir_resolved(self) -> Path:
        """Data directory as a Path."""
        return Path(self.data.data_dir).expanduser()


# =============================================================================
# Config dict application
# =============================================================================


def _valid_mode(value: Any) -> bool:
    return isinstance(value, str) and value in {m.value for m in CraftMode}


def _valid_discipline(value: str) -> bool:
    return Discipline.parse(value) is not None


def _apply_dict(config: ApothecaryConfig, data: dict) -> None:
    """Apply a dict of values onto an ApothecaryConfig."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if k == "mode" and not _valid_mode(v):
                logger.warning("Invalid defaults.mode=%r in config file, ignoring", v)
                continue
            if k == "discipline" and not _valid_discipline(v):
                logger.warning(
                    "Invalid defaults.discipline=%r in config file, ignoring", v
                )
                continue
            if k == "seed" and v is not None:
                try:
                    v = int(v)
                except (TypeError, ValueError):
                    logger.warning("Invalid defaults.seed=%r in config file, ignoring", v)
                    continue
            if hasattr(config.defaults, k):
                setattr(config.defaults, k, v)
    if "data" in data and isinstance(data["data"], dict):
        for k, v in data["data"].items():
            if k == "data_dir" and not (isinstance(v, str) and v.strip()):
                logger.warning("Invalid data.data_dir=%r in config file, ignoring", v)
                continue
            if hasattr(config.data, k):
                setattr(config.data, k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: ApothecaryConfig | None = None


def get_config() -> ApothecaryConfig:
    """Get the global ApothecaryConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = ApothecaryConfig.load()
    return _config


def configure(config: ApothecaryConfig) -> None:
    """Set the global ApothecaryConfig programmatically.

    Use this when apothecary is used as a package:
        from apothecary.config import configure, ApothecaryConfig, DataConfig
        configure(ApothecaryConfig(data=DataConfig(data_dir="campaign/data")))
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
