"""
Runtime settings for miniplot.
Loads MINIPLOT_* variables from .env in the project root, then from the environment.
"""

import logging
import math
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

# Load .env from project root (miniplot/config.py -> parent.parent = project root)
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    backend: str | None = None
    figsize: tuple[float, float] = (10.0, 5.0)
    dpi: int = 100
    log_level: str = "WARNING"

    @field_validator("figsize")
    @classmethod
    def _finite_positive_figsize(cls, v: tuple[float, float]) -> tuple[float, float]:
        if not all(math.isfinite(side) and side > 0 for side in v):
            raise ValueError(f"figsize must be finite and positive, got {v}")
        return v

    @field_validator("dpi")
    @classmethod
    def _positive_dpi(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"dpi must be positive, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}. Expected one of {list(_LOG_LEVELS)}")
        return level


def _parse_figsize(raw: str) -> tuple[float, float]:
    """Parse "W,H" (inches)."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"MINIPLOT_FIGSIZE must be 'W,H', got {raw!r}")
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError:
        raise ValueError(f"MINIPLOT_FIGSIZE must be numeric 'W,H', got {raw!r}") from None


def _load_settings() -> Settings:
    """Build Settings from MINIPLOT_* environment variables; unset ones keep defaults."""
    values: dict = {}
    backend = (os.environ.get("MINIPLOT_BACKEND") or "").strip()
    if backend:
        values["backend"] = backend
    figsize = (os.environ.get("MINIPLOT_FIGSIZE") or "").strip()
    if figsize:
        values["figsize"] = _parse_figsize(figsize)
    dpi = (os.environ.get("MINIPLOT_DPI") or "").strip()
    if dpi:
        values["dpi"] = dpi
    level = (os.environ.get("MINIPLOT_LOG_LEVEL") or "").strip()
    if level:
        values["log_level"] = level
    # pydantic's ValidationError subclasses ValueError
    return Settings(**values)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = _load_settings()
        logging.getLogger("miniplot").setLevel(_settings.log_level)
        logger.debug("Loaded settings: %s", _settings)
    return _settings


def reload_settings() -> Settings:
    """Drop cached settings and re-read the environment (e.g. for tests)."""
    global _settings
    _settings = None
    return get_settings()
