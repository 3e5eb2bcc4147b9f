"""Export settings, overridable through ``GEMWIKI_*`` environment variables."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

_ENV_PREFIX = "GEMWIKI_"


class ExportSettings(BaseModel):
    """Knobs for turning game data into wiki parameters."""

    separator: str = "<br>"
    """Joins rendered descriptions into one stat text."""

    max_gem_level: int = 20
    """Progression rows above this level are exported as disabled."""

    quality_levels: tuple[int, ...] = (1, 20)
    """Quality values the quality stats are evaluated at (min, max)."""

    log_level: str = "WARNING"

    @field_validator("max_gem_level")
    @classmethod
    def _validate_max_gem_level(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_gem_level must be at least 1")
        return v

    @field_validator("quality_levels")
    @classmethod
    def _validate_quality_levels(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not v:
            raise ValueError("At least one quality level required")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v!r}")
        return level


def load_settings(environ: dict[str, str] | None = None) -> ExportSettings:
    """Build settings from defaults plus ``GEMWIKI_*`` environment overrides.

    Recognised variables: ``GEMWIKI_SEPARATOR``, ``GEMWIKI_MAX_GEM_LEVEL``,
    ``GEMWIKI_QUALITY_LEVELS`` (comma separated) and ``GEMWIKI_LOG_LEVEL``.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}

    separator = env.get(f"{_ENV_PREFIX}SEPARATOR")
    if separator is not None:
        overrides["separator"] = separator

    max_level = env.get(f"{_ENV_PREFIX}MAX_GEM_LEVEL")
    if max_level:
        overrides["max_gem_level"] = max_level

    quality = env.get(f"{_ENV_PREFIX}QUALITY_LEVELS")
    if quality:
        overrides["quality_levels"] = tuple(part.strip() for part in quality.split(",") if part.strip())

    log_level = env.get(f"{_ENV_PREFIX}LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level

    if overrides:
        logger.debug("Settings overridden from environment: %s", sorted(overrides))
    return ExportSettings.model_validate(overrides)
