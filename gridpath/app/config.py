# gridpath/app/config.py
#!/usr/bin/env python3
"""
Runtime settings.

- ENV: GRIDPATH_GLYPHS=emoji|ascii, GRIDPATH_PATH_MODE=trail|route,
       GRIDPATH_LOG_LEVEL=<level>, GRIDPATH_STEPS_PER_SEC=<int>
- CLI: the matching command line options override the environment.
"""

from dataclasses import dataclass, replace
from typing import Mapping, Optional
import logging
import os

logger = logging.getLogger(__name__)

GLYPH_CHOICES = ("emoji", "ascii")
PATH_MODE_CHOICES = ("trail", "route")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    glyphs: str = "emoji"
    path_mode: str = "trail"
    log_level: str = "WARNING"
    steps_per_sec: int = 8


def _choice(env: Mapping[str, str], key: str, choices, default: str, upper: bool = False) -> str:
    raw = env.get(key)
    if raw is None:
        return default
    value = raw.strip().upper() if upper else raw.strip().lower()
    if value not in choices:
        logger.warning("ignoring %s=%r, expected one of %s", key, raw, ", ".join(choices))
        return default
    return value


def resolve_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    defaults = Settings()
    steps = defaults.steps_per_sec
    raw_steps = env.get("GRIDPATH_STEPS_PER_SEC")
    if raw_steps is not None:
        try:
            steps = max(1, min(60, int(raw_steps)))
        except ValueError:
            logger.warning("ignoring GRIDPATH_STEPS_PER_SEC=%r, expected an integer", raw_steps)
    return Settings(
        glyphs=_choice(env, "GRIDPATH_GLYPHS", GLYPH_CHOICES, defaults.glyphs),
        path_mode=_choice(env, "GRIDPATH_PATH_MODE", PATH_MODE_CHOICES, defaults.path_mode),
        log_level=_choice(env, "GRIDPATH_LOG_LEVEL", LOG_LEVELS, defaults.log_level, upper=True),
        steps_per_sec=steps,
    )


def override(settings: Settings, **values) -> Settings:
    """Apply command line values that were actually given."""
    given = {k: v for k, v in values.items() if v is not None}
    return replace(settings, **given)
