# core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from lrcplayer.core.display import DisplayThresholds

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_TICK_HZ = 60
DEFAULT_HTTP_TIMEOUT = 15.0


def _float_env(env: Mapping[str, str], name: str, default: float, lo: float, hi: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    if not lo <= value <= hi:
        logger.warning("Ignoring %s=%r: expected %s..%s", name, raw, lo, hi)
        return default
    return value


@dataclass(frozen=True)
class AppConfig:
    api_url: str = DEFAULT_API_URL
    tick_hz: int = DEFAULT_TICK_HZ
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"
    log_file: Optional[str] = None
    thresholds: DisplayThresholds = DisplayThresholds()

    @property
    def tick_interval_ms(self) -> int:
        return max(1, int(round(1000 / self.tick_hz)))

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if env is None else env

        api_url = (env.get("LRCPLAYER_API_URL") or DEFAULT_API_URL).strip().rstrip("/")
        tick_hz = int(_float_env(env, "LRCPLAYER_TICK_HZ", DEFAULT_TICK_HZ, 1, 240))
        http_timeout = _float_env(env, "LRCPLAYER_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT, 0.5, 300)

        log_level = (env.get("LRCPLAYER_LOG_LEVEL") or "INFO").strip().upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.warning("Ignoring LRCPLAYER_LOG_LEVEL=%r", log_level)
            log_level = "INFO"

        defaults = DisplayThresholds()
        thresholds = DisplayThresholds(
            min_display_s=_float_env(env, "LRCPLAYER_MIN_DISPLAY_S", defaults.min_display_s, 0, 60),
            lead_in_s=_float_env(env, "LRCPLAYER_LEAD_IN_S", defaults.lead_in_s, 0, 10),
        )

        return cls(
            api_url=api_url,
            tick_hz=tick_hz,
            http_timeout=http_timeout,
            log_level=log_level,
            log_file=env.get("LRCPLAYER_LOG_FILE") or None,
            thresholds=thresholds,
        )
