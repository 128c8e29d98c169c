"""
Settings read from the environment.

    OBSCURA_KEY         default encryption key for Codec and the CLI
    OBSCURA_HEX_OUTPUT  "1" to hex-encode encrypted output (default), "0" for raw
    OBSCURA_LOG_LEVEL   CLI log level, e.g. DEBUG or WARNING (default)
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    key: str = ""
    hex_output: bool = True
    log_level: str = "WARNING"

    def validate(self) -> None:
        """Raise ValueError if a setting is out of range."""
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"OBSCURA_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")


def load_settings(environ=None) -> Settings:
    """Build Settings from environment variables (os.environ by default)."""
    env = os.environ if environ is None else environ
    settings = Settings(
        key=env.get("OBSCURA_KEY", ""),
        hex_output=env.get("OBSCURA_HEX_OUTPUT", "1").strip() not in ("0", "false", "no"),
        log_level=env.get("OBSCURA_LOG_LEVEL", "WARNING").strip().upper(),
    )
    settings.validate()
    if not settings.key:
        logger.debug("OBSCURA_KEY is not set; a key must be passed explicitly")
    return settings


@lru_cache()
def get_settings() -> Settings:
    """Cached settings for the current process."""
    return load_settings()
