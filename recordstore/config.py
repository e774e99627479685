"""
recordstore configuration.
Environment-driven defaults for store construction and logging.
"""

import logging
import os

from dotenv import load_dotenv

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_settings():
    """Load .env (existing variables win) and return settings from the environment."""
    load_dotenv()
    return Settings()


class Settings:
    """Library settings loaded from environment."""

    # Level used by setup_logging()
    RECORDSTORE_LOG_LEVEL: str = "INFO"

    # Default for create_store(thread_safe=...)
    RECORDSTORE_THREAD_SAFE: bool = True

    def __init__(self):
        level = (os.environ.get("RECORDSTORE_LOG_LEVEL") or "INFO").strip().upper()
        self.RECORDSTORE_LOG_LEVEL = level if level in _LEVELS else "INFO"
        thread_safe = (os.environ.get("RECORDSTORE_THREAD_SAFE") or "").strip().lower()
        if thread_safe in _FALSE:
            self.RECORDSTORE_THREAD_SAFE = False
        elif thread_safe in _TRUE or not thread_safe:
            self.RECORDSTORE_THREAD_SAFE = True
        else:
            logging.getLogger(__name__).warning(
                "Ignoring RECORDSTORE_THREAD_SAFE=%r, expected one of %s",
                thread_safe, _TRUE + _FALSE,
            )
            self.RECORDSTORE_THREAD_SAFE = True


def setup_logging(settings=None) -> None:
    """Configure root logging for scripts using the store. The library never calls this itself."""
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.RECORDSTORE_LOG_LEVEL))
