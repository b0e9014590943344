"""Application configuration helpers."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Holds configuration values for wiring a document repository."""

    log_level: str = "WARNING"
    thread_safe: bool = False

    def __post_init__(self) -> None:
        """Normalize ``log_level`` to an upper-case logging level name."""

        object.__setattr__(
            self, "log_level", _parse_log_level(self.log_level, "log_level")
        )

    @property
    def log_level_number(self) -> int:
        """Return the numeric ``logging`` level for ``log_level``."""

        return logging.getLevelName(self.log_level)


def _parse_bool(raw: str, variable: str) -> bool:
    """Interpret ``raw`` as a boolean flag read from ``variable``."""

    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{variable} must be a boolean flag, got {raw!r}.")


def _parse_log_level(raw: str, variable: str) -> str:
    """Validate ``raw`` as a standard logging level name."""

    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{variable} must be a logging level name, got {raw!r}.")
    return level


def get_settings() -> Settings:
    """Provide settings, applying ``DOCSTORE_*`` environment overrides."""

    settings = Settings()

    log_level = os.getenv("DOCSTORE_LOG_LEVEL")
    if log_level:
        settings = replace(
            settings, log_level=_parse_log_level(log_level, "DOCSTORE_LOG_LEVEL")
        )

    thread_safe = os.getenv("DOCSTORE_THREAD_SAFE")
    if thread_safe:
        settings = replace(
            settings, thread_safe=_parse_bool(thread_safe, "DOCSTORE_THREAD_SAFE")
        )

    return settings
