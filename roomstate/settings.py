from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_HISTORY_LIMIT = 100
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class Settings:
    # None => unbounded undo stack / session log.
    history_limit: int | None = DEFAULT_HISTORY_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL


def _history_limit_from_env() -> int | None:
    raw = os.environ.get("ROOMSTATE_HISTORY_LIMIT", "").strip()
    if not raw:
        return DEFAULT_HISTORY_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"ROOMSTATE_HISTORY_LIMIT must be an integer, got {raw!r}") from None
    if limit < 0:
        raise ValueError("ROOMSTATE_HISTORY_LIMIT must be >= 0")
    return limit or None


def _log_level_from_env() -> str:
    level = os.environ.get("ROOMSTATE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown ROOMSTATE_LOG_LEVEL: {level}")
    return level


def load_settings(*, env_file: Path | None = None) -> Settings:
    """Read settings from the environment.

    If `env_file` exists it is loaded first; variables already exported in the
    process win over the file.
    """

    if env_file is not None and env_file.exists():
        load_dotenv(dotenv_path=env_file, override=False)

    return Settings(history_limit=_history_limit_from_env(), log_level=_log_level_from_env())


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)
