# environment driven settings for the cli, the library functions themselves take no configuration

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from dotenv import find_dotenv, load_dotenv
from .errors import InvalidArgument

DEFAULT_UPPER_LIMIT = 100
DEFAULT_LOG_LEVEL = "WARNING"

@dataclass(frozen=True)
class Settings:
    upper_limit: int = DEFAULT_UPPER_LIMIT
    log_level: str = DEFAULT_LOG_LEVEL

def load_settings() -> Settings:
    # search from the working directory, not from this module, so a project .env is found
    load_dotenv(find_dotenv(usecwd=True))
    raw_limit = os.getenv("QUIZSTATS_UPPER_LIMIT")
    limit = DEFAULT_UPPER_LIMIT
    if raw_limit:
        try:
            limit = int(raw_limit)
        except ValueError as exc:
            # fail early with the variable name instead of a bare int() message
            raise InvalidArgument(f"QUIZSTATS_UPPER_LIMIT must be an integer (got {raw_limit!r})") from exc

    log_level = (os.getenv("QUIZSTATS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise InvalidArgument(f"QUIZSTATS_LOG_LEVEL is not a logging level (got {log_level!r})")
    return Settings(upper_limit=limit, log_level=log_level)
