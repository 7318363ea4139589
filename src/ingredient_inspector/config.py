"""Settings read from the environment."""

import dataclasses
import logging
import os
import pathlib
from typing import Mapping, Optional

from ingredient_inspector.lookup import DEFAULT_BASE_URL, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

DB_PATH_ENV = "INGREDIENT_INSPECTOR_DB"
API_URL_ENV = "INGREDIENT_INSPECTOR_API_URL"
USER_AGENT_ENV = "INGREDIENT_INSPECTOR_USER_AGENT"
TIMEOUT_ENV = "INGREDIENT_INSPECTOR_TIMEOUT"

DEFAULT_DB_PATH = pathlib.Path("data/watchlist.db")
DEFAULT_TIMEOUT = 30.0


@dataclasses.dataclass
class Settings:
    db_path: pathlib.Path = DEFAULT_DB_PATH
    api_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Settings instance
        """
        if environ is None:
            environ = os.environ

        timeout = DEFAULT_TIMEOUT
        raw_timeout = environ.get(TIMEOUT_ENV)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
                if timeout <= 0:
                    raise ValueError("timeout must be positive")
            except ValueError:
                logger.warning(
                    f"Invalid {TIMEOUT_ENV}={raw_timeout!r}, using {DEFAULT_TIMEOUT}s"
                )
                timeout = DEFAULT_TIMEOUT

        return cls(
            db_path=pathlib.Path(environ.get(DB_PATH_ENV) or DEFAULT_DB_PATH),
            api_url=environ.get(API_URL_ENV) or DEFAULT_BASE_URL,
            user_agent=environ.get(USER_AGENT_ENV) or DEFAULT_USER_AGENT,
            timeout=timeout,
        )
