"""
Configuration file for A2A Billing
Runtime settings are read from the environment (or a .env file)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from utils.config import (
    COOKIE_BANNER_TIMEOUT, DEFAULT_TIMEOUT, LOGIN_TIMEOUT, PAGE_SOURCE_PATH, SCREENSHOT_PATH,
)
from utils.errors import ConfigurationError

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigurationError(name, f"expected a boolean, got '{value}'")


@dataclass(frozen=True)
class Settings:
    """Everything a run needs, passed explicitly into A2ABilling"""
    firebase_config: str
    username: str
    password: str
    executable_path: Optional[str] = None
    headless: bool = True
    debug: bool = False
    log_file: Optional[str] = None
    screenshot_path: str = SCREENSHOT_PATH
    page_source_path: str = PAGE_SOURCE_PATH
    login_timeout: float = LOGIN_TIMEOUT
    cookie_timeout: float = COOKIE_BANNER_TIMEOUT
    default_timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """Build settings from environment variables.

        When *env* is omitted, ``.env`` is loaded into ``os.environ`` first.
        Keyword *overrides* win over the environment (used by the CLI flags).

        Raises:
            ConfigurationError: If a required variable is missing.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        required = {}
        for name in ("FIREBASE_CONFIG", "A2A_USERNAME", "A2A_PASSWORD"):
            value = env.get(name)
            if not value:
                raise ConfigurationError(name, "environment variable is not set")
            required[name] = value

        values = dict(
            firebase_config=required["FIREBASE_CONFIG"],
            username=required["A2A_USERNAME"],
            password=required["A2A_PASSWORD"],
            executable_path=env.get("PUPPETEER_EXEC_PATH") or None,
            headless=_parse_bool("A2A_HEADLESS", env.get("A2A_HEADLESS"), True),
            debug=_parse_bool("A2A_DEBUG", env.get("A2A_DEBUG"), False),
            log_file=env.get("A2A_LOG_FILE") or None,
            screenshot_path=env.get("A2A_SCREENSHOT_PATH") or SCREENSHOT_PATH,
        )
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"Settings(username={self.username!r}, password='***', "
            f"headless={self.headless}, debug={self.debug}, "
            f"executable_path={self.executable_path!r})"
        )
