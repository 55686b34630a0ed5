# config.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .log_levels import Level, parse_levels

DEFAULT_LEVEL = "ERROR|AUDIT"
DEFAULT_URL = "http://localhost:8080/log"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    default_level: Level = Level.ERROR | Level.AUDIT
    output: str = "stream"
    url: str = DEFAULT_URL
    api_key: str = ""
    service: str = "daemon"
    log_thread_ids: bool = False


def load_settings(env=None, dotenv_path=None) -> Settings:
    """Read DAEMON_LOGGING_* settings, from ``env`` or os.environ plus .env."""
    if env is None:
        load_dotenv(dotenv_path)
        env = os.environ
    return Settings(
        default_level=parse_levels(env.get("DAEMON_LOGGING_DEFAULT_LEVEL", DEFAULT_LEVEL)),
        output=env.get("DAEMON_LOGGING_OUTPUT", "stream").lower(),
        url=env.get("DAEMON_LOGGING_URL", DEFAULT_URL),
        api_key=env.get("DAEMON_LOGGING_API_KEY", ""),
        service=env.get("DAEMON_LOGGING_SERVICE", "daemon"),
        log_thread_ids=env.get("DAEMON_LOGGING_THREAD_IDS", "").strip().lower() in _TRUE_VALUES,
    )
