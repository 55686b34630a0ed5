# outputs.py

import logging
import sys
import threading
import time
from datetime import datetime, timezone
from uuid import uuid4

import jwt
import requests

from .log_levels import Level, level_names

_log = logging.getLogger("daemon_logging")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
OUTPUT_LOGGER_PREFIX = "daemon_logging.out"

# Most severe tier present in a message level decides the stdlib level
_STDLIB_LEVELS = (
    (Level.ERROR, logging.ERROR),
    (Level.AUDIT, logging.WARNING),
    (Level.INFO, logging.INFO),
)


def to_stdlib_level(level: Level) -> int:
    for tier, stdlib_level in _STDLIB_LEVELS:
        if level & tier:
            return stdlib_level
    return logging.DEBUG


class LogOutput:
    """Destination for formatted lines. Subclasses override write()."""

    def write(self, logger_name: str, context, level: Level, line: str):
        raise NotImplementedError

    def close(self):
        pass


class StreamOutput(LogOutput):
    """Hands lines to the standard library logging module."""

    def __init__(self, stream=None):
        base = logging.getLogger(OUTPUT_LOGGER_PREFIX)
        if not base.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            base.addHandler(handler)
            base.setLevel(logging.DEBUG)
            base.propagate = False

    def write(self, logger_name, context, level, line):
        logging.getLogger(f"{OUTPUT_LOGGER_PREFIX}.{logger_name}").log(to_stdlib_level(level), line)


class MemoryOutput(LogOutput):
    """Keeps (logger_name, context, level, line) tuples in memory."""

    def __init__(self):
        self.lines = []
        self.closed = False
        self._lock = threading.Lock()

    def write(self, logger_name, context, level, line):
        with self._lock:
            self.lines.append((logger_name, context, level, line))

    def close(self):
        self.closed = True


class HttpOutput(LogOutput):
    """Posts every line to a central collector, authenticated with a JWT."""

    def __init__(self, url, api_key="", service="daemon", timeout=2):
        self.url = url
        self.secret = api_key
        self.service = service
        self.timeout = timeout
        self.session = requests.Session()

    def _generate_jwt(self):
        payload = {
            "sub": self.service,
            "iat": int(time.time()),
            "exp": int(time.time()) + 3600,
        }
        token = jwt.encode(payload, self.secret, algorithm="HS256")
        return token if isinstance(token, str) else token.decode("utf-8")

    def write(self, logger_name, context, level, line):
        names = level_names(level)
        payload = {
            "level": names[0] if names else "NONE",
            "service": self.service,
            "logger_name": logger_name,
            "context": context.name,
            "message": line,
            "request_id": str(uuid4()),
            "client_log_datetime": datetime.now(timezone.utc).isoformat(),
        }
        try:
            headers = {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._generate_jwt()}",
            }
            response = self.session.post(self.url, json=payload, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except (requests.RequestException, jwt.PyJWTError) as e:
            _log.warning(f"Failed to deliver log line from {logger_name}: {e}")

    def close(self):
        self.session.close()


def create_output(kind="stream", url=None, api_key="", service="daemon"):
    kind = (kind or "stream").lower()
    if kind == "stream":
        return StreamOutput()
    if kind == "memory":
        return MemoryOutput()
    if kind == "http":
        if not url:
            raise ValueError("HTTP log output needs a collector URL")
        return HttpOutput(url, api_key=api_key, service=service)
    raise ValueError(f"Unknown log output: {kind!r}")
