# contexts.py

import enum

from .exceptions import InvalidContextError


class LoggerContext(enum.Enum):
    """Daemon subsystems a logger can speak for. Values are display labels."""
    PARSER = "PARSER"
    GENERATOR = "GENRAT"
    SESSION = "SESS"
    SESSION_MANAGER = "SESSMGR"
    CHILD_SESSION = "CHDSESS"
    MESSAGE = "MESSAGE"
    THREAD_POOL = "THRPOOL"
    WORKER = "WORKER"
    SCHEDULER = "SCHEDUL"
    SENDER = "SENDER"
    RECEIVER = "RECEIVR"
    SOCKET = "SOCKET"
    TESTER = "TESTER"
    DAEMON = "DAEMON"
    CONFIGURATION_MANAGER = "CONFIG"
    ENCRYPTION_PAYLOAD = "ENCPLD"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, name: str) -> "LoggerContext":
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise InvalidContextError(f"Unknown logger context: {name!r}") from None


def validate_context(context) -> LoggerContext:
    if not isinstance(context, LoggerContext):
        raise InvalidContextError(f"Not a LoggerContext: {context!r}")
    return context
