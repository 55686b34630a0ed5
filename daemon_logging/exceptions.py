# exceptions.py


class DaemonLoggingError(Exception):
    pass


class InvalidContextError(DaemonLoggingError, ValueError):
    """Raised for a context that is not a LoggerContext member."""


class LoggerNotFoundError(DaemonLoggingError, KeyError):
    """Raised when destroying a logger the manager does not hold."""


class ManagerDestroyedError(DaemonLoggingError, RuntimeError):
    """Raised on any call to a LoggerManager after destroy()."""
