# logger.py

import threading

from .exceptions import LoggerNotFoundError, ManagerDestroyedError
from .log_levels import (
    Level,
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_INFO,
    LOG_LEVEL_AUDIT,
    LOG_LEVEL_ERROR,
    LOG_LEVEL_RAW,
    LOG_LEVEL_PRIVATE,
)

BYTES_PER_LINE = 16


def should_log(enabled_levels, message_level):
    return bool(enabled_levels & message_level)


class Logger:
    """Emitter for one subsystem context.

    The enabled levels are not stored here: every check asks ``level_control``
    (normally the LoggerManager) for the context's current entry, so a level
    change applies to all loggers of that context at once.
    """

    def __init__(self, name, context, level_control, output, log_thread_ids=False):
        self.name = name
        self.context = context
        self.output = output
        self.log_thread_ids = log_thread_ids
        self._level_control = level_control

    @property
    def level(self) -> Level:
        control = self._level_control
        if control is None:
            return Level.NONE
        try:
            return control.get_logger_level(self.context)
        except ManagerDestroyedError:
            return Level.NONE

    @property
    def destroyed(self) -> bool:
        return self._level_control is None

    def _control(self):
        control = self._level_control
        if control is None:
            raise LoggerNotFoundError(f"{self!r} has been destroyed")
        return control

    def enable_level(self, level: Level):
        self._control().enable_logger_level(self.context, level)

    def disable_level(self, level: Level):
        self._control().disable_logger_level(self.context, level)

    def is_enabled_for(self, level: Level) -> bool:
        return should_log(self.level, level)

    def _emit(self, level, line):
        if self.log_thread_ids:
            line = f"[{threading.get_ident()}] {line}"
        self.output.write(self.name, self.context, level, line)

    def log(self, level, message, *args):
        if not self.is_enabled_for(level):
            return
        self._emit(level, message % args if args else message)

    def log_bytes(self, level, label, data):
        """Emit a hex dump of ``data``, BYTES_PER_LINE bytes per line."""
        if not self.is_enabled_for(level):
            return
        data = bytes(data)
        self._emit(level, f"{label} ({len(data)} bytes)")
        for offset in range(0, len(data), BYTES_PER_LINE):
            chunk = data[offset:offset + BYTES_PER_LINE]
            self._emit(level, f"  {offset:04x}: {chunk.hex(' ')}")

    def error(self, message, *args): self.log(LOG_LEVEL_ERROR, message, *args)
    def audit(self, message, *args): self.log(LOG_LEVEL_AUDIT, message, *args)
    def info(self, message, *args): self.log(LOG_LEVEL_INFO, message, *args)
    def debug(self, message, *args): self.log(LOG_LEVEL_DEBUG, message, *args)
    def raw(self, message, *args): self.log(LOG_LEVEL_RAW, message, *args)
    def private(self, message, *args): self.log(LOG_LEVEL_PRIVATE, message, *args)

    def destroy(self):
        """Detach from the manager. Later messages are discarded."""
        self._level_control = None

    def __repr__(self):
        return f"<Logger {self.name} context={self.context.name}>"
