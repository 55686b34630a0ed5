# log_manager.py

import logging
import threading

from .config import load_settings
from .contexts import validate_context
from .exceptions import ManagerDestroyedError
from .level_table import LevelTable
from .log_levels import Level, level_names, validate_level
from .logger import Logger
from .outputs import StreamOutput, create_output
from .registry import LoggerRecord, LoggerRegistry

_log = logging.getLogger("daemon_logging")


class LoggerManager:
    """Creates, tracks and destroys loggers and owns the per-context levels.

    One RLock serialises every operation on the registry and the level table.
    Loggers that are never passed to destroy_logger() are destroyed by
    destroy(). Unknown handles given to destroy_logger() raise
    LoggerNotFoundError.
    """

    def __init__(self, default_level: Level = Level.ERROR, output=None,
                 log_thread_ids: bool = False, logger_factory=Logger):
        self._levels = LevelTable(default_level)
        self._registry = LoggerRegistry()
        self._lock = threading.RLock()
        self._destroyed = False
        self.output = output if output is not None else StreamOutput()
        self.log_thread_ids = log_thread_ids
        self.logger_factory = logger_factory

    def _check_alive(self):
        if self._destroyed:
            raise ManagerDestroyedError("LoggerManager has been destroyed")

    @property
    def destroyed(self) -> bool:
        with self._lock:
            return self._destroyed

    @property
    def default_level(self) -> Level:
        return self._levels.default_level

    def create_logger(self, context, name: str = None):
        context = validate_context(context)
        display_name = f"{context.label}.{name}" if name else context.label
        with self._lock:
            self._check_alive()
            logger = self.logger_factory(display_name, context, self, self.output,
                                         log_thread_ids=self.log_thread_ids)
            self._registry.add(LoggerRecord(logger, context, name))
            _log.debug(f"Created logger {display_name}")
            return logger

    def get_logger(self, context, name: str = None):
        """Return the registered logger for (context, name), creating it if needed."""
        context = validate_context(context)
        with self._lock:
            self._check_alive()
            record = self._registry.find(context, name)
            if record is not None:
                return record.logger
            return self.create_logger(context, name)

    def destroy_logger(self, logger):
        with self._lock:
            self._check_alive()
            record = self._registry.remove(logger)
            record.logger.destroy()
            _log.debug(f"Destroyed logger {logger.name}")

    def get_logger_level(self, context) -> Level:
        context = validate_context(context)
        with self._lock:
            self._check_alive()
            return self._levels.get(context)

    def enable_logger_level(self, context, level: Level):
        context = validate_context(context)
        level = validate_level(level)
        with self._lock:
            self._check_alive()
            enabled = self._levels.enable(context, level)
        _log.debug(f"{context.name} levels now {level_names(enabled)}")

    def disable_logger_level(self, context, level: Level):
        context = validate_context(context)
        level = validate_level(level)
        with self._lock:
            self._check_alive()
            enabled = self._levels.disable(context, level)
        _log.debug(f"{context.name} levels now {level_names(enabled)}")

    def levels(self):
        with self._lock:
            self._check_alive()
            return self._levels.snapshot()

    def active_loggers(self, context=None):
        if context is not None:
            context = validate_context(context)
        with self._lock:
            self._check_alive()
            return [record.logger for record in self._registry.records(context)]

    def __len__(self):
        with self._lock:
            self._check_alive()
            return len(self._registry)

    def destroy(self):
        """Destroy every logger still registered, then the manager itself."""
        with self._lock:
            self._check_alive()
            self._destroyed = True
            records = self._registry.drain()
            for record in records:
                try:
                    record.logger.destroy()
                except Exception as e:
                    _log.warning(f"Error destroying logger {record.logger!r}: {e}")
            try:
                self.output.close()
            except Exception as e:
                _log.warning(f"Error closing log output: {e}")
            _log.debug(f"LoggerManager destroyed, released {len(records)} logger(s)")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        with self._lock:
            if not self._destroyed:
                self.destroy()


_manager_instance = None
_manager_lock = threading.RLock()


def get_logger_manager() -> LoggerManager:
    """Process-wide manager, built from the environment on first use."""
    global _manager_instance
    with _manager_lock:
        if _manager_instance is None or _manager_instance.destroyed:
            settings = load_settings()
            _manager_instance = LoggerManager(
                default_level=settings.default_level,
                output=create_output(
                    settings.output,
                    url=settings.url,
                    api_key=settings.api_key,
                    service=settings.service,
                ),
                log_thread_ids=settings.log_thread_ids,
            )
        return _manager_instance


def shutdown_logger_manager():
    global _manager_instance
    with _manager_lock:
        manager, _manager_instance = _manager_instance, None
        if manager is not None and not manager.destroyed:
            manager.destroy()
