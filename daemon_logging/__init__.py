from .contexts import LoggerContext
from .exceptions import (
    DaemonLoggingError,
    InvalidContextError,
    LoggerNotFoundError,
    ManagerDestroyedError,
)
from .log_levels import (
    Level,
    LOG_LEVEL_ERROR,
    LOG_LEVEL_AUDIT,
    LOG_LEVEL_INFO,
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_RAW,
    LOG_LEVEL_PRIVATE,
    LOG_LEVELS,
)
from .log_manager import LoggerManager, get_logger_manager, shutdown_logger_manager
from .logger import Logger


def get_logger(context: LoggerContext, name: str = None) -> Logger:
    return get_logger_manager().get_logger(context, name)


def set_log_level(context: LoggerContext, level: Level, enabled: bool = True):
    manager = get_logger_manager()
    if enabled:
        manager.enable_logger_level(context, level)
    else:
        manager.disable_logger_level(context, level)
