# log_levels.py

import enum


class Level(enum.IntFlag):
    """Set of enabled verbosity tiers. Tiers combine with ``|``."""
    NONE = 0
    ERROR = 1
    AUDIT = 2
    INFO = 4
    DEBUG = 8
    RAW = 16
    PRIVATE = 32
    ALL = ERROR | AUDIT | INFO | DEBUG | RAW | PRIVATE


LOG_LEVEL_ERROR = Level.ERROR
LOG_LEVEL_AUDIT = Level.AUDIT
LOG_LEVEL_INFO = Level.INFO
LOG_LEVEL_DEBUG = Level.DEBUG
LOG_LEVEL_RAW = Level.RAW
LOG_LEVEL_PRIVATE = Level.PRIVATE

# Most to least severe
LOG_LEVELS = (
    LOG_LEVEL_ERROR,
    LOG_LEVEL_AUDIT,
    LOG_LEVEL_INFO,
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_RAW,
    LOG_LEVEL_PRIVATE,
)


def parse_levels(text: str) -> Level:
    """Parse ``"ERROR|DEBUG"`` or ``"error, debug"`` into a Level set."""
    result = Level.NONE
    for part in text.replace(",", "|").split("|"):
        part = part.strip().upper()
        if not part:
            continue
        try:
            result |= Level[part]
        except KeyError:
            raise ValueError(f"Unknown log level: {part!r}") from None
    return result


def level_names(level: Level):
    return [tier.name for tier in LOG_LEVELS if level & tier]


def validate_level(level) -> Level:
    """Reject bits that are not one of the defined tiers."""
    if int(level) & ~int(Level.ALL):
        raise ValueError(f"Unknown log level bits: {int(level):#x}")
    return Level(level)
