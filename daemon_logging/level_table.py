# level_table.py

from .contexts import LoggerContext
from .log_levels import Level


class LevelTable:
    """Enabled levels per context.

    Every context gets the same default at construction and entries are never
    removed, so a lookup always resolves. Not thread-safe on its own; the
    LoggerManager lock guards it.
    """

    def __init__(self, default_level: Level = Level.NONE):
        self.default_level = Level(default_level)
        self._levels = {context: self.default_level for context in LoggerContext}

    def get(self, context: LoggerContext) -> Level:
        return self._levels.get(context, Level.NONE)

    def enable(self, context: LoggerContext, level: Level) -> Level:
        self._levels[context] = self.get(context) | level
        return self._levels[context]

    def disable(self, context: LoggerContext, level: Level) -> Level:
        self._levels[context] = self.get(context) & ~level
        return self._levels[context]

    def snapshot(self):
        return dict(self._levels)
