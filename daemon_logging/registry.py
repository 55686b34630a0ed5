# registry.py

from dataclasses import dataclass
from typing import Optional

from .contexts import LoggerContext
from .exceptions import LoggerNotFoundError


@dataclass(frozen=True)
class LoggerRecord:
    logger: object
    context: LoggerContext
    name: Optional[str] = None


class LoggerRegistry:
    """Owns the live LoggerRecords, keyed by logger identity."""

    def __init__(self):
        self._records = {}

    def add(self, record: LoggerRecord):
        self._records[id(record.logger)] = record

    def remove(self, logger) -> LoggerRecord:
        try:
            return self._records.pop(id(logger))
        except KeyError:
            raise LoggerNotFoundError(f"Logger not registered: {logger!r}") from None

    def find(self, context: LoggerContext, name: Optional[str] = None):
        for record in self._records.values():
            if record.context is context and record.name == name:
                return record
        return None

    def records(self, context: Optional[LoggerContext] = None):
        return [r for r in self._records.values() if context is None or r.context is context]

    def drain(self):
        """Empty the registry and hand every record back for teardown."""
        records = list(self._records.values())
        self._records.clear()
        return records

    def __contains__(self, logger):
        return id(logger) in self._records

    def __len__(self):
        return len(self._records)
