import pytest

from daemon_logging.log_levels import Level
from daemon_logging.log_manager import LoggerManager
from daemon_logging.logger import Logger
from daemon_logging.outputs import MemoryOutput


class CountingLogger(Logger):
    destroyed_count = 0

    def destroy(self):
        CountingLogger.destroyed_count += 1
        self.destroy_calls = getattr(self, "destroy_calls", 0) + 1
        super().destroy()


@pytest.fixture
def output():
    return MemoryOutput()


@pytest.fixture
def manager(output):
    manager = LoggerManager(default_level=Level.ERROR, output=output)
    yield manager
    if not manager.destroyed:
        manager.destroy()


@pytest.fixture
def counting_manager(output):
    CountingLogger.destroyed_count = 0
    manager = LoggerManager(default_level=Level.ERROR, output=output, logger_factory=CountingLogger)
    yield manager
    if not manager.destroyed:
        manager.destroy()
