import pytest

from daemon_logging.contexts import LoggerContext, validate_context
from daemon_logging.exceptions import InvalidContextError


def test_sixteen_contexts():
    assert len(LoggerContext) == 16


def test_validate_accepts_members():
    assert validate_context(LoggerContext.WORKER) is LoggerContext.WORKER


@pytest.mark.parametrize("bad", ["WORKER", 7, None])
def test_validate_rejects_non_members(bad):
    with pytest.raises(InvalidContextError):
        validate_context(bad)


def test_from_string():
    assert LoggerContext.from_string("thread-pool") is LoggerContext.THREAD_POOL
    assert LoggerContext.from_string("Scheduler") is LoggerContext.SCHEDULER
    with pytest.raises(InvalidContextError):
        LoggerContext.from_string("kernel")
