import pytest
from sqlalchemy.exc import OperationalError

from authdesk.infrastructure.resilience import call_with_retries
from authdesk.shared.config import ResilienceConfig

FAST = ResilienceConfig(RESILIENCE_RETRIES=2, RESILIENCE_BACKOFF_BASE=0.01, RESILIENCE_BACKOFF_CAP=0.02)


def _flaky(failures: int):
    calls = []

    def func() -> str:
        calls.append(1)
        if len(calls) <= failures:
            raise OperationalError("SELECT 1", {}, Exception("database is starting"))
        return "ready"

    return func, calls


def test_retries_until_database_is_reachable() -> None:
    func, calls = _flaky(2)

    assert call_with_retries(func, FAST) == "ready"
    assert len(calls) == 3


def test_gives_up_after_configured_attempts() -> None:
    func, calls = _flaky(5)

    with pytest.raises(OperationalError):
        call_with_retries(func, FAST)

    assert len(calls) == 3


def test_other_errors_are_not_retried() -> None:
    calls = []

    def func() -> None:
        calls.append(1)
        raise ValueError("bad schema")

    with pytest.raises(ValueError):
        call_with_retries(func, FAST)

    assert len(calls) == 1
