# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Retry helpers for infrastructure that may not be reachable yet."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.exc import OperationalError
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from authdesk.shared.config import ResilienceConfig
from authdesk.shared.logging import logger

T = TypeVar("T")


def _log_retry(state: RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning(
        f"resilience: attempt={state.attempt_number} failed "
        f"({type(exc).__name__ if exc else 'unknown'}), retrying"
    )


def call_with_retries(func: Callable[[], T], config: ResilienceConfig) -> T:  # noqa: UP047
    """Run ``func``, retrying connection-level database failures with backoff.

    The last error is re-raised once the attempts are exhausted.
    """

    retrying = Retrying(
        stop=stop_after_attempt(config.max_retries + 1),
        wait=wait_exponential(multiplier=config.backoff_base, max=config.backoff_cap),
        retry=retry_if_exception_type(OperationalError),
        before_sleep=_log_retry,
        reraise=True,
    )
    return retrying(func)


__all__ = ["call_with_retries"]
