from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from sdk_util_generator.core.application.exceptions import RemoteCallFailedError

_T = TypeVar("_T")


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, RemoteCallFailedError) and exc.retryable


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 1  # Default: Fail fast (1 attempt, 0 retries)
    initial_wait: float = 0.25
    max_wait: float = 5.0
    jitter: float = 1.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        return await self._retrying()(fn)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(
                initial=self.initial_wait, max=self.max_wait, jitter=self.jitter
            ),
            reraise=True,
        )
