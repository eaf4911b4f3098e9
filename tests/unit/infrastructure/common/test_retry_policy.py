from unittest.mock import AsyncMock

import pytest

from sdk_util_generator.core.application.exceptions import RemoteCallFailedError
from sdk_util_generator.infrastructure.common.retry import RetryPolicy


async def test_returns_result_on_first_success() -> None:
    fn = AsyncMock(return_value="ok")

    assert await RetryPolicy().run(fn) == "ok"
    fn.assert_awaited_once()


async def test_non_retryable_error_is_raised_immediately() -> None:
    fn = AsyncMock(side_effect=RemoteCallFailedError("bad request", retryable=False))

    with pytest.raises(RemoteCallFailedError):
        await RetryPolicy(max_attempts=3, initial_wait=0.0, max_wait=0.0, jitter=0.0).run(fn)

    assert fn.await_count == 1


async def test_retryable_error_is_retried_until_attempts_run_out() -> None:
    fn = AsyncMock(side_effect=RemoteCallFailedError("busy", retryable=True))

    with pytest.raises(RemoteCallFailedError, match="busy"):
        await RetryPolicy(max_attempts=3, initial_wait=0.0, max_wait=0.0, jitter=0.0).run(fn)

    assert fn.await_count == 3
