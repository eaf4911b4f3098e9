"""Implements ChatCompletionPort over ``httpx.AsyncClient``."""

import time
from typing import Any

import httpx
import structlog

from sdk_util_generator.core.application.exceptions import (
    RemoteCallFailedError,
    RemoteCallTimeoutError,
)
from sdk_util_generator.core.application.ports import ChatCompletionPort
from sdk_util_generator.infrastructure.adapters.llm.chat_response_parser import (
    extract_message_content,
    parse_response_body,
)
from sdk_util_generator.infrastructure.common.retry import RetryPolicy
from sdk_util_generator.infrastructure.configuration.generation_settings import (
    GenerationSettings,
)
from sdk_util_generator.infrastructure.observability.redaction_service import redact_for_log

logger = structlog.get_logger()


class ChatCompletionHttpAdapter(ChatCompletionPort):
    """Posts a single user message to the configured chat-completion endpoint.

    The request disables the endpoint's retrieval, guardrail and function
    metadata. The bearer token is only sent when one is configured.
    """

    def __init__(self, settings: GenerationSettings, retry_policy: RetryPolicy | None = None) -> None:
        self._url = settings.api_url
        self._api_key = settings.api_key
        self._default_timeout = settings.request_timeout_seconds
        self._retry_policy = retry_policy or RetryPolicy(max_attempts=settings.max_attempts)

    async def complete(self, prompt: str, *, timeout: float | None = None) -> str:
        payload = self._build_payload(prompt)
        effective_timeout = self._default_timeout if timeout is None else timeout
        logger.info(
            "Sending payload to chat endpoint",
            prompt_text=redact_for_log(prompt),
            endpoint=self._url,
            timeout_seconds=effective_timeout,
            tags=["llm-prompt"],
        )
        data = await self._retry_policy.run(lambda: self._post(payload, effective_timeout))
        return extract_message_content(data)

    async def _post(self, payload: dict[str, Any], timeout: float) -> Any:
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(self._url, json=payload, headers=self._headers())
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise RemoteCallTimeoutError(
                f"API call timed out after {timeout}s",
                retryable=True,
                context={"endpoint": self._url},
            ) from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise RemoteCallFailedError(
                f"API call failed: HTTP {status_code}",
                retryable=status_code >= 500,
                status_code=status_code,
                context={"endpoint": self._url},
            ) from exc
        except httpx.HTTPError as exc:
            raise RemoteCallFailedError(
                f"API call failed: {exc}",
                retryable=True,
                context={"endpoint": self._url},
            ) from exc

        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        logger.info(
            "Chat endpoint responded",
            endpoint=self._url,
            status_code=response.status_code,
            processing_status="SUCCESS",
            processing_duration_ms=duration_ms,
            tags=["llm-response"],
        )
        return parse_response_body(response.text, self._url)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key is not None:
            headers["Authorization"] = f"Bearer {self._api_key.get_secret_value()}"
        return headers

    @staticmethod
    def _build_payload(prompt: str) -> dict[str, Any]:
        return {
            "messages": [{"role": "user", "content": prompt}],
            "stream": False,
            "include_functions_info": False,
            "include_retrieval_info": False,
            "include_guardrails_info": False,
        }
