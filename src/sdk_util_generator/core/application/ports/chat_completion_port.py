from abc import ABC, abstractmethod


class ChatCompletionPort(ABC):
    """Port for the hosted chat-completion endpoint.

    Implementations MUST raise:
        - RemoteCallTimeoutError: when the request exceeds *timeout*.
        - RemoteCallFailedError: on any other transport or HTTP failure.
        - NoContentInResponseError: when the response carries no message content.
    """

    @abstractmethod
    async def complete(self, prompt: str, *, timeout: float | None = None) -> str:
        """Send *prompt* as a single user message and return ``choices[0].message.content``.

        Args:
            prompt: The fully-assembled prompt text.
            timeout: Per-request ceiling in seconds; ``None`` uses the adapter default.
        """
