from abc import ABC, abstractmethod


class BaseWorkflow(ABC):
    """Abstract base for sequential, single-request pipelines."""

    @abstractmethod
    async def execute(self, user_message: str) -> str:
        """Run the full pipeline for one user message and return the composed reply."""
