from collections.abc import Sequence
from dataclasses import dataclass

from sdk_util_generator.core.domain.workspace import PromptBudget, ScannedFile


@dataclass(frozen=True)
class FetchIntegrationInstructionsInput:
    """Input contract for the integration-instructions request."""

    service_name: str
    filename: str
    code: str
    target_language: str
    workspace_files: Sequence[ScannedFile]


@dataclass(frozen=True)
class IntegrationInstructions:
    content: str
    budget: PromptBudget
