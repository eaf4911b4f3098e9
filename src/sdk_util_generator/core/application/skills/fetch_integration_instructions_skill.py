"""Skill that asks the model how to wire a generated utility into the scanned workspace."""

import structlog

from sdk_util_generator.core.application.exceptions import (
    IntegrationRequestFailedError,
    IntegrationRequestTimeoutError,
    RemoteCallFailedError,
    RemoteCallTimeoutError,
)
from sdk_util_generator.core.application.ports import ChatCompletionPort
from sdk_util_generator.core.application.skills.contracts import (
    FetchIntegrationInstructionsInput,
    IntegrationInstructions,
)
from sdk_util_generator.core.application.skills.prompt_templates.sdk_prompt_builder import (
    SdkPromptBuilder,
)
from sdk_util_generator.core.application.skills.skill import BaseSkill
from sdk_util_generator.core.application.tools import PromptBudgetAssembler

logger = structlog.get_logger()


class FetchIntegrationInstructionsSkill(
    BaseSkill[FetchIntegrationInstructionsInput, IntegrationInstructions],
):
    """Packs workspace context under the prompt budget and requests integration steps.

    Raises ``IntegrationRequestTimeoutError`` or ``IntegrationRequestFailedError``
    for transport problems. ``NoContentInResponseError`` passes through untouched.
    """

    def __init__(
        self,
        chat: ChatCompletionPort,
        prompt_builder: SdkPromptBuilder,
        assembler: PromptBudgetAssembler,
        timeout_seconds: float,
    ) -> None:
        self._chat = chat
        self._prompt_builder = prompt_builder
        self._assembler = assembler
        self._timeout_seconds = timeout_seconds

    async def execute(self, input_data: FetchIntegrationInstructionsInput) -> IntegrationInstructions:
        budget = self._assembler.assemble(input_data.workspace_files)
        prompt = self._prompt_builder.build_integration_prompt(
            service_name=input_data.service_name,
            filename=input_data.filename,
            code=input_data.code,
            language=input_data.target_language,
            budget=budget,
        )
        logger.info(
            "Requesting integration instructions",
            files_included=budget.included_count,
            files_available=budget.total_files_seen,
            timeout_seconds=self._timeout_seconds,
        )
        ctx = {"skill": "fetch_integration_instructions", "filename": input_data.filename}
        try:
            content = await self._chat.complete(prompt, timeout=self._timeout_seconds)
        except RemoteCallTimeoutError as exc:
            raise IntegrationRequestTimeoutError(exc.message, context=ctx) from exc
        except RemoteCallFailedError as exc:
            raise IntegrationRequestFailedError(exc.message, context=ctx) from exc

        logger.info("Integration instructions received", content_length=len(content))
        return IntegrationInstructions(content=content, budget=budget)
