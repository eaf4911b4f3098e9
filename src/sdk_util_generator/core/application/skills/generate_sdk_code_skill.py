"""Skill that asks the model for a utility file and extracts the code from its reply."""

import structlog

from sdk_util_generator.core.application.ports import ChatCompletionPort
from sdk_util_generator.core.application.skills.contracts import GenerateSdkCodeInput
from sdk_util_generator.core.application.skills.prompt_templates.sdk_prompt_builder import (
    SdkPromptBuilder,
)
from sdk_util_generator.core.application.skills.skill import BaseSkill
from sdk_util_generator.core.application.tools import extract_code

logger = structlog.get_logger()


class GenerateSdkCodeSkill(BaseSkill[GenerateSdkCodeInput, str]):
    """Requests utility code and returns the extracted source text.

    Remote failures (``RemoteCallFailedError``, ``NoContentInResponseError``)
    propagate unchanged; the workflow decides how fatal they are.
    """

    def __init__(self, chat: ChatCompletionPort, prompt_builder: SdkPromptBuilder) -> None:
        self._chat = chat
        self._prompt_builder = prompt_builder

    async def execute(self, input_data: GenerateSdkCodeInput) -> str:
        prompt = self._prompt_builder.build_code_prompt(
            input_data.user_message, input_data.target_language
        )
        logger.info("Requesting utility code", language=input_data.target_language)
        content = await self._chat.complete(prompt)
        code = extract_code(content, input_data.target_language)
        logger.info("Utility code extracted", code_length=len(code))
        return code
