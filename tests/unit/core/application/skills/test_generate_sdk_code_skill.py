"""Unit tests — GenerateSdkCodeSkill (zero I/O, AsyncMock for the chat port)."""

from unittest.mock import AsyncMock

import pytest

from sdk_util_generator.core.application.exceptions import (
    NoContentInResponseError,
    RemoteCallFailedError,
)
from sdk_util_generator.core.application.skills.contracts import GenerateSdkCodeInput
from sdk_util_generator.core.application.skills.generate_sdk_code_skill import (
    GenerateSdkCodeSkill,
)
from sdk_util_generator.core.application.skills.prompt_templates.sdk_prompt_builder import (
    SdkPromptBuilder,
)


@pytest.fixture()
def chat() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def skill(chat: AsyncMock) -> GenerateSdkCodeSkill:
    return GenerateSdkCodeSkill(chat=chat, prompt_builder=SdkPromptBuilder())


class TestGenerateSdkCodeSkill:
    async def test_sends_code_prompt_and_extracts_block(
        self, skill: GenerateSdkCodeSkill, chat: AsyncMock
    ) -> None:
        chat.complete.return_value = "Sure!\n```python\nimport stripe\n```\nEnjoy."

        code = await skill.execute(
            GenerateSdkCodeInput(user_message="generate stripe util", target_language="python")
        )

        assert code == "import stripe"
        chat.complete.assert_awaited_once_with(
            "generate stripe util. Generate a Python utility file. Don't include main function."
        )

    async def test_falls_back_to_raw_reply(self, skill: GenerateSdkCodeSkill, chat: AsyncMock) -> None:
        chat.complete.return_value = "  def send():\n    pass  "

        code = await skill.execute(
            GenerateSdkCodeInput(user_message="generate twilio util", target_language="python")
        )

        assert code == "def send():\n    pass"

    async def test_remote_errors_propagate(self, skill: GenerateSdkCodeSkill, chat: AsyncMock) -> None:
        chat.complete.side_effect = RemoteCallFailedError("API call failed: boom")

        with pytest.raises(RemoteCallFailedError, match="boom"):
            await skill.execute(GenerateSdkCodeInput("generate x", "python"))

    async def test_missing_content_propagates(
        self, skill: GenerateSdkCodeSkill, chat: AsyncMock
    ) -> None:
        chat.complete.side_effect = NoContentInResponseError("No content found in AI response")

        with pytest.raises(NoContentInResponseError):
            await skill.execute(GenerateSdkCodeInput("generate x", "python"))
