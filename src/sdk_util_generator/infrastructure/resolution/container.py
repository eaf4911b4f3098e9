"""Assembles the SDK util workflow from settings."""

from sdk_util_generator.core.application.skills.fetch_integration_instructions_skill import (
    FetchIntegrationInstructionsSkill,
)
from sdk_util_generator.core.application.skills.generate_sdk_code_skill import (
    GenerateSdkCodeSkill,
)
from sdk_util_generator.core.application.skills.prompt_templates.sdk_prompt_builder import (
    SdkPromptBuilder,
)
from sdk_util_generator.core.application.tools import PromptBudgetAssembler, WorkspaceScanner
from sdk_util_generator.core.application.workflows.sdk_util_workflow import SdkUtilWorkflow
from sdk_util_generator.infrastructure.adapters.editor import LoggingEditorAdapter
from sdk_util_generator.infrastructure.adapters.filesystem import UtilFileWriter
from sdk_util_generator.infrastructure.adapters.llm import ChatCompletionHttpAdapter
from sdk_util_generator.infrastructure.configuration import Settings


def build_sdk_util_workflow(settings: Settings) -> SdkUtilWorkflow:
    chat = ChatCompletionHttpAdapter(settings)
    prompt_builder = SdkPromptBuilder()
    return SdkUtilWorkflow(
        generate_code=GenerateSdkCodeSkill(chat=chat, prompt_builder=prompt_builder),
        fetch_instructions=FetchIntegrationInstructionsSkill(
            chat=chat,
            prompt_builder=prompt_builder,
            assembler=PromptBudgetAssembler(settings.max_context_length),
            timeout_seconds=settings.integration_timeout_seconds,
        ),
        scanner=WorkspaceScanner(settings.to_scan_config()),
        artifact_store=UtilFileWriter(),
        editor=LoggingEditorAdapter(),
        workspace_root=settings.workspace_root,
        target_language=settings.target_language,
    )
