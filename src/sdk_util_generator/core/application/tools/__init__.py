from sdk_util_generator.core.application.tools.filename_generator import generate_filename
from sdk_util_generator.core.application.tools.markdown_code_extractor import extract_code
from sdk_util_generator.core.application.tools.prompt_budget_assembler import (
    PromptBudgetAssembler,
)
from sdk_util_generator.core.application.tools.sdk_name_extractor import extract_sdk_name
from sdk_util_generator.core.application.tools.workspace_scanner import WorkspaceScanner

__all__ = [
    "PromptBudgetAssembler",
    "WorkspaceScanner",
    "extract_code",
    "extract_sdk_name",
    "generate_filename",
]
