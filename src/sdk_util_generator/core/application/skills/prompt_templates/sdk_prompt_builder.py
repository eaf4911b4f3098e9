"""Prompt texts sent to the chat-completion endpoint."""

from sdk_util_generator.core.domain.workspace import PromptBudget


class SdkPromptBuilder:
    """Builds the code-generation and integration-instructions prompts."""

    def build_code_prompt(self, user_message: str, language: str) -> str:
        return (
            f"{user_message}. Generate a {language.capitalize()} utility file. "
            "Don't include main function."
        )

    def build_integration_prompt(
        self,
        service_name: str,
        filename: str,
        code: str,
        language: str,
        budget: PromptBudget,
    ) -> str:
        return (
            f'I just generated a utility file "{filename}" for {service_name} SDK integration.\n'
            "\n"
            "Here's the generated utility code:\n"
            f"```{language}\n"
            f"{code}\n"
            "```\n"
            "\n"
            f"Here are the files in my workspace {budget.summary}:\n"
            f"{budget.assembled_text}\n"
            "\n"
            "Please provide DETAILED step-by-step instructions to use the utility code "
            "generated based on the files in my workspace. Keep each and everything simple "
            "and easy to follow according to this workspace context\n"
            "\n"
            "Format your response with clear headers, file names, and code blocks. "
            "Be specific about where to make changes in MY existing files."
        )
