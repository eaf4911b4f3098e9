from sdk_util_generator.core.application.skills.contracts.generate_sdk_code_input import (
    GenerateSdkCodeInput,
)
from sdk_util_generator.core.application.skills.contracts.integration_instructions import (
    FetchIntegrationInstructionsInput,
    IntegrationInstructions,
)

__all__ = [
    "FetchIntegrationInstructionsInput",
    "GenerateSdkCodeInput",
    "IntegrationInstructions",
]
