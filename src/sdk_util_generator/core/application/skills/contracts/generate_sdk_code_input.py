from dataclasses import dataclass


@dataclass(frozen=True)
class GenerateSdkCodeInput:
    """Input contract for utility code generation."""

    user_message: str
    target_language: str
