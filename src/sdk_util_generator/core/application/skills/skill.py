from abc import ABC, abstractmethod


class BaseSkill[T_Input, T_Output](ABC):
    """Abstract base for typed, independently testable request/response steps."""

    @abstractmethod
    async def execute(self, input_data: T_Input) -> T_Output:
        """Run the skill logic and return a typed result."""
