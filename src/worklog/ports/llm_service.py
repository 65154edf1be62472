"""LLM service interface."""

from typing import Protocol


class LLMService(Protocol):
    """Interface for LLM text generation."""

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Generate text from a system instruction and user content."""
        ...
