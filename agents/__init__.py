"""Prompt Structurer Agents - remote delegation and orchestration."""

from agents.exceptions import (
    PromptStructurerError,
    ConfigurationError,
    LLMServiceError,
    ResponseParseError,
    StorageError,
    InputValidationError,
)

__all__ = [
    "PromptStructurerError",
    "ConfigurationError",
    "LLMServiceError",
    "ResponseParseError",
    "StorageError",
    "InputValidationError",
]
