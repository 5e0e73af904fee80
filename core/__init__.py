"""Prompt Structurer Core - heuristics, models and storage."""

from core.prompt_types import PromptType
from core.models import PromptExample, StructuredPrompt, EnhancedPrompt, PromptTemplate
from core.extractor import fallback_structure
from core.enhancer import fallback_enhance

__all__ = [
    "PromptType",
    "PromptExample",
    "StructuredPrompt",
    "EnhancedPrompt",
    "PromptTemplate",
    "fallback_structure",
    "fallback_enhance",
]
