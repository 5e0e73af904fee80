"""
Prompt types and their default tables.

Each table maps every ``PromptType`` to a constant string and is exposed as a
read-only mapping.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class PromptType(str, Enum):
    GENERAL = "general"
    CHATBOT = "chatbot"
    CODING = "coding"
    IMAGE_GENERATION = "image-generation"
    CONTENT_WRITING = "content-writing"
    DATA_ANALYSIS = "data-analysis"


def _table(values: dict) -> Mapping[PromptType, str]:
    missing = set(PromptType) - set(values)
    if missing:
        raise ValueError(f"Default table missing prompt types: {sorted(m.value for m in missing)}")
    return MappingProxyType(dict(values))


# Used when no context could be extracted from a prompt
DEFAULT_CONTEXTS = _table({
    PromptType.CHATBOT: "You are a helpful AI assistant",
    PromptType.CODING: "You are an expert software developer",
    PromptType.IMAGE_GENERATION: "You are a creative AI image generator",
    PromptType.CONTENT_WRITING: "You are a professional content writer",
    PromptType.DATA_ANALYSIS: "You are a data analysis expert",
    PromptType.GENERAL: "You are an AI assistant",
})

DEFAULT_FORMATS = _table({
    PromptType.CHATBOT: "Conversational response",
    PromptType.CODING: "Code with explanations",
    PromptType.IMAGE_GENERATION: "Detailed image description",
    PromptType.CONTENT_WRITING: "Well-structured content",
    PromptType.DATA_ANALYSIS: "Analytical report with insights",
    PromptType.GENERAL: "Clear and organized response",
})

# Role sentences prepended by the enhancer
DEFAULT_ROLES = _table({
    PromptType.CHATBOT: "You are a helpful and knowledgeable AI assistant.",
    PromptType.CODING: "You are an expert software developer with extensive programming knowledge.",
    PromptType.IMAGE_GENERATION: "You are a creative AI specialized in generating detailed image descriptions.",
    PromptType.CONTENT_WRITING: "You are a professional content writer with expertise in creating engaging content.",
    PromptType.DATA_ANALYSIS: "You are a data analysis expert skilled in interpreting and presenting insights.",
    PromptType.GENERAL: "You are a knowledgeable AI assistant.",
})

DEFAULT_ACTION_VERBS = _table({
    PromptType.CHATBOT: "Provide",
    PromptType.CODING: "Develop",
    PromptType.IMAGE_GENERATION: "Generate",
    PromptType.CONTENT_WRITING: "Write",
    PromptType.DATA_ANALYSIS: "Analyze",
    PromptType.GENERAL: "Create",
})

DEFAULT_FORMAT_INSTRUCTIONS = _table({
    PromptType.CHATBOT: "Provide your response in a clear, conversational format with numbered points where appropriate.",
    PromptType.CODING: "Include code examples with explanations and comments.",
    PromptType.IMAGE_GENERATION: "Provide detailed descriptions with specific visual elements, colors, and composition.",
    PromptType.CONTENT_WRITING: "Structure your content with clear headings, subheadings, and well-organized paragraphs.",
    PromptType.DATA_ANALYSIS: "Present findings with clear insights, supporting data, and actionable recommendations.",
    PromptType.GENERAL: "Organize your response in a clear, structured format.",
})


def default_context(prompt_type: PromptType) -> str:
    return DEFAULT_CONTEXTS[PromptType(prompt_type)]


def default_format(prompt_type: PromptType) -> str:
    return DEFAULT_FORMATS[PromptType(prompt_type)]
