"""
Data models for structured prompts, enhancements and saved templates.

Field aliases keep the camelCase keys used by the persisted template array
and by API clients; Python code uses the snake_case attribute names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.prompt_types import PromptType


class PromptExample(BaseModel):
    """One example block found in a prompt."""
    input: str = ""
    output: str = ""


class StructuredPrompt(BaseModel):
    """A prompt decomposed into context, task, format, constraints and examples."""
    context: str
    task: str
    format: str
    constraints: List[str] = Field(default_factory=list)
    examples: List[PromptExample] = Field(default_factory=list)


class EnhancedPrompt(BaseModel):
    """A rewritten prompt with the list of applied improvements and a 0-100 score."""
    original: str
    enhanced: str
    improvements: List[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)


class PromptTemplate(BaseModel):
    """A named, persisted snapshot of a raw prompt and its structured result."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: PromptType = PromptType.GENERAL
    raw_prompt: str = Field(alias="rawPrompt")
    enhanced_prompt: Optional[str] = Field(default=None, alias="enhancedPrompt")
    structured_prompt: StructuredPrompt = Field(alias="structuredPrompt")
    created_at: str = Field(alias="createdAt")

    def to_storage(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
