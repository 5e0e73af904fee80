"""Shared dependencies and Pydantic request models used across route modules."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from agents.coordinator import coordinator
from config.config import get_logger
from core.models import EnhancedPrompt, StructuredPrompt
from core.prompt_types import PromptType
from core.storage import TemplateStore, ThemeStore, get_template_store, get_theme_store

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logger = get_logger(__name__)

# Maximum prompt length (characters) to prevent abuse
MAX_PROMPT_LENGTH = 50_000


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------

def get_coordinator():
    return coordinator


def template_store() -> TemplateStore:
    return get_template_store()


def theme_store() -> ThemeStore:
    return get_theme_store()


# ---------------------------------------------------------------------------
# Pydantic request / response models
# ---------------------------------------------------------------------------

class PromptRequest(BaseModel):
    """Request model for structuring and enhancement."""
    prompt: str = Field(..., max_length=MAX_PROMPT_LENGTH)
    prompt_type: PromptType = PromptType.GENERAL


class EnhanceRequest(PromptRequest):
    """Enhancement request; ``structure`` also decomposes the enhanced text."""
    structure: bool = False


class EnhanceResponse(EnhancedPrompt):
    structured: Optional[StructuredPrompt] = None


class TemplateCreateRequest(BaseModel):
    """Request model for saving a template."""
    name: str = Field(..., min_length=1, max_length=200)
    prompt_type: PromptType = PromptType.GENERAL
    raw_prompt: str = Field(..., min_length=1, max_length=MAX_PROMPT_LENGTH)
    structured_prompt: StructuredPrompt
    enhanced_prompt: Optional[str] = None


class ThemeRequest(BaseModel):
    theme: Literal["light", "dark"]


class ThemeResponse(BaseModel):
    theme: Literal["light", "dark"]
