"""Orchestrators for the structuring and enhancement pipelines.

Each pipeline makes a single remote attempt and, on any failure, returns the
local heuristic result instead.  Callers cannot tell the two sources apart.
"""

from typing import Optional

from agents.remote_delegate import GeminiDelegate, gemini_delegate
from agents.utils import truncate_text
from config.config import get_logger
from core.enhancer import fallback_enhance
from core.extractor import fallback_structure
from core.models import EnhancedPrompt, StructuredPrompt
from core.prompt_types import PromptType

# Set up structured logging
logger = get_logger(__name__)


class PromptCoordinator:
    """Routes prompts to the remote delegate with a heuristic fallback."""

    def __init__(self, delegate: Optional[GeminiDelegate] = None):
        self.delegate = delegate or gemini_delegate
        self.stats = {"remote": 0, "fallback": 0}

    async def structure_prompt(self, prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> StructuredPrompt:
        """Structure *prompt* remotely, falling back to local extraction."""
        prompt_type = PromptType(prompt_type)
        try:
            result = await self.delegate.structure_prompt(prompt, prompt_type)
            self.stats["remote"] += 1
            return result
        except Exception as e:
            logger.warning(
                f"Error with Gemini structuring, using fallback for "
                f"'{truncate_text(prompt, 50)}': {e}"
            )
            self.stats["fallback"] += 1
            return fallback_structure(prompt, prompt_type)

    async def enhance_prompt(self, prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> EnhancedPrompt:
        """Enhance *prompt* remotely, falling back to the local rewrite."""
        prompt_type = PromptType(prompt_type)
        try:
            result = await self.delegate.enhance_prompt(prompt, prompt_type)
            self.stats["remote"] += 1
            return result
        except Exception as e:
            logger.warning(
                f"Error with Gemini enhancement, using fallback for "
                f"'{truncate_text(prompt, 50)}': {e}"
            )
            self.stats["fallback"] += 1
            return fallback_enhance(prompt, prompt_type)


# Global instance
coordinator = PromptCoordinator()


async def structure_prompt(prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> StructuredPrompt:
    return await coordinator.structure_prompt(prompt, prompt_type)


async def enhance_prompt(prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> EnhancedPrompt:
    return await coordinator.enhance_prompt(prompt, prompt_type)
