"""Remote Delegate: prompt structuring and enhancement through Gemini."""

import math
from typing import Any, Dict, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate

from agents.exceptions import LLMServiceError, PromptStructurerError, ResponseParseError
from agents.utils import extract_json_object, truncate_text
from config.config import get_logger, settings
from config.llm_providers import get_llm
from core.models import EnhancedPrompt, PromptExample, StructuredPrompt
from core.prompt_types import PromptType, default_context, default_format

# Set up structured logging
logger = get_logger(__name__)

DEFAULT_REMOTE_SCORE = 75

ENHANCEMENT_PROMPT = PromptTemplate.from_template("""
You are an expert prompt engineer. Your task is to enhance the following prompt to make it more effective and structured.

Original prompt: "{prompt}"
Prompt type: {prompt_type}

Please enhance this prompt by:
1. Adding appropriate role/context if missing
2. Making the task more specific and clear
3. Adding format specifications
4. Including helpful constraints
5. Adding examples if beneficial

Provide your response in the following JSON format:
{{
  "enhanced": "The improved prompt text",
  "improvements": ["List of specific improvements made"],
  "score": 85
}}

The score should be between 0-100 based on how much the prompt was improved.
Make sure the enhanced prompt is professional, clear, and follows prompt engineering best practices.
""")

STRUCTURING_PROMPT = PromptTemplate.from_template("""
You are an expert prompt engineer. Analyze the following prompt and extract its components into a structured JSON format.

Prompt: "{prompt}"
Type: {prompt_type}

Extract and organize the prompt into the following JSON structure:
{{
  "context": "Background or role definition (e.g., 'You are an expert developer')",
  "task": "Main objective or request (what the user wants accomplished)",
  "format": "Output format requirements (e.g., 'bullet points', 'JSON', 'step-by-step')",
  "constraints": ["Array of limitations or requirements"],
  "examples": [
    {{
      "input": "Example input if provided",
      "output": "Expected output if provided"
    }}
  ]
}}

Rules:
- Extract actual content from the prompt, don't make up information
- If a section is not present in the prompt, provide a reasonable default based on the prompt type
- Constraints should be specific limitations mentioned in the prompt
- Examples should only be included if explicitly provided in the prompt
- Keep the extracted content concise but complete

Respond only with valid JSON.
""")


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _example_list(value: Any) -> List[PromptExample]:
    if not isinstance(value, list):
        return []
    examples = []
    for item in value:
        if isinstance(item, dict):
            examples.append(PromptExample(
                input=str(item.get("input") or ""),
                output=str(item.get("output") or ""),
            ))
    return examples


def _score(value: Any) -> int:
    if (isinstance(value, bool) or not isinstance(value, (int, float))
            or not value or not math.isfinite(value)):
        return DEFAULT_REMOTE_SCORE
    return max(0, min(100, round(value)))


def build_structured_prompt(data: Dict[str, Any], prompt: str, prompt_type: PromptType) -> StructuredPrompt:
    """Fill missing or invalid fields of a parsed reply with the local defaults."""
    return StructuredPrompt(
        context=_text_or(data.get("context"), default_context(prompt_type)),
        task=_text_or(data.get("task"), prompt.strip() or prompt),
        format=_text_or(data.get("format"), default_format(prompt_type)),
        constraints=_string_list(data.get("constraints")),
        examples=_example_list(data.get("examples")),
    )


def build_enhanced_prompt(data: Dict[str, Any], prompt: str) -> EnhancedPrompt:
    enhanced = data.get("enhanced")
    if not isinstance(enhanced, str) or not enhanced.strip():
        raise ResponseParseError("Gemini response has no enhanced prompt", request_type="enhance")
    return EnhancedPrompt(
        original=prompt,
        enhanced=enhanced.strip(),
        improvements=_string_list(data.get("improvements")),
        score=_score(data.get("score")),
    )


class GeminiDelegate:
    """Sends structuring and enhancement instructions to Gemini.

    Every failure (missing key, service error, unusable reply) is raised as a
    ``PromptStructurerError`` subclass for the orchestrator to catch.
    """

    def __init__(self, model: Optional[BaseChatModel] = None):
        self._model = model

    def _get_model(self) -> BaseChatModel:
        if self._model is None:
            self._model = get_llm()
        return self._model

    async def _generate(self, template: PromptTemplate, request_type: str,
                        prompt: str, prompt_type: PromptType) -> str:
        chain = template | self._get_model() | StrOutputParser()
        logger.info(f"Requesting Gemini {request_type}: {truncate_text(prompt, 80)}")
        try:
            return await chain.ainvoke({"prompt": prompt, "prompt_type": prompt_type.value})
        except PromptStructurerError:
            raise
        except Exception as e:
            raise LLMServiceError(
                f"Gemini {request_type} request failed: {e}",
                model=settings.default_model_name,
                request_type=request_type,
                cause=e,
            ) from e

    async def structure_prompt(self, prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> StructuredPrompt:
        """
        Ask Gemini to decompose a prompt.

        Raises:
            ConfigurationError: If no API key is configured
            LLMServiceError: If the request fails
            ResponseParseError: If the reply holds no valid JSON object
        """
        prompt_type = PromptType(prompt_type)
        text = await self._generate(STRUCTURING_PROMPT, "structure", prompt, prompt_type)
        data = extract_json_object(text, request_type="structure")
        return build_structured_prompt(data, prompt, prompt_type)

    async def enhance_prompt(self, prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> EnhancedPrompt:
        """
        Ask Gemini to rewrite a prompt.

        Raises:
            ConfigurationError: If no API key is configured
            LLMServiceError: If the request fails
            ResponseParseError: If the reply holds no usable JSON object
        """
        prompt_type = PromptType(prompt_type)
        text = await self._generate(ENHANCEMENT_PROMPT, "enhance", prompt, prompt_type)
        data = extract_json_object(text, request_type="enhance")
        return build_enhanced_prompt(data, prompt)


# Global instance
gemini_delegate = GeminiDelegate()


async def remote_structure(prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> StructuredPrompt:
    return await gemini_delegate.structure_prompt(prompt, prompt_type)


async def remote_enhance(prompt: str, prompt_type: PromptType = PromptType.GENERAL) -> EnhancedPrompt:
    return await gemini_delegate.enhance_prompt(prompt, prompt_type)
