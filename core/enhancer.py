"""
Heuristic prompt enhancement.

Offline fallback used when the Gemini enhancement call fails.  Three gated
rewrites run in a fixed order, each adding to a baseline score:

    role injection      +15
    task clarity        +10
    format instruction  +10

Every gate checks whether its edit is already present, so enhancing an
enhanced prompt leaves it unchanged.
"""

import re
from typing import List, Tuple

from config.config import get_logger
from core.extractor import CONTEXT_MATCHERS
from core.models import EnhancedPrompt
from core.patterns import RegexMatcher, any_match, contains_any
from core.prompt_types import (
    DEFAULT_ACTION_VERBS,
    DEFAULT_FORMAT_INSTRUCTIONS,
    DEFAULT_ROLES,
    PromptType,
)

logger = get_logger(__name__)

BASELINE_SCORE = 50
MAX_SCORE = 100
ROLE_SCORE = 15
TASK_CLARITY_SCORE = 10
FORMAT_SCORE = 10

IMPROVEMENT_ROLE = "Added role/context definition"
IMPROVEMENT_TASK_CLARITY = "Enhanced task clarity and specificity"
IMPROVEMENT_FORMAT = "Added output format specification"

ROLE_MATCHERS = CONTEXT_MATCHERS + (
    RegexMatcher("as_expert", r"\bas\s+(?:an?\s+)?.*expert"),
    RegexMatcher("as_professional", r"\bas\s+(?:an?\s+)?.*professional"),
)

ACTION_VERBS = (
    "create", "generate", "write", "develop", "design", "build", "analyze",
    "explain", "describe", "list", "provide", "suggest", "recommend",
)

FORMAT_KEYWORDS = (
    "format", "structure", "organize", "bullet points", "numbered list",
    "table", "json", "markdown", "steps", "sections",
)

_CREATE = re.compile(r"\b(create)\s+", re.IGNORECASE)
_VAGUE_REPLACEMENTS = (
    (re.compile(r"\bsome\s+", re.IGNORECASE), "several detailed "),
    (re.compile(r"\ba few\s+", re.IGNORECASE), "multiple comprehensive "),
)
_SENTENCE_END = ".!?"


def has_role_definition(text: str) -> bool:
    return any_match(ROLE_MATCHERS, text)


def has_action_verb(text: str) -> bool:
    return contains_any(text, ACTION_VERBS)


def has_format_specification(text: str) -> bool:
    if contains_any(text, FORMAT_KEYWORDS):
        return True
    # Some default instructions carry none of the keywords
    return any(instruction in text for instruction in DEFAULT_FORMAT_INSTRUCTIONS.values())


def add_role(text: str, prompt_type: PromptType) -> Tuple[str, bool]:
    if has_role_definition(text):
        return text, False
    return f"{DEFAULT_ROLES[prompt_type]} {text}", True


def improve_task_clarity(text: str, prompt_type: PromptType) -> Tuple[str, bool]:
    """Sharpen "create" requests, add a missing action verb, replace vague quantifiers."""
    result = text

    # Verb insertion runs first so an inserted "Create" is sharpened in the same pass
    if not has_action_verb(result):
        verb = DEFAULT_ACTION_VERBS[prompt_type]
        head, _, rest = result.partition(".")
        result = f"{head}. {verb} {rest.strip()}".strip()

    lowered = result.lower()
    if "create" in lowered and "specific" not in lowered:
        result = _CREATE.sub(lambda m: f"{m.group(1)} specific ", result, count=1)

    for pattern, replacement in _VAGUE_REPLACEMENTS:
        result = pattern.sub(replacement, result)

    return result, result != text


def add_format_specification(text: str, prompt_type: PromptType) -> Tuple[str, bool]:
    if has_format_specification(text):
        return text, False
    body = text if not text or text[-1] in _SENTENCE_END else f"{text}."
    return f"{body} {DEFAULT_FORMAT_INSTRUCTIONS[prompt_type]}".strip(), True


def fallback_enhance(text: str, prompt_type: PromptType = PromptType.GENERAL) -> EnhancedPrompt:
    """Rewrite ``text`` locally and score the result."""
    prompt_type = PromptType(prompt_type)
    improvements: List[str] = []
    enhanced = text.strip()
    score = BASELINE_SCORE

    enhanced, changed = add_role(enhanced, prompt_type)
    if changed:
        improvements.append(IMPROVEMENT_ROLE)
        score += ROLE_SCORE

    enhanced, changed = improve_task_clarity(enhanced, prompt_type)
    if changed:
        improvements.append(IMPROVEMENT_TASK_CLARITY)
        score += TASK_CLARITY_SCORE

    enhanced, changed = add_format_specification(enhanced, prompt_type)
    if changed:
        improvements.append(IMPROVEMENT_FORMAT)
        score += FORMAT_SCORE

    logger.debug(f"Heuristic enhancement applied {len(improvements)} improvement(s), score={score}")
    return EnhancedPrompt(
        original=text,
        enhanced=enhanced,
        improvements=improvements,
        score=min(score, MAX_SCORE),
    )
