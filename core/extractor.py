"""
Heuristic prompt decomposition.

Offline fallback used when the Gemini structuring call fails: ordered regular
expressions pull a role/context, the task, an output format, constraints and
example blocks out of free text.  None of these functions raise; a miss
yields an empty value and the per-type defaults fill the gaps.
"""

import re
from typing import List

from config.config import get_logger
from core.models import PromptExample, StructuredPrompt
from core.patterns import (
    RegexMatcher,
    first_match,
    strip_trailing_punctuation,
    unique_in_order,
)
from core.prompt_types import PromptType, default_context, default_format

logger = get_logger(__name__)

# Placeholder input label for examples; prompts only carry one unstructured
# block per example, so there is no real input to extract.
EXAMPLE_INPUT_PLACEHOLDER = "Example input"

# Specific role phrasings first; the bare "expert"/"professional" sentence
# prefixes only apply when nothing more precise matched.
CONTEXT_MATCHERS = (
    RegexMatcher("you_are", r"\byou(?:'re|\s+are)\s+(?:an?\s+)?([^.!?]+)"),
    RegexMatcher("act_as", r"\bact as\s+(?:an?\s+)?([^.!?]+)"),
    RegexMatcher("assume_role", r"\bassume the role of\s+([^.!?]+)"),
    RegexMatcher("as_role", r"\bas\s+(?:an?\s+)?([^.!?]+),"),
    RegexMatcher("expert_prefix", r"^([^.!?]*expert[^.!?]*)"),
    RegexMatcher("professional_prefix", r"^([^.!?]*professional[^.!?]*)"),
)

_ROLE_BOILERPLATE = re.compile(
    r"^(?:you(?:'re|\s+are)|act as|assume the role of)[^.!?]*[.!?]?\s*",
    re.IGNORECASE,
)
_EDGE_PUNCT_LEADING = re.compile(r"^[.,\s]+")
_EDGE_PUNCT_TRAILING = re.compile(r"[.,\s]+$")

FORMAT_MATCHERS = (
    RegexMatcher("in_format", r"\bin\s+(?:the\s+form\s+of\s+)?(?:a\s+)?([^.!?]+format[^.!?]*)"),
    RegexMatcher("as_list", r"\bas\s+(?:a\s+)?([^.!?]*list[^.!?]*)"),
    RegexMatcher("in_json", r"\bin\s+([^.!?]*json[^.!?]*)"),
    RegexMatcher("as_table", r"\bas\s+([^.!?]*table[^.!?]*)"),
    RegexMatcher("in_bullets", r"\bin\s+([^.!?]*bullet\s+points?[^.!?]*)"),
    RegexMatcher("n_points", r"(\d+\s+(?:bullet\s+)?points?)"),
    RegexMatcher("n_ideas", r"(\d+\s+ideas?)"),
    RegexMatcher("n_examples", r"(\d+\s+examples?)"),
    RegexMatcher("step_by_step", r"(step-by-step)"),
)

# Whole-match (group 0) patterns; every occurrence is collected.
CONSTRAINT_MATCHERS = (
    RegexMatcher("under_words", r"(?:keep\s+(?:them?\s+)?|make\s+(?:them?\s+)?)?\bunder\s+\d+\s+words?", group=0),
    RegexMatcher("max_words", r"\b(?:max|maximum)\s+\d+\s+words?", group=0),
    RegexMatcher("no_more_than", r"\bno\s+more\s+than\s+\d+\s+words?", group=0),
    RegexMatcher("limited_to", r"\blimit(?:ed)?\s+to\s+\d+\s+words?", group=0),
    RegexMatcher("within_words", r"\bwithin\s+\d+\s+words?", group=0),
    RegexMatcher("no_repetition", r"\bno\s+repetition", group=0),
    RegexMatcher("avoid", r"\bavoid\s+[^.!?]+", group=0),
    RegexMatcher("dont", r"\bdon't\s+[^.!?]+", group=0),
    RegexMatcher("must", r"\bmust\s+(?:be\s+)?[^.!?]+", group=0),
    RegexMatcher("should", r"\bshould\s+(?:be\s+)?[^.!?]+", group=0),
    RegexMatcher("ensure", r"\bensure\s+[^.!?]+", group=0),
)

_EXAMPLE_END = r"(?=\n\n|\n(?-i:[A-Z])|$)"
EXAMPLE_MATCHERS = (
    RegexMatcher("example", r"\bexamples?[:\s]+([\s\S]+?)" + _EXAMPLE_END),
    RegexMatcher("for_instance", r"\bfor instance[:\s]+([\s\S]+?)" + _EXAMPLE_END),
    RegexMatcher("such_as", r"\bsuch as[:\s]+([\s\S]+?)" + _EXAMPLE_END),
)


def extract_context(text: str) -> str:
    """Return the declared role, e.g. ``"expert developer"``, or ``""``."""
    value = first_match(CONTEXT_MATCHERS, text)
    return strip_trailing_punctuation(value) if value else ""


def extract_task(text: str, context: str) -> str:
    """Return the prompt minus its role declaration, or the whole prompt."""
    task = text
    if context:
        task = re.sub(re.escape(context), "", task, count=1, flags=re.IGNORECASE)

    task = _EDGE_PUNCT_LEADING.sub("", task)
    task = _EDGE_PUNCT_TRAILING.sub("", task)
    task = _ROLE_BOILERPLATE.sub("", task)
    task = _EDGE_PUNCT_TRAILING.sub("", task)

    return task or text


def extract_format(text: str) -> str:
    value = first_match(FORMAT_MATCHERS, text)
    return value.strip() if value else ""


def extract_constraints(text: str) -> List[str]:
    """Collect every constraint phrase, de-duplicated in first-seen order."""
    found = (
        strip_trailing_punctuation(match)
        for matcher in CONSTRAINT_MATCHERS
        for match in matcher.find_all(text)
    )
    return unique_in_order(c for c in found if c)


def extract_examples(text: str) -> List[PromptExample]:
    examples: List[PromptExample] = []
    for matcher in EXAMPLE_MATCHERS:
        value = matcher.try_match(text)
        if value and value.strip():
            examples.append(PromptExample(input=EXAMPLE_INPUT_PLACEHOLDER, output=value.strip()))
    return examples


def fallback_structure(text: str, prompt_type: PromptType = PromptType.GENERAL) -> StructuredPrompt:
    """Decompose ``text`` locally, substituting per-type defaults for misses."""
    context = extract_context(text)
    task = extract_task(text, context)
    fmt = extract_format(text)

    structured = StructuredPrompt(
        context=context or default_context(prompt_type),
        task=task.strip() or text.strip(),
        format=fmt or default_format(prompt_type),
        constraints=extract_constraints(text),
        examples=extract_examples(text),
    )
    logger.debug(
        f"Heuristic structuring: context={bool(context)} format={bool(fmt)} "
        f"constraints={len(structured.constraints)} examples={len(structured.examples)}"
    )
    return structured
