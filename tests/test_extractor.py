"""Tests for the heuristic prompt extractor."""

import pytest

from core.extractor import (
    EXAMPLE_INPUT_PLACEHOLDER,
    extract_constraints,
    extract_context,
    extract_examples,
    extract_format,
    extract_task,
    fallback_structure,
)
from core.models import PromptExample
from core.prompt_types import DEFAULT_CONTEXTS, DEFAULT_FORMATS, PromptType


class TestExtractContext:
    """Role / context detection."""

    @pytest.mark.parametrize("prompt, expected", [
        ("You're a senior data engineer. Build a pipeline.", "senior data engineer"),
        ("You are an expert developer. Write Python code.", "expert developer"),
        ("Act as a travel agent. Plan a trip to Rome.", "travel agent"),
        ("Assume the role of project manager. Draft a plan.", "project manager"),
        ("As a nutritionist, suggest a weekly meal plan.", "nutritionist"),
        ("Expert chefs know this trick. Share it.", "Expert chefs know this trick"),
    ])
    def test_role_phrasings(self, prompt, expected):
        assert extract_context(prompt) == expected

    def test_no_role(self):
        assert extract_context("Write a poem about autumn.") == ""

    def test_specific_role_beats_expert_prefix(self):
        """An explicit "act as" wins over a sentence that merely mentions an expert."""
        prompt = "Some expert advice is needed. Act as a lawyer."
        assert extract_context(prompt) == "lawyer"


class TestExtractTask:
    """Task extraction after removing the role."""

    def test_strips_role_sentence(self, sample_prompt):
        context = extract_context(sample_prompt)
        assert extract_task(sample_prompt, context) == "Write Python code. Keep it under 50 words"

    def test_without_context_trims_punctuation(self):
        assert extract_task("Summarize this article.", "") == "Summarize this article"

    def test_falls_back_to_full_prompt(self):
        prompt = "You are a poet."
        assert extract_task(prompt, extract_context(prompt)) == prompt


class TestExtractFormat:
    """Output format cues."""

    @pytest.mark.parametrize("prompt, expected", [
        ("List tips in JSON format.", "JSON format"),
        ("Return the results as a bulleted list.", "bulleted list"),
        ("Give 5 ideas for dinner", "5 ideas"),
        ("Summarize it in 3 bullet points", "3 bullet points"),
        ("Teach recursion step-by-step", "step-by-step"),
    ])
    def test_format_cues(self, prompt, expected):
        assert extract_format(prompt) == expected

    def test_no_format(self):
        assert extract_format("Hello there") == ""


class TestExtractConstraints:
    """Constraint collection."""

    def test_word_limit(self, sample_prompt):
        assert extract_constraints(sample_prompt) == ["under 50 words"]

    @pytest.mark.parametrize("prompt, expected", [
        ("Write a bio with no more than 100 words.", "no more than 100 words"),
        ("Answer within 30 words.", "within 30 words"),
        ("Keep the reply limited to 20 words.", "limited to 20 words"),
        ("Use maximum 10 words.", "maximum 10 words"),
        ("Make them under 5 words.", "Make them under 5 words"),
        ("No repetition please.", "No repetition"),
    ])
    def test_word_count_and_repetition(self, prompt, expected):
        assert expected in extract_constraints(prompt)

    def test_all_matches_deduplicated_in_order(self):
        prompt = "Avoid jargon. Avoid jargon. You must be concise."
        assert extract_constraints(prompt) == ["Avoid jargon", "must be concise"]

    def test_pattern_order(self):
        prompt = "Ensure accuracy, and don't use slang."
        assert extract_constraints(prompt) == [
            "don't use slang",
            "Ensure accuracy, and don't use slang",
        ]

    def test_never_contains_duplicates(self):
        prompt = (
            "You should be brief. You should be brief. Avoid lists. "
            "Avoid lists. Keep them under 10 words. Keep them under 10 words."
        )
        constraints = extract_constraints(prompt)
        assert len(constraints) == len(set(constraints))

    def test_no_constraints(self):
        assert extract_constraints("Tell me a joke") == []


class TestExtractExamples:
    """Example block detection."""

    def test_example_label(self):
        examples = extract_examples("Write slogans. Example: Just do it")
        assert examples == [PromptExample(input=EXAMPLE_INPUT_PLACEHOLDER, output="Just do it")]

    def test_stops_at_capitalized_line(self):
        examples = extract_examples("Name pets such as: cats and dogs\nBirds are fine too")
        assert [e.output for e in examples] == ["cats and dogs"]

    def test_stops_at_blank_line(self):
        examples = extract_examples("For instance: a red apple\n\nthen more text")
        assert [e.output for e in examples] == ["a red apple"]

    def test_no_examples(self):
        assert extract_examples("Write a haiku") == []


class TestFallbackStructure:
    """End-to-end heuristic structuring."""

    def test_sample_prompt(self, sample_prompt):
        result = fallback_structure(sample_prompt, PromptType.GENERAL)

        assert result.context == "expert developer"
        assert result.task == "Write Python code. Keep it under 50 words"
        assert result.format == DEFAULT_FORMATS[PromptType.GENERAL]
        assert "under 50 words" in result.constraints
        assert result.examples == []

    @pytest.mark.parametrize("prompt_type", list(PromptType))
    def test_defaults_per_type(self, prompt_type):
        result = fallback_structure("hello world", prompt_type)

        assert result.context == DEFAULT_CONTEXTS[prompt_type]
        assert result.format == DEFAULT_FORMATS[prompt_type]
        assert result.task == "hello world"

    def test_extracted_values_win_over_defaults(self):
        result = fallback_structure("Act as a chef. Give 3 ideas for lunch.", PromptType.CHATBOT)

        assert result.context == "chef"
        assert result.format == "3 ideas"
        assert result.task

    def test_accepts_plain_string_type(self):
        result = fallback_structure("hello world", "coding")
        assert result.context == DEFAULT_CONTEXTS[PromptType.CODING]
