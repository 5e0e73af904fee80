"""Tests for the remote-first orchestrators with heuristic fallback."""

import asyncio
import json

from langchain_core.language_models.fake_chat_models import FakeListChatModel

from agents import coordinator as coordinator_module
from agents.coordinator import PromptCoordinator
from agents.remote_delegate import GeminiDelegate
from core.enhancer import fallback_enhance
from core.extractor import fallback_structure
from core.prompt_types import PromptType


class TestStructurePipeline:
    """Structuring: one remote attempt, then the extractor."""

    def test_remote_result_returned(self, working_delegate, remote_structured):
        coordinator = PromptCoordinator(delegate=working_delegate)

        result = asyncio.run(coordinator.structure_prompt("sort a list", PromptType.CODING))

        assert result == remote_structured
        working_delegate.structure_prompt.assert_awaited_once_with("sort a list", PromptType.CODING)
        assert coordinator.stats == {"remote": 1, "fallback": 0}

    def test_failure_falls_back(self, failing_delegate, sample_prompt):
        coordinator = PromptCoordinator(delegate=failing_delegate)

        result = asyncio.run(coordinator.structure_prompt(sample_prompt, PromptType.GENERAL))

        assert result == fallback_structure(sample_prompt, PromptType.GENERAL)
        assert result.context == "expert developer"
        assert "under 50 words" in result.constraints
        failing_delegate.structure_prompt.assert_awaited_once()
        assert coordinator.stats == {"remote": 0, "fallback": 1}

    def test_missing_api_key_falls_back(self, sample_prompt):
        coordinator = PromptCoordinator(delegate=GeminiDelegate())

        result = asyncio.run(coordinator.structure_prompt(sample_prompt))

        assert result.context == "expert developer"
        assert coordinator.stats["fallback"] == 1

    def test_unparseable_reply_falls_back(self):
        delegate = GeminiDelegate(model=FakeListChatModel(responses=["I'd rather not."]))
        coordinator = PromptCoordinator(delegate=delegate)

        result = asyncio.run(coordinator.structure_prompt("hello world", "chatbot"))

        assert result == fallback_structure("hello world", PromptType.CHATBOT)


class TestEnhancePipeline:
    """Enhancement: one remote attempt, then the local rewrite."""

    def test_remote_result_returned(self, working_delegate, remote_enhanced):
        coordinator = PromptCoordinator(delegate=working_delegate)

        result = asyncio.run(coordinator.enhance_prompt("sort a list", PromptType.CODING))

        assert result == remote_enhanced
        working_delegate.enhance_prompt.assert_awaited_once()

    def test_failure_falls_back(self, failing_delegate):
        coordinator = PromptCoordinator(delegate=failing_delegate)
        prompt = "Create app ideas for smart home dashboard"

        result = asyncio.run(coordinator.enhance_prompt(prompt, PromptType.GENERAL))

        assert result.enhanced == (
            "You are a knowledgeable AI assistant. Create specific app ideas for smart "
            "home dashboard. Organize your response in a clear, structured format."
        )
        assert result.score == 85
        assert len(result.improvements) == 3
        failing_delegate.enhance_prompt.assert_awaited_once()

    def test_reply_without_enhanced_text_falls_back(self):
        reply = json.dumps({"improvements": ["nothing"], "score": 99})
        delegate = GeminiDelegate(model=FakeListChatModel(responses=[reply]))
        coordinator = PromptCoordinator(delegate=delegate)

        result = asyncio.run(coordinator.enhance_prompt("make me a thing", PromptType.CODING))

        assert result == fallback_enhance("make me a thing", PromptType.CODING)

    def test_stats_accumulate(self, failing_delegate):
        coordinator = PromptCoordinator(delegate=failing_delegate)

        asyncio.run(coordinator.enhance_prompt("one"))
        asyncio.run(coordinator.structure_prompt("two"))

        assert coordinator.stats == {"remote": 0, "fallback": 2}


class TestModuleFunctions:
    """Module-level helpers delegate to the global coordinator."""

    def test_uses_global_instance(self, monkeypatch, working_delegate, remote_enhanced):
        monkeypatch.setattr(coordinator_module, "coordinator", PromptCoordinator(delegate=working_delegate))

        result = asyncio.run(coordinator_module.enhance_prompt("sort a list"))

        assert result == remote_enhanced
