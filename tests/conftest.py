"""Shared pytest fixtures for the Prompt Structurer test suite."""

import pytest
from unittest.mock import AsyncMock

from config.config import settings
from core.database import Database
from core.models import EnhancedPrompt, StructuredPrompt
from core.storage import TemplateStore, ThemeStore


# ─── Environment Fixtures ───────────────────────────────────────

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Ensure tests never use a real API key."""
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setattr(settings, "google_api_key", None)


@pytest.fixture
def fake_google_key(monkeypatch):
    """Provide a fake Google API key."""
    monkeypatch.setattr(settings, "google_api_key", "test-google-key-12345")
    return "test-google-key-12345"


# ─── Storage Fixtures ───────────────────────────────────────────

@pytest.fixture
def db(tmp_path):
    """A throwaway SQLite key-value store."""
    return Database(str(tmp_path / "test.db"))


@pytest.fixture
def template_store(db):
    return TemplateStore(db)


@pytest.fixture
def theme_store(db):
    return ThemeStore(db)


# ─── Mock Delegate Fixtures ─────────────────────────────────────

@pytest.fixture
def remote_structured():
    return StructuredPrompt(
        context="Senior Python developer",
        task="Write a sorting function",
        format="Code block",
        constraints=["Use type hints"],
        examples=[],
    )


@pytest.fixture
def remote_enhanced():
    return EnhancedPrompt(
        original="sort a list",
        enhanced="You are a Python expert. Write a function that sorts a list of integers.",
        improvements=["Added role", "Clarified task"],
        score=90,
    )


@pytest.fixture
def working_delegate(remote_structured, remote_enhanced):
    """A delegate whose remote calls succeed."""
    delegate = AsyncMock()
    delegate.structure_prompt = AsyncMock(return_value=remote_structured)
    delegate.enhance_prompt = AsyncMock(return_value=remote_enhanced)
    return delegate


@pytest.fixture
def failing_delegate():
    """A delegate whose remote calls always fail."""
    delegate = AsyncMock()
    delegate.structure_prompt = AsyncMock(side_effect=RuntimeError("network down"))
    delegate.enhance_prompt = AsyncMock(side_effect=RuntimeError("network down"))
    return delegate


# ─── Sample Data Fixtures ───────────────────────────────────────

@pytest.fixture
def sample_prompt():
    """A sample prompt with a role and a word limit."""
    return "You are an expert developer. Write Python code. Keep it under 50 words."
