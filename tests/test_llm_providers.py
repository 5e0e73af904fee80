"""Tests for the Gemini provider setup."""

import pytest
from unittest.mock import patch, MagicMock

from agents.exceptions import ConfigurationError
from config.config import get_model_config, settings
from config.llm_providers import LLMProvider, PROVIDER_CONFIG, get_llm, llm_provider


class TestProviderConfig:
    """Provider definition."""

    def test_required_fields(self):
        assert callable(PROVIDER_CONFIG["init_fn"])
        assert PROVIDER_CONFIG["api_key_env"] == "google_api_key"
        assert PROVIDER_CONFIG["default_model"] in PROVIDER_CONFIG["models"]

    def test_model_config_uses_settings(self, fake_google_key):
        config = get_model_config()
        assert config["model_name"] == settings.default_model_name
        assert config["api_key"] == fake_google_key
        assert config["temperature"] == settings.llm_temperature

    def test_model_config_override(self):
        assert get_model_config("gemini-2.0-flash")["model_name"] == "gemini-2.0-flash"


class TestLLMProvider:
    """Tests for the LLMProvider class."""

    def test_initialization(self):
        provider = LLMProvider()
        assert provider._instances == {}

    def test_not_configured_without_key(self):
        assert not LLMProvider().is_configured()

    def test_missing_key_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            LLMProvider().get_model()
        assert exc_info.value.details["config_key"] == "GOOGLE_API_KEY"

    def test_model_created_and_cached(self, fake_google_key):
        provider = LLMProvider()
        fake_model = MagicMock()
        with patch.dict(PROVIDER_CONFIG, {"init_fn": MagicMock(return_value=fake_model)}):
            first = provider.get_model()
            second = provider.get_model()

            assert first is fake_model
            assert second is fake_model
            PROVIDER_CONFIG["init_fn"].assert_called_once_with(
                settings.default_model_name, fake_google_key, settings.llm_temperature
            )

    def test_temperature_is_part_of_cache_key(self, fake_google_key):
        provider = LLMProvider()
        with patch.dict(PROVIDER_CONFIG, {"init_fn": MagicMock(side_effect=lambda *a, **kw: MagicMock())}):
            cold = provider.get_model(temperature=0.0)
            warm = provider.get_model(temperature=0.9)

        assert cold is not warm
        assert len(provider._instances) == 2

    def test_status(self, fake_google_key):
        status = LLMProvider().get_status()
        assert status["provider"] == "google"
        assert status["configured"] is True
        assert status["model"] == settings.default_model_name
        assert "gemini-1.5-flash" in status["available_models"]


class TestGetLLM:

    def test_uses_global_provider(self, fake_google_key):
        sentinel = MagicMock()
        with patch.object(llm_provider, "get_model", return_value=sentinel) as get_model:
            assert get_llm("gemini-2.0-flash") is sentinel
        get_model.assert_called_once_with("gemini-2.0-flash", None)
