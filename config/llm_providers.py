"""
Gemini provider setup for the Prompt Structurer.

Builds and caches ``ChatGoogleGenerativeAI`` instances.  A missing API key is
reported as a ``ConfigurationError`` so callers can fall back to the local
heuristics.
"""

from typing import Optional, Dict, Any
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from config.config import settings, get_model_config, get_logger
from agents.exceptions import ConfigurationError

logger = get_logger(__name__)


def _init_google(model_name: str, api_key: str, temperature: float = 0.3, **kwargs) -> BaseChatModel:
    """Initialize Google Gemini provider."""
    return ChatGoogleGenerativeAI(
        model=model_name,
        google_api_key=api_key,
        temperature=temperature,
        **kwargs,
    )


# Provider definition
PROVIDER_CONFIG: Dict[str, Any] = {
    "init_fn": _init_google,
    "default_model": "gemini-1.5-flash",
    "api_key_env": "google_api_key",
    "models": ["gemini-1.5-flash", "gemini-2.0-flash", "gemini-2.5-flash-lite"],
}


class LLMProvider:
    """Caches one chat model per (model, temperature) pair."""

    def __init__(self):
        self._instances: Dict[str, BaseChatModel] = {}

    def is_configured(self) -> bool:
        return bool(getattr(settings, PROVIDER_CONFIG["api_key_env"], None))

    def get_model(
        self,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        **kwargs,
    ) -> BaseChatModel:
        """
        Get a Gemini chat model.

        Raises:
            ConfigurationError: If no Google API key is configured
        """
        config = get_model_config(model_name)
        if temperature is None:
            temperature = config["temperature"]

        if not config["api_key"]:
            raise ConfigurationError(
                "Gemini API key not found",
                config_key="GOOGLE_API_KEY",
            )

        cache_key = f"{config['model_name']}:{temperature}"
        if cache_key in self._instances:
            return self._instances[cache_key]

        instance = PROVIDER_CONFIG["init_fn"](
            config["model_name"], config["api_key"], temperature, **kwargs
        )
        self._instances[cache_key] = instance
        logger.info(f"Initialized LLM: google/{config['model_name']} (temp={temperature})")
        return instance

    def get_status(self) -> Dict[str, Any]:
        """Configuration summary used by the health endpoint."""
        return {
            "provider": "google",
            "configured": self.is_configured(),
            "model": settings.default_model_name,
            "available_models": list(PROVIDER_CONFIG["models"]),
        }


# Global singleton
llm_provider = LLMProvider()


def get_llm(model_name: Optional[str] = None, temperature: Optional[float] = None, **kwargs) -> BaseChatModel:
    """Convenience function to get the configured Gemini model."""
    return llm_provider.get_model(model_name, temperature, **kwargs)
