"""Prompt Structurer Configuration - Settings, Logging & LLM Provider."""

from config.config import settings, get_logger, get_model_config

__all__ = [
    "settings",
    "get_logger",
    "get_model_config",
]
