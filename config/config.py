"""Configuration management for the Prompt Structurer service."""

import logging
import sys
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    google_api_key: Optional[str] = Field(default=None, env="GOOGLE_API_KEY")

    # Model Configuration
    default_model_name: str = Field(default="gemini-1.5-flash", env="DEFAULT_MODEL_NAME")
    llm_temperature: float = Field(default=0.3, env="LLM_TEMPERATURE")

    # System Configuration
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    database_path: str = Field(default="data/prompt_structurer.db", env="DATABASE_PATH")

    # Server Configuration
    host: str = Field(default="0.0.0.0", env="HOST")
    port: int = Field(default=8000, env="PORT")
    cors_origins: List[str] = Field(
        default=["http://localhost:5173", "http://127.0.0.1:5173"],
        env="CORS_ORIGINS",
    )

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_root_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring the package handler on first use."""
    global _root_configured
    if not _root_configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root = logging.getLogger("prompt_structurer")
        root.addHandler(handler)
        root.setLevel(settings.log_level.upper())
        _root_configured = True
    return logging.getLogger(f"prompt_structurer.{name}")


def get_model_config(model_name: str = None):
    """Get model configuration for the Gemini provider."""
    return {
        "model_name": model_name or settings.default_model_name,
        "api_key": settings.google_api_key,
        "temperature": settings.llm_temperature,
    }
