"""Common utility functions shared by the remote delegate and orchestrators."""

import json
from typing import Any, Dict

from agents.exceptions import ResponseParseError
from config.config import get_logger

logger = get_logger(__name__)


def extract_json_object(text: str, request_type: str = None) -> Dict[str, Any]:
    """Parse the JSON object spanning the first ``{`` to the last ``}`` in *text*.

    Raises:
        ResponseParseError: If no object is present or it is not valid JSON
    """
    start_idx = text.find("{")
    end_idx = text.rfind("}")
    if start_idx == -1 or end_idx < start_idx:
        raise ResponseParseError(
            "Invalid response format from Gemini",
            request_type=request_type,
            response_text=text,
        )

    try:
        parsed = json.loads(text[start_idx:end_idx + 1])
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to parse JSON object from reply. Error: {e}")
        raise ResponseParseError(
            f"Failed to parse JSON from Gemini response: {e}",
            request_type=request_type,
            response_text=text,
            cause=e,
        ) from e

    return parsed


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate text to a maximum length with suffix."""
    if not text or len(text) <= max_length:
        return text

    return text[:max_length] + suffix
