"""
Template and preference storage for the Prompt Structurer.

Two string-keyed entries live in the key-value table:

* ``prompt-structurer-templates``: JSON array of saved templates
* ``prompt-structurer-theme``: ``"light"`` or ``"dark"``

Unreadable entries are treated as absent.  Templates are upserted by id and
kept in insertion order.
"""

import json
import time
from datetime import datetime, timezone
from typing import Any, List, Literal, Optional

from pydantic import ValidationError

from agents.exceptions import InputValidationError, StorageError
from config.config import get_logger, settings
from core.database import Database
from core.models import PromptTemplate, StructuredPrompt
from core.prompt_types import PromptType

logger = get_logger(__name__)

TEMPLATES_KEY = "prompt-structurer-templates"
THEME_KEY = "prompt-structurer-theme"

Theme = Literal["light", "dark"]
DEFAULT_THEME: Theme = "light"
_THEMES = ("light", "dark")

EXPORT_FILENAME = "structured-prompt.json"


def _entry_id(item: Any) -> Optional[str]:
    return item.get("id") if isinstance(item, dict) else None


class TemplateStore:
    """Ordered collection of ``PromptTemplate`` persisted as one JSON array."""

    def __init__(self, db: Database):
        self.db = db

    def _read_raw(self) -> List[Any]:
        """Stored entries as plain JSON values; an unreadable array reads as empty."""
        raw = self.db.get_item(TEMPLATES_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise StorageError("Template entry is not a JSON array", key=TEMPLATES_KEY)
            return data
        except (json.JSONDecodeError, StorageError) as e:
            logger.warning(f"Ignoring unreadable template storage: {e}")
            return []

    def _read(self) -> List[PromptTemplate]:
        templates = []
        for item in self._read_raw():
            try:
                templates.append(PromptTemplate.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid template entry {_entry_id(item)!r}: {e}")
        return templates

    def _write_raw(self, items: List[Any]) -> None:
        self.db.set_item(TEMPLATES_KEY, json.dumps(items))

    # -- public API ---------------------------------------------------------

    def save(self, template: PromptTemplate) -> PromptTemplate:
        """Insert *template*, or replace the stored entry with the same id in place.

        Entries that fail validation are written back untouched.
        """
        items = self._read_raw()
        entry = template.to_storage()
        for i, item in enumerate(items):
            if _entry_id(item) == template.id:
                items[i] = entry
                break
        else:
            items.append(entry)
        self._write_raw(items)
        logger.info(f"Saved template {template.id}: {template.name}")
        return template

    def list(self) -> List[PromptTemplate]:
        return self._read()

    def get(self, template_id: str) -> Optional[PromptTemplate]:
        for template in self._read():
            if template.id == template_id:
                return template
        return None

    def delete(self, template_id: str) -> None:
        items = self._read_raw()
        remaining = [item for item in items if _entry_id(item) != template_id]
        self._write_raw(remaining)
        if len(remaining) != len(items):
            logger.info(f"Deleted template {template_id}")

    def create(
        self,
        name: str,
        prompt_type: PromptType,
        raw_prompt: str,
        structured_prompt: StructuredPrompt,
        enhanced_prompt: Optional[str] = None,
    ) -> PromptTemplate:
        """Build a template with a time-derived id and save it."""
        if not name or not name.strip():
            raise InputValidationError("Template name must not be empty", field="name", value=name)
        if not raw_prompt or not raw_prompt.strip():
            raise InputValidationError("Template prompt must not be empty", field="raw_prompt", value=raw_prompt)

        template = PromptTemplate(
            id=str(int(time.time() * 1000)),
            name=name.strip(),
            type=PromptType(prompt_type),
            raw_prompt=raw_prompt,
            enhanced_prompt=enhanced_prompt,
            structured_prompt=structured_prompt,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        return self.save(template)


class ThemeStore:
    """Persisted light/dark preference."""

    def __init__(self, db: Database):
        self.db = db

    def get(self) -> Theme:
        value = self.db.get_item(THEME_KEY)
        return value if value in _THEMES else DEFAULT_THEME

    def save(self, theme: Theme) -> Theme:
        if theme not in _THEMES:
            raise InputValidationError("Theme must be 'light' or 'dark'", field="theme", value=theme)
        self.db.set_item(THEME_KEY, theme)
        return theme

    def toggle(self) -> Theme:
        return self.save("dark" if self.get() == "light" else "light")


def export_structured_prompt(structured: StructuredPrompt) -> str:
    """Serialize a structured prompt as 2-space indented JSON."""
    return json.dumps(structured.model_dump(mode="json"), indent=2)


# ---------------------------------------------------------------------------
# Lazy global instances
# ---------------------------------------------------------------------------

_db: Optional[Database] = None


def get_database() -> Database:
    global _db
    if _db is None:
        _db = Database(settings.database_path)
    return _db


def get_template_store() -> TemplateStore:
    return TemplateStore(get_database())


def get_theme_store() -> ThemeStore:
    return ThemeStore(get_database())
