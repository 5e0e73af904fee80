"""Route sub-package for Prompt Structurer API endpoints."""

from src.routes.prompts import router as prompts_router
from src.routes.templates import router as templates_router
from src.routes.system import router as system_router

__all__ = [
    "prompts_router",
    "templates_router",
    "system_router",
]
