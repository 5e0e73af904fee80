"""System endpoints: health, prompt types and theme preference."""

from datetime import datetime

from fastapi import APIRouter, Depends

from config.llm_providers import llm_provider
from core.prompt_types import PromptType
from core.storage import ThemeStore
from src.deps import ThemeRequest, ThemeResponse, get_coordinator, theme_store

router = APIRouter()


@router.get("/health")
async def health_check(coordinator=Depends(get_coordinator)):
    """Report service status; heuristics keep working without an API key."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "llm": llm_provider.get_status(),
        "pipeline_counts": dict(coordinator.stats),
    }


@router.get("/api/prompt-types")
async def list_prompt_types():
    return [t.value for t in PromptType]


@router.get("/api/theme", response_model=ThemeResponse)
async def get_theme(store: ThemeStore = Depends(theme_store)):
    return ThemeResponse(theme=store.get())


@router.put("/api/theme", response_model=ThemeResponse)
async def set_theme(req: ThemeRequest, store: ThemeStore = Depends(theme_store)):
    return ThemeResponse(theme=store.save(req.theme))


@router.post("/api/theme/toggle", response_model=ThemeResponse)
async def toggle_theme(store: ThemeStore = Depends(theme_store)):
    return ThemeResponse(theme=store.toggle())
