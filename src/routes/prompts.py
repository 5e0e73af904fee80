"""Prompt endpoints: structuring, enhancement and JSON export."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from core.models import StructuredPrompt
from core.storage import EXPORT_FILENAME, export_structured_prompt
from src.deps import EnhanceRequest, EnhanceResponse, PromptRequest, get_coordinator, logger

router = APIRouter()


def _require_prompt(request: PromptRequest) -> str:
    if not request.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt must not be empty.")
    return request.prompt


# ---------------------------------------------------------------------------
# POST /api/structure
# ---------------------------------------------------------------------------

@router.post("/api/structure", response_model=StructuredPrompt)
async def structure_prompt(request: PromptRequest, coordinator=Depends(get_coordinator)) -> StructuredPrompt:
    """Decompose a prompt into context, task, format, constraints and examples."""
    prompt = _require_prompt(request)
    logger.info(f"Structuring {request.prompt_type.value} prompt ({len(prompt)} chars)")
    return await coordinator.structure_prompt(prompt, request.prompt_type)


# ---------------------------------------------------------------------------
# POST /api/enhance
# ---------------------------------------------------------------------------

@router.post("/api/enhance", response_model=EnhanceResponse)
async def enhance_prompt(request: EnhanceRequest, coordinator=Depends(get_coordinator)) -> EnhanceResponse:
    """Rewrite a prompt and report the applied improvements.

    With ``structure`` set, the enhanced text is also structured, as if it
    had been submitted to /api/structure.
    """
    prompt = _require_prompt(request)
    logger.info(f"Enhancing {request.prompt_type.value} prompt ({len(prompt)} chars)")
    enhanced = await coordinator.enhance_prompt(prompt, request.prompt_type)
    structured = None
    if request.structure:
        structured = await coordinator.structure_prompt(enhanced.enhanced, request.prompt_type)
    return EnhanceResponse(**enhanced.model_dump(), structured=structured)


# ---------------------------------------------------------------------------
# POST /api/export
# ---------------------------------------------------------------------------

@router.post("/api/export")
async def export_prompt(structured: StructuredPrompt) -> Response:
    """Return a structured prompt as a downloadable, indented JSON file."""
    return Response(
        content=export_structured_prompt(structured),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
