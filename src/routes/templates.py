"""Template endpoints: list, save, fetch and delete saved prompts."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from agents.exceptions import InputValidationError
from core.models import PromptTemplate
from core.storage import TemplateStore
from src.deps import TemplateCreateRequest, template_store

router = APIRouter()


@router.get("/api/templates", response_model=List[PromptTemplate])
async def list_templates(store: TemplateStore = Depends(template_store)):
    return store.list()


@router.post("/api/templates", response_model=PromptTemplate, status_code=201)
async def create_template(req: TemplateCreateRequest, store: TemplateStore = Depends(template_store)):
    try:
        return store.create(
            name=req.name,
            prompt_type=req.prompt_type,
            raw_prompt=req.raw_prompt,
            structured_prompt=req.structured_prompt,
            enhanced_prompt=req.enhanced_prompt,
        )
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.put("/api/templates/{template_id}", response_model=PromptTemplate)
async def replace_template(template_id: str, template: PromptTemplate,
                           store: TemplateStore = Depends(template_store)):
    """Full overwrite of a template by id (inserted if the id is new)."""
    if template.id != template_id:
        raise HTTPException(status_code=400, detail="Template id does not match the URL.")
    return store.save(template)


@router.get("/api/templates/{template_id}", response_model=PromptTemplate)
async def get_template(template_id: str, store: TemplateStore = Depends(template_store)):
    template = store.get(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.delete("/api/templates/{template_id}")
async def delete_template(template_id: str, store: TemplateStore = Depends(template_store)):
    store.delete(template_id)
    return {"status": "deleted", "id": template_id}
