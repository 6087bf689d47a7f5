# /boilerforge-backend/app/routers/catalog_router.py

from fastapi import APIRouter, HTTPException, status

from ..models import catalog_model
from ..services import catalog_service

router = APIRouter()

@router.get(
    "",
    response_model=catalog_model.CatalogResponse,
    summary="Get the Stack Catalog",
    description="Languages with their frameworks, databases, auth and testing options, plus the API styles."
)
def get_catalog():
    return catalog_service.get_catalog()


@router.post(
    "/prompt",
    response_model=catalog_model.PromptResponse,
    summary="Preview the Generation Prompt",
)
def preview_prompt(selection: catalog_model.StackSelection):
    """Validates a stack selection and returns the prompt it would generate."""
    try:
        return catalog_model.PromptResponse(prompt=catalog_service.build_prompt_from_selection(selection))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
