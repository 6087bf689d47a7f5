# /boilerforge-backend/app/routers/generate_router.py

from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.deps import get_optional_user_id
from ..models import generate_model
from ..models.catalog_model import StackSelection
from ..services import generation_service, catalog_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.storage_service import StorageService, get_storage_provider

router = APIRouter()


async def _generate_or_500(prompt: str, user_id: Optional[str], db: DatabaseService,
                           get_storage: Callable[[], StorageService]):
    if not generation_service.normalize_prompt(prompt):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Prompt required")
    try:
        return await generation_service.generate_boilerplate(
            prompt=prompt,
            user_id=user_id,
            db=db,
            get_storage=get_storage
        )
    except Exception as e:
        print(f"ERROR generating project: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate project"
        )


@router.post(
    "", # Maps to /api/generate
    response_model=generate_model.GenerateResponse,
    summary="Generate a Boilerplate",
    description="Returns a download URL for a zipped project skeleton, served from cache when the same prompt was generated before."
)
async def generate_project(
    request: generate_model.GenerateRequest,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: DatabaseService = Depends(get_db_service),
    get_storage: Callable[[], StorageService] = Depends(get_storage_provider)
):
    return await _generate_or_500(request.prompt, user_id, db, get_storage)


@router.post(
    "/stack",
    response_model=generate_model.GenerateResponse,
    summary="Generate a Boilerplate from a Stack Selection",
    description="Composes the prompt from structured form choices, then behaves exactly like POST /api/generate."
)
async def generate_project_from_stack(
    selection: StackSelection,
    user_id: Optional[str] = Depends(get_optional_user_id),
    db: DatabaseService = Depends(get_db_service),
    get_storage: Callable[[], StorageService] = Depends(get_storage_provider)
):
    try:
        prompt = catalog_service.build_prompt_from_selection(selection)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return await _generate_or_500(prompt, user_id, db, get_storage)
