# /boilerforge-backend/app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, HTTPException, Response, status

# --- Service and Model Imports ---
from ..core.deps import get_current_user_id
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.project_model import ProjectListResponse

# --- APIRouter Instance ---
router = APIRouter()

# --- Endpoint Definitions ---
@router.get(
    "/projects",
    response_model=ProjectListResponse,
    summary="List My Projects",
    description="Every project the signed-in user has generated or downloaded, newest first."
)
def list_my_projects(
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return dashboard_service.get_user_projects(db=db, user_id=user_id)
    except Exception as e:
        print(f"ERROR fetching projects for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching your projects."
        )


@router.delete(
    "/projects/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete One of My Projects",
    responses={404: {"description": "Project not found"}}
)
def delete_my_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    db: DatabaseService = Depends(get_db_service)
):
    was_deleted = dashboard_service.delete_user_project(db=db, user_id=user_id, project_id=project_id)

    if not was_deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project with ID {project_id} not found.",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
