# /boilerforge-backend/app/services/dashboard_service.py

# --- Core Imports ---
from ..models.project_model import ProjectListResponse, ProjectRecord
from .database_service import DatabaseService

# --- Core Public Functions ---

def get_user_projects(db: DatabaseService, user_id: str) -> ProjectListResponse:
    """
    Retrieves the signed-in user's generated projects, newest first.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.
        user_id: The authenticated user's id.

    Returns:
        A ProjectListResponse with one ProjectRecord per stored generation.
    """
    records = []
    for template in db.get_templates_by_user_id(user_id):
        try:
            records.append(ProjectRecord.model_validate(template))
        except Exception as e:
            print(f"Skipping corrupted project record: {getattr(template, 'id', 'N/A')}. Error: {e}")
            continue

    return ProjectListResponse(results=records, total=len(records))


def delete_user_project(db: DatabaseService, user_id: str, project_id: str) -> bool:
    """Deletes one of the user's projects. Returns False if it is not theirs or does not exist."""
    return db.delete_template_record(project_id, user_id)
