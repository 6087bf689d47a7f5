# /boilerforge-backend/app/models/project_model.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ProjectRecord(BaseModel):
    """
    A single generation record as shown on the user's dashboard.
    Built directly from the SQLAlchemy Template object.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    prompt: str
    s3_url: str
    downloads: int
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None


class ProjectListResponse(BaseModel):
    """Defines the data contract for GET /api/dashboard/projects."""
    results: List[ProjectRecord]
    total: int
