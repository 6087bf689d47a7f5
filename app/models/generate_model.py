# /boilerforge-backend/app/models/generate_model.py

from typing import Optional

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """
    Defines the contract for POST /api/generate. The prompt is a free-form
    description of the stack, usually composed by the web form.
    """
    prompt: Optional[str] = Field(
        default=None,
        description="Description of the project to scaffold.",
        examples=["Language: Python, Framework: FastAPI, Database: SQLite, API Style: REST"]
    )


class GenerateResponse(BaseModel):
    """
    Defines the contract for a successful generation. `cached` is True when
    the archive was served from a previous, identical request.
    """
    url: str
    cached: bool
