# /boilerforge-backend/app/models/stats_model.py

from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    """Data contract for GET /api/stats, used by the landing page counter."""

    count: int = Field(
        ...,
        description="Total number of project downloads served so far.",
        examples=[1280]
    )
