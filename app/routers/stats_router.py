# /boilerforge-backend/app/routers/stats_router.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..services import stats_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.stats_model import StatsResponse

router = APIRouter()

@router.get(
    "", # Maps to /api/stats
    response_model=StatsResponse,
    summary="Get Download Counter",
    description="Total downloads across all generated projects. Never cached."
)
def get_stats(db: DatabaseService = Depends(get_db_service)):
    try:
        stats = stats_service.get_download_count(db=db)
    except Exception:
        # The landing page polls this endpoint; keep the payload shape on failure.
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"count": 0},
            headers={"Cache-Control": "no-store"}
        )
    return JSONResponse(content=stats.model_dump(), headers={"Cache-Control": "no-store"})
