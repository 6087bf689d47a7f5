# /boilerforge-backend/app/services/stats_service.py

from ..models.stats_model import StatsResponse
from .database_service import DatabaseService


def get_download_count(db: DatabaseService) -> StatsResponse:
    """
    Sums the download counters of every stored record. Each generation row
    starts at 1 and every cache hit adds 1, so this is the number of
    archives handed out so far.
    """
    try:
        return StatsResponse(count=db.get_total_downloads())
    except Exception as e:
        print(f"ERROR calculating download count: {e}")
        # Re-raise so the router can answer with its own fallback payload.
        raise
