# /boilerforge-backend/app/db/models/template_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.sql import func
from ..base_class import Base

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Template(Base):
    id = Column(String, primary_key=True, index=True)
    # Always stored normalized (trimmed + lowercased); this is the cache key.
    prompt = Column(String, index=True, nullable=False)
    s3_url = Column(String, nullable=False, default="")
    downloads = Column(Integer, nullable=False, default=1)
    user_id = Column(String, index=True, nullable=True) # V2 TODO: Add ForeignKey once users live in our own table
    # Set in Python for microsecond resolution; SQLite's now() only has whole seconds,
    # and "newest first" ordering depends on this column.
    created_at = Column(DateTime(timezone=True), default=_utcnow, server_default=func.now())
