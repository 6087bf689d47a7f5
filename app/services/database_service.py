# /boilerforge-backend/app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db
from app.db.models.template_models import Template

# --- Repository Imports ---
from .database_helpers.template_repository_sql import TemplateRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Thin facade over the SQL repositories. Services talk to this class
        and never to a Session directly, which keeps them easy to mock.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.template_repo = TemplateRepositorySQL(db_session)

    # --- TEMPLATE CACHE METHODS (DELEGATED) ---
    def find_cached_template(self, prompt: str) -> Optional[Template]: return self.template_repo.find_cached_template(prompt)
    def add_template_record(self, record: Dict) -> Template: return self.template_repo.add_template_record(record)
    def increment_template_downloads(self, template_id: str) -> Optional[Template]: return self.template_repo.increment_downloads(template_id)

    # --- STATS METHODS (DELEGATED) ---
    def get_total_downloads(self) -> int: return self.template_repo.get_total_downloads()

    # --- DASHBOARD METHODS (DELEGATED) ---
    def get_templates_by_user_id(self, user_id: str) -> List[Template]: return self.template_repo.get_templates_by_user_id(user_id)
    def delete_template_record(self, template_id: str, user_id: str) -> bool: return self.template_repo.delete_template_record(template_id, user_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
