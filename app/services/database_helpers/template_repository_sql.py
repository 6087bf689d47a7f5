# /boilerforge-backend/app/services/database_helpers/template_repository_sql.py

from typing import List, Dict, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.db.models.template_models import Template

class TemplateRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_template_record(self, record: Dict) -> Template:
        """Creates a new Template record in the database from a dictionary."""
        new_template = Template(**record)
        self.db.add(new_template)
        self.db.commit()
        self.db.refresh(new_template)
        return new_template

    def find_cached_template(self, prompt: str) -> Optional[Template]:
        """
        Returns the newest record for this exact (normalized) prompt that
        already has a download URL, or None.
        """
        return (
            self.db.query(Template)
            .filter(Template.prompt == prompt, Template.s3_url != "")
            .order_by(Template.created_at.desc())
            .first()
        )

    def increment_downloads(self, template_id: str) -> Optional[Template]:
        """Bumps the download counter in SQL so the increment itself is atomic."""
        updated = (
            self.db.query(Template)
            .filter(Template.id == template_id)
            .update({Template.downloads: Template.downloads + 1}, synchronize_session=False)
        )
        self.db.commit()
        if not updated:
            return None
        return self.db.query(Template).filter(Template.id == template_id).first()

    def get_total_downloads(self) -> int:
        total = self.db.query(func.sum(Template.downloads)).scalar()
        return int(total or 0)

    def get_templates_by_user_id(self, user_id: str) -> List[Template]:
        """Retrieves a user's records, ordered by most recent first."""
        return (
            self.db.query(Template)
            .filter(Template.user_id == user_id)
            .order_by(Template.created_at.desc())
            .all()
        )

    def delete_template_record(self, template_id: str, user_id: str) -> bool:
        """Deletes a single record, but only if it belongs to the given user."""
        record = (
            self.db.query(Template)
            .filter(Template.id == template_id, Template.user_id == user_id)
            .first()
        )
        if record:
            self.db.delete(record)
            self.db.commit()
            return True
        return False
