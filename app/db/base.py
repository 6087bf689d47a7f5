# /boilerforge-backend/app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan and when the app creates tables.

from .base_class import Base

from .models.template_models import Template
