# /tests/conftest.py

import os
import tempfile

# These must be in place BEFORE any `app.*` import: the Gemini client and the
# storage mount read their configuration at import time.
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STORAGE_BACKEND"] = "local"
os.environ["LOCAL_STORAGE_DIR"] = tempfile.mkdtemp(prefix="boilerforge-tests-")
os.environ["PUBLIC_BASE_URL"] = "http://testserver"
os.environ["AUTH_SECRET_KEY"] = "test-secret"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.services.database_service import DatabaseService
from app.services.storage_service import StorageService


class FakeStorage(StorageService):
    """Records uploads in memory instead of talking to a real bucket."""

    def __init__(self):
        self.uploads = {}

    async def upload(self, file_name, data, content_type="application/zip"):
        self.uploads[file_name] = (data, content_type)
        return f"https://files.test/boilerplates/{file_name}"


@pytest.fixture
def db_session():
    """A fresh in-memory SQLite database for EACH test function."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def fake_storage():
    return FakeStorage()
