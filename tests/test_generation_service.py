# /tests/test_generation_service.py

import io
import zipfile
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.services import generation_service, prompt_library
from app.services.storage_service import StorageUploadError

AI_PAYLOAD = {
    "project_root": {
        "package.json": '{"scripts": {"setup": "node scripts/setup.js"}}',
        "scripts": {"setup.js": "const fs = require('fs');"},
        "README.md": "# Starter\n\n## Quick Start\n",
    }
}


@pytest.fixture
def mock_generate_json(mocker):
    return mocker.patch(
        "app.services.generation_service.gemini_service.generate_json",
        new_callable=AsyncMock,
        return_value=AI_PAYLOAD,
    )


@pytest.mark.asyncio
async def test_cache_miss_generates_uploads_and_saves(db_service, fake_storage, mock_generate_json):
    response = await generation_service.generate_boilerplate(
        "  Language: Node.js (TypeScript), Framework: Express  ", None, db_service, lambda: fake_storage
    )

    assert response.cached is False
    assert response.url.startswith("https://files.test/boilerplates/boilerplate-")

    # One archive uploaded, containing the AI's file tree.
    assert len(fake_storage.uploads) == 1
    (data, content_type), = fake_storage.uploads.values()
    assert content_type == "application/zip"
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        assert "scripts/setup.js" in archive.namelist()

    # The record is keyed by the normalized prompt.
    saved = db_service.find_cached_template("language: node.js (typescript), framework: express")
    assert saved.s3_url == response.url
    assert saved.downloads == 1
    assert saved.user_id is None


@pytest.mark.asyncio
async def test_cache_miss_sends_compiled_rules_to_the_model(db_service, fake_storage, mock_generate_json):
    await generation_service.generate_boilerplate(
        "Language: Node.js (TypeScript), Database: MongoDB (Mongoose)", None, db_service, lambda: fake_storage
    )

    args, kwargs = mock_generate_json.call_args
    assert "Generate a starter kit for: Language: Node.js (TypeScript), Database: MongoDB (Mongoose)." in args[0]
    assert prompt_library.TECH_RULES["mongoose"] in kwargs["system_instruction"]
    assert prompt_library.TECH_RULES["typescript"] in kwargs["system_instruction"]


@pytest.mark.asyncio
async def test_identical_prompt_is_served_from_cache(db_service, fake_storage, mock_generate_json):
    first = await generation_service.generate_boilerplate("Python, FastAPI", None, db_service, lambda: fake_storage)
    second = await generation_service.generate_boilerplate("  PYTHON, fastapi ", None, db_service, lambda: fake_storage)

    assert second.cached is True
    assert second.url == first.url
    assert mock_generate_json.await_count == 1
    assert len(fake_storage.uploads) == 1
    assert db_service.get_total_downloads() == 2


@pytest.mark.asyncio
async def test_cache_hit_for_signed_in_user_adds_their_own_record(db_service, fake_storage, mock_generate_json):
    first = await generation_service.generate_boilerplate("Go, Gin", None, db_service, lambda: fake_storage)
    await generation_service.generate_boilerplate("Go, Gin", "user_42", db_service, lambda: fake_storage)

    user_projects = db_service.get_templates_by_user_id("user_42")
    assert len(user_projects) == 1
    assert user_projects[0].s3_url == first.url
    assert user_projects[0].downloads == 1
    # 1 (original) + 1 (hit increment) + 1 (user's own row)
    assert db_service.get_total_downloads() == 3


@pytest.mark.asyncio
async def test_cache_miss_records_the_owner(db_service, fake_storage, mock_generate_json):
    await generation_service.generate_boilerplate("Rust, Axum", "user_7", db_service, lambda: fake_storage)
    assert [r.prompt for r in db_service.get_templates_by_user_id("user_7")] == ["rust, axum"]


@pytest.mark.asyncio
async def test_empty_prompt_is_rejected_before_any_work(fake_storage, mock_generate_json):
    db = MagicMock()
    with pytest.raises(ValueError, match="Prompt required"):
        await generation_service.generate_boilerplate("   ", None, db, lambda: fake_storage)
    db.find_cached_template.assert_not_called()
    mock_generate_json.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_ai_tree_saves_nothing(db_service, fake_storage, mock_generate_json):
    mock_generate_json.return_value = {"project_root": {"broken": 42}}

    with pytest.raises(ValueError):
        await generation_service.generate_boilerplate("Python, Flask", None, db_service, lambda: fake_storage)

    assert fake_storage.uploads == {}
    assert db_service.get_total_downloads() == 0


@pytest.mark.asyncio
async def test_upload_failure_propagates_and_saves_nothing(db_service, mock_generate_json):
    failing_storage = MagicMock()
    failing_storage.upload = AsyncMock(side_effect=StorageUploadError("Upload failed: bucket not found"))

    with pytest.raises(StorageUploadError):
        await generation_service.generate_boilerplate("Python, Flask", None, db_service, lambda: failing_storage)

    assert db_service.find_cached_template("python, flask") is None


@pytest.mark.asyncio
async def test_cache_hit_never_builds_the_storage_backend(db_service, fake_storage, mock_generate_json):
    first = await generation_service.generate_boilerplate("Python, Flask", None, db_service, lambda: fake_storage)

    broken_backend = MagicMock(side_effect=ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set"))
    second = await generation_service.generate_boilerplate("Python, Flask", None, db_service, broken_backend)

    assert second == first.model_copy(update={"cached": True})
    broken_backend.assert_not_called()
