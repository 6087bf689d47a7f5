# /boilerforge-backend/app/services/generation_service.py

"""
Cache-first boilerplate generation.

The cache is the `templates` table keyed by the normalized prompt. Lookup
and insert are two separate statements with no lock around them, so two
concurrent requests for a brand-new prompt will both call the model and both
insert a row. Later lookups simply pick the newest row, so that race only
costs an extra generation.
"""

import uuid
from typing import Callable, Optional

from . import gemini_service, ruleset_service, archive_service
from .database_service import DatabaseService
from .storage_service import StorageService, new_archive_name, ZIP_CONTENT_TYPE
from ..core.config import GENERATION_TEMPERATURE
from ..models.generate_model import GenerateResponse

normalize_prompt = ruleset_service.normalize_prompt


def _new_template_id() -> str:
    return f"tpl_{uuid.uuid4().hex[:16]}"


def _serve_from_cache(db: DatabaseService, cached, prompt: str, user_id: Optional[str]) -> GenerateResponse:
    print(f"Cache HIT for prompt '{prompt[:60]}'. Serving existing URL.")

    # Signed-in users get their own row so the project shows up on their dashboard.
    if user_id:
        db.add_template_record({
            "id": _new_template_id(),
            "prompt": prompt,
            "s3_url": cached.s3_url,
            "downloads": 1,
            "user_id": user_id,
        })

    db.increment_template_downloads(cached.id)
    return GenerateResponse(url=cached.s3_url, cached=True)


async def _generate_archive(prompt: str) -> bytes:
    system_prompt = ruleset_service.build_system_prompt(prompt)
    user_prompt = ruleset_service.build_user_prompt(prompt)

    payload = await gemini_service.generate_json(
        user_prompt,
        system_instruction=system_prompt,
        temperature=GENERATION_TEMPERATURE,
    )
    tree = archive_service.extract_project_tree(payload)
    return archive_service.build_zip(tree)


async def generate_boilerplate(
    prompt: str,
    user_id: Optional[str],
    db: DatabaseService,
    get_storage: Callable[[], StorageService],
) -> GenerateResponse:
    """
    Returns a download URL for the requested project, generating and
    uploading a new archive only when no previous one exists. The storage
    backend is only resolved on that path, so cache hits never depend on it.
    Raises ValueError for an empty prompt; everything else propagates.
    """
    clean_prompt = normalize_prompt(prompt)
    if not clean_prompt:
        raise ValueError("Prompt required")

    cached = db.find_cached_template(clean_prompt)
    if cached:
        return _serve_from_cache(db, cached, clean_prompt, user_id)

    print(f"Cache MISS for prompt '{clean_prompt[:60]}'. Asking the AI model...")
    zip_bytes = await _generate_archive(prompt)

    file_name = new_archive_name()
    storage = get_storage()
    public_url = await storage.upload(file_name, zip_bytes, content_type=ZIP_CONTENT_TYPE)

    db.add_template_record({
        "id": _new_template_id(),
        "prompt": clean_prompt,
        "s3_url": public_url,
        "downloads": 1,
        "user_id": user_id or None,
    })
    print(f"New template saved: {file_name}")
    return GenerateResponse(url=public_url, cached=False)
