# /boilerforge-backend/app/models/catalog_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


# --- Catalog (what the form may offer) ---
class LanguageOptions(BaseModel):
    frameworks: List[str]
    databases: List[str]
    auth: List[str]
    testing: List[str]


class CatalogResponse(BaseModel):
    languages: Dict[str, LanguageOptions]
    api_styles: List[str]


# --- Selection (what the user picked) ---
class StackSelection(BaseModel):
    """
    The form state. Only `language` is required: every other choice falls
    back to the first option the catalog offers for that language.
    """
    language: str
    framework: Optional[str] = None
    database: Optional[str] = None
    api_style: str = "REST"
    auth: str = "None"
    testing: str = "None"

    # Optional extras ("Advanced" section of the form)
    docker: bool = False
    ci_cd: bool = False
    swagger: bool = False
    worker: bool = False
    terraform: bool = False
    vector_db: bool = Field(default=False, description="Include a vector database setup.")


class PromptResponse(BaseModel):
    prompt: str
