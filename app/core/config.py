# /boilerforge-backend/app/core/config.py

"""
Runtime configuration, read once from the environment (and a local `.env`
file during development). Every module imports its settings from here so
there is a single place to look when deploying.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
# The second argument is a default value for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./boilerforge.db")

# --- AI Model ---
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GENERATION_TEMPERATURE = float(os.getenv("GENERATION_TEMPERATURE", "0.2"))

# --- Object Storage ---
# "local" writes archives to disk and serves them from /downloads.
# "supabase" uploads them to a Supabase Storage bucket.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "local").lower()
STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "boilerplates")
LOCAL_STORAGE_DIR = os.getenv("LOCAL_STORAGE_DIR", "app/data/boilerplates")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")
SUPABASE_URL = os.getenv("SUPABASE_URL", "").rstrip("/")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")
STORAGE_TIMEOUT_SECONDS = float(os.getenv("STORAGE_TIMEOUT_SECONDS", "30"))

# --- Auth ---
# Bearer tokens are HS256 JWTs whose `sub` claim is the user id.
AUTH_SECRET_KEY = os.getenv("AUTH_SECRET_KEY", "change-me-in-production")
AUTH_ALGORITHM = os.getenv("AUTH_ALGORITHM", "HS256")

# --- HTTP ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
