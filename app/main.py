# /boilerforge-backend/app/main.py

# --- Core FastAPI Imports ---
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    generate_router,
    stats_router,
    dashboard_router,
    catalog_router,
)

# --- Startup Logic Imports ---
from .core import config
from .db.database import init_db

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs ONCE when the application starts up.
    init_db()
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Boilerforge Backend API",
    description="AI boilerplate generator: pick a stack, get a zipped, ready-to-run project.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response

# --- API Router Inclusion ---
app.include_router(generate_router.router, prefix="/api/generate", tags=["Generate"])
app.include_router(stats_router.router, prefix="/api/stats", tags=["Stats"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(catalog_router.router, prefix="/api/catalog", tags=["Catalog"])

# --- Local archive downloads (only when archives are stored on this server) ---
if config.STORAGE_BACKEND == "local":
    Path(config.LOCAL_STORAGE_DIR).mkdir(parents=True, exist_ok=True)
    app.mount("/downloads", StaticFiles(directory=config.LOCAL_STORAGE_DIR), name="downloads")

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Boilerforge Backend is running!", "version": app.version}
