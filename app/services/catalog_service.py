# /boilerforge-backend/app/services/catalog_service.py

"""
The stack catalog offered by the web form, and the logic that turns a form
selection into the prompt string sent to /api/generate.

The prompt format is load-bearing: it is the cache key (after
normalization), so two identical selections must always compose the exact
same string.
"""

from typing import Dict, List

from ..models.catalog_model import CatalogResponse, LanguageOptions, StackSelection

# --- 1. Base technology options per language ---
TECH_CONFIG: Dict[str, Dict[str, List[str]]] = {
    "Node.js (TypeScript)": {
        "frameworks": ["Express", "NestJS", "Fastify", "Next.js (App Router)"],
        "databases": ["PostgreSQL (Prisma)", "MongoDB (Mongoose)", "MySQL (TypeORM)", "Redis", "None"],
    },
    "Python": {
        "frameworks": ["FastAPI", "Django", "Flask"],
        "databases": ["PostgreSQL (SQLAlchemy)", "PostgreSQL (Prisma)", "MongoDB (Motor)", "SQLite", "None"],
    },
    "Go (Golang)": {
        "frameworks": ["Gin", "Echo", "Fiber", "Standard Lib"],
        "databases": ["PostgreSQL (GORM)", "PostgreSQL (Pgx)", "MongoDB", "Redis", "None"],
    },
    "Java": {
        "frameworks": ["Spring Boot", "Quarkus"],
        "databases": ["PostgreSQL (JPA)", "MySQL", "MongoDB", "None"],
    },
    "C# (.NET)": {
        "frameworks": ["ASP.NET Web API", "Blazor Server"],
        "databases": ["SQL Server (EF Core)", "PostgreSQL (EF Core)", "MongoDB", "None"],
    },
    "Rust": {
        "frameworks": ["Actix-web", "Axum"],
        "databases": ["PostgreSQL (Diesel)", "PostgreSQL (SQLx)", "None"],
    },
    "PHP": {
        "frameworks": ["Laravel", "Symfony"],
        "databases": ["MySQL (Eloquent)", "PostgreSQL", "None"],
    },
    "Ruby": {
        "frameworks": ["Ruby on Rails", "Sinatra"],
        "databases": ["PostgreSQL", "SQLite", "None"],
    },
}

# --- 2. Auth / testing tools that make sense for each language ---
COMPATIBLE_TOOLS: Dict[str, Dict[str, List[str]]] = {
    "Node.js (TypeScript)": {"auth": ["None", "JWT", "Clerk", "Auth0"], "testing": ["None", "Jest", "Vitest"]},
    "Python": {"auth": ["None", "JWT", "Auth0"], "testing": ["None", "PyTest", "Unittest"]},
    "Go (Golang)": {"auth": ["None", "JWT", "Auth0"], "testing": ["None", "Go Test"]},
    "Java": {"auth": ["None", "Spring Security"], "testing": ["None", "JUnit"]},
    "C# (.NET)": {"auth": ["None", "Identity"], "testing": ["None", "xUnit"]},
    "Rust": {"auth": ["None", "JWT"], "testing": ["None", "Cargo Test"]},
    "PHP": {"auth": ["None", "Sanctum"], "testing": ["None", "PHPUnit"]},
    "Ruby": {"auth": ["None", "Devise"], "testing": ["None", "RSpec"]},
}

API_STYLES: List[str] = ["REST", "GraphQL", "gRPC", "WebSocket"]

# (selection flag, prompt clause), in the order the clauses are appended.
EXTRA_CLAUSES = [
    ("docker", "Include Dockerfile & docker-compose"),
    ("ci_cd", "Include GitHub Actions CI/CD"),
    ("swagger", "Include Swagger/OpenAPI documentation"),
    ("worker", "Include Background Worker (Redis)"),
    ("terraform", "Include Terraform IaC scripts"),
    ("vector_db", "Include Vector DB setup (Pinecone/Chroma)"),
]


def get_catalog() -> CatalogResponse:
    languages = {
        language: LanguageOptions(
            frameworks=options["frameworks"],
            databases=options["databases"],
            auth=COMPATIBLE_TOOLS[language]["auth"],
            testing=COMPATIBLE_TOOLS[language]["testing"],
        )
        for language, options in TECH_CONFIG.items()
    }
    return CatalogResponse(languages=languages, api_styles=API_STYLES)


def _require_option(kind: str, value: str, allowed: List[str], language: str) -> None:
    if value not in allowed:
        raise ValueError(
            f"{kind} '{value}' is not available for {language}. Choose one of: {', '.join(allowed)}."
        )


def build_prompt_from_selection(selection: StackSelection) -> str:
    """
    Validates a form selection against the catalog and composes the
    generation prompt. Raises ValueError on any incompatible choice.
    """
    config = TECH_CONFIG.get(selection.language)
    if config is None:
        raise ValueError(f"Unsupported language: '{selection.language}'.")
    tools = COMPATIBLE_TOOLS[selection.language]

    framework = selection.framework or config["frameworks"][0]
    database = selection.database or config["databases"][0]

    _require_option("Framework", framework, config["frameworks"], selection.language)
    _require_option("Database", database, config["databases"], selection.language)
    _require_option("Authentication", selection.auth, tools["auth"], selection.language)
    _require_option("Testing", selection.testing, tools["testing"], selection.language)
    if selection.api_style not in API_STYLES:
        raise ValueError(f"Unsupported API style: '{selection.api_style}'.")

    prompt = f"Language: {selection.language}, Framework: {framework}, Database: {database}, API Style: {selection.api_style}"
    if selection.auth != "None":
        prompt += f", Authentication: {selection.auth}"
    if selection.testing != "None":
        prompt += f", Testing: {selection.testing}"

    for flag, clause in EXTRA_CLAUSES:
        if getattr(selection, flag):
            prompt += f", {clause}"

    return prompt
