# /boilerforge-backend/app/services/prompt_library.py

"""
This file is the central, version-controlled library for all master prompts
used by the application's AI services, plus the technology rules that get
appended to the system prompt. Treating prompts as code and centralizing
them here keeps wording changes reviewable in one place.
"""

BOILERPLATE_SYSTEM_PROMPT = """
You are a Senior DevOps Architect. Generate a **Production-Ready, Interactive Starter Kit**.

**--- GOAL ---**
Zero-friction developer experience. The user downloads, runs ONE setup command, and starts coding immediately.

**--- REQUIRED OUTPUT (JSON) ---**
1.  **ROOT KEY:** The JSON object has exactly one root key: "project_root".
2.  **FILE TREE:** Folders are JSON objects. Files are keys whose value is the full file content as a STRING.
3.  **NO NESTED CONTENT:** Never put an object or an array where file content is expected.
4.  **RELATIVE NAMES ONLY:** Keys are plain file or folder names. No leading "/", no "..".

**--- MODERN STANDARDS & COMPATIBILITY (CRITICAL) ---**
1.  **LATEST VERSIONS:** Assume the user installs the latest stable versions of all libraries.
2.  **NO DEPRECATED CODE:** Strictly avoid deprecated methods and options.
3.  **STRICT CONSISTENCY:** Code syntax must match the installed library versions exactly, so the project builds without type errors.

**--- MANDATORY CONTENTS & SAFETY RULES ---**
1.  **PROJECT STRUCTURE:** A professional folder hierarchy tailored to the language.
2.  **DEPENDENCY CONSISTENCY:** Every imported module MUST be listed in the manifest file.
3.  **BUILD SAFETY:** Any Dockerfile installs dependencies BEFORE the build step.

**--- THE "ZERO CONFIG" LOGIC ---**
1.  **ANALYZE REQUIREMENTS:** Determine exactly which environment variables are needed.
2.  **.env.example:** List every key with an empty value.
3.  **scripts/setup.js:** A Node.js script (native 'readline' and 'fs' only) that welcomes the user, iterates through every key in .env.example, asks for each value with a helpful hint, writes the answers to '.env', and finally prints: "Setup complete! Run 'npm run dev' to start."
4.  **SETUP COMMAND:** Expose the script as a "setup" command (e.g. "node scripts/setup.js" in package.json scripts).

**--- README.md ---**
Include a **Quick Start** section: install dependencies, run the setup command, start the dev server.

**--- EXAMPLE JSON STRUCTURE ---**
{
  "project_root": {
    "package.json": "{ \\"scripts\\": { \\"setup\\": \\"node scripts/setup.js\\" } }",
    "scripts": {
      "setup.js": "const fs = require('fs'); ..."
    },
    "README.md": "# My Project\\n\\n## Quick Start\\n...",
    "src": { }
  }
}
"""

TECH_RULES_HEADER = "**--- TECHNOLOGY-SPECIFIC RULES (MUST FOLLOW) ---**"

BOILERPLATE_USER_PROMPT = """
Generate a starter kit for: {prompt}.
Ensure code syntax is up-to-date with the latest libraries.
"""

# --- Technology rule dictionary ---
# Keys are lowercase substrings searched for in the normalized prompt.
# Order matters: matched rules are listed in this order. Keys that could
# collide with ordinary words ("gin", "java", "rust") are anchored on the
# "framework: " / "language: " labels the web form emits.
TECH_RULES = {
    # --- Languages ---
    "typescript": "TypeScript: set \"skipLibCheck\": true and \"noImplicitAny\": false in tsconfig.json, and add '@types/node' to devDependencies.",
    "language: python": "Python: target Python 3.12, pin dependencies in requirements.txt (or pyproject.toml) and use type hints throughout.",
    "golang": "Go: go.mod must declare a full module path and a current 'go' directive; do not reference packages that are not required in go.mod.",
    "language: java": "Java: target Java 21, use 'jakarta.*' imports (never 'javax.*') and the modern 'switch' expression syntax where applicable.",
    ".net": "C#: target .NET 8 with the minimal hosting model (Program.cs only, no Startup.cs).",
    "language: rust": "Rust: use edition 2021 in Cargo.toml and an async runtime (tokio) compatible with the chosen framework.",
    "language: php": "PHP: require PHP 8.2+ in composer.json and use typed properties.",
    "language: ruby": "Ruby: include a Gemfile with a 'ruby' version line and a Gemfile.lock-friendly dependency list.",
    # --- Frameworks ---
    "express": "Express: use Express 5 (async route errors propagate automatically); never call deprecated 'bodyParser' directly, use 'express.json()'.",
    "nestjs": "NestJS: include nest-cli.json and tsconfig.build.json; bootstrap in src/main.ts with a global ValidationPipe.",
    "fastify": "Fastify: use Fastify v4+ plugin registration with 'fastify-plugin' where encapsulation must be broken.",
    "next.js": "Next.js: use the App Router ('app/' directory) and Route Handlers; no 'pages/' directory.",
    "fastapi": "FastAPI: use Pydantic v2 APIs (model_dump, ConfigDict) and a 'lifespan' handler instead of '@app.on_event'.",
    "django": "Django: read SECRET_KEY, DEBUG and DATABASE settings from environment variables; include manage.py.",
    "flask": "Flask: use the application factory pattern ('create_app') and blueprints.",
    "framework: gin": "Gin: call gin.SetMode from an environment variable and register routes in a separate router package.",
    "spring boot": "Spring Boot: use Spring Boot 3 with 'application.yml' reading secrets from environment variables.",
    "laravel": "Laravel: use Laravel 11 conventions (bootstrap/app.php routing, no Kernel.php).",
    "rails": "Rails: use Rails 7+ in API mode ('config.api_only = true').",
    # --- Data layer ---
    "mongoose": "Mongoose: use Mongoose 8+. Do NOT pass 'useNewUrlParser' or 'useUnifiedTopology' to mongoose.connect.",
    "prisma": "Prisma: include prisma/schema.prisma and run 'prisma generate' before compiling; in Docker, run it after installing dependencies.",
    "sqlalchemy": "SQLAlchemy: use the 2.0 style API (DeclarativeBase, select(), Session.execute).",
    "typeorm": "TypeORM: use a DataSource instance (no deprecated 'createConnection').",
    "redis": "Redis: read the connection URL from REDIS_URL and add a redis service to docker-compose when Docker is requested.",
    # --- API styles ---
    "graphql": "GraphQL: include the schema definition and at least one query and one mutation resolver.",
    "grpc": "gRPC: include the .proto files and the code-generation command in the README.",
    "websocket": "WebSocket: include a heartbeat/ping handler and graceful connection shutdown.",
    # --- Extras ---
    "docker": "Docker: use a multi-stage Dockerfile, copy the manifest and install dependencies before copying the source, and omit the obsolete 'version' key in docker-compose.yml.",
    "github actions": "CI/CD: add .github/workflows/ci.yml that installs dependencies, lints, tests and builds on every push and pull request.",
    "swagger": "OpenAPI: serve interactive API documentation from a '/docs' route.",
    "background worker": "Worker: put the background worker in its own entrypoint and its own docker-compose service.",
    "terraform": "Terraform: place IaC under infra/ with variables.tf, main.tf and outputs.tf; never hardcode credentials.",
    "vector db": "Vector DB: wrap the vector store behind a small client module configured from environment variables.",
}
