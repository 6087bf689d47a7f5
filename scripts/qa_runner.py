#!/usr/bin/env python3
"""
"Golden path" QA run against a live backend.

For each popular stack it asks the API for a fresh project (a timestamp
suffix bypasses the cache), downloads and extracts the zip, then checks
that `docker compose build` succeeds. Build logs of failures are written
next to the extracted project.

Usage:
    python scripts/qa_runner.py [--base-url http://localhost:8000] [--out qa_output]
"""
import argparse
import io
import shutil
import subprocess
import sys
import time
import zipfile
from pathlib import Path
from typing import Optional

import httpx

# ─── CONFIGURE ────────────────────────────────────────────────────────────────
SCENARIOS = [
    # Classic Node backend (MERN without the front end)
    "Node.js (TypeScript), Express, MongoDB (Mongoose), Include Docker",
    # Modern enterprise Node
    "Node.js (TypeScript), NestJS, PostgreSQL (Prisma), Include Docker",
    # Modern Python
    "Python, FastAPI, PostgreSQL (Prisma), Include Docker",
    # Classic Python
    "Python, Django, PostgreSQL (SQLAlchemy), Include Docker",
    # Go microservice
    "Go (Golang), Gin, Redis, Include Docker",
]

GENERATE_TIMEOUT_SECONDS = 180
# ────────────────────────────────────────────────────────────────────────────────


def run_scenario(client: httpx.Client, base_url: str, prompt: str, test_dir: Path) -> Optional[dict]:
    """Returns None on success, or a failure dict for the summary."""
    print("   ⏳ Generating...")
    unique_prompt = f"{prompt} --qa-{int(time.time() * 1000)}"
    response = client.post(f"{base_url}/api/generate", json={"prompt": unique_prompt}, timeout=GENERATE_TIMEOUT_SECONDS)
    data = response.json()
    if not data.get("url"):
        raise RuntimeError(data.get("detail") or "No URL returned")
    print("   ✅ Generated.")

    archive = client.get(data["url"], follow_redirects=True)
    archive.raise_for_status()
    (test_dir / "project.zip").write_bytes(archive.content)
    with zipfile.ZipFile(io.BytesIO(archive.content)) as zf:
        zf.extractall(test_dir)

    # Only `build`, not `up`: we want to know the images build.
    print("   🐳 Attempting Docker Build...")
    result = subprocess.run(["docker", "compose", "build"], cwd=test_dir, capture_output=True, text=True)
    if result.returncode == 0:
        print("   🟢 BUILD SUCCESS!")
        return None

    print("   🔴 BUILD FAILED!")
    error_file = test_dir / "error.log"
    error_file.write_text(result.stderr + "\n" + result.stdout, encoding="utf-8")
    return {"prompt": prompt, "error_path": str(error_file)}


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate popular stacks and check that they build.")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--out", default="qa_output")
    args = parser.parse_args()

    out_dir = Path(args.out)
    # Clean output from a previous run
    if out_dir.exists():
        shutil.rmtree(out_dir)
    out_dir.mkdir(parents=True)

    print("🚀 Starting 'Golden Path' QA Test...\n")
    errors = []
    with httpx.Client() as client:
        for index, prompt in enumerate(SCENARIOS):
            print(f"\n🧪 Test {index + 1}/{len(SCENARIOS)}: {prompt}")
            test_dir = out_dir / f"test_{index}"
            test_dir.mkdir()
            try:
                failure = run_scenario(client, args.base_url.rstrip("/"), prompt, test_dir)
            except (httpx.HTTPError, zipfile.BadZipFile, OSError, RuntimeError, ValueError) as e:
                print(f"   ❌ FATAL ERROR: {e}")
                failure = {"prompt": prompt, "error": str(e)}
            if failure:
                errors.append(failure)

    print("\n========================================")
    print("📊 QA SUMMARY")
    print("========================================")
    if not errors:
        print("✨ PERFECT! All popular stacks are building correctly.")
        return 0

    print(f"⚠️  Found {len(errors)} failures:\n")
    for failure in errors:
        print(f"❌ {failure['prompt']}")
        if failure.get("error_path"):
            print(f"   See log: {failure['error_path']}")
        else:
            print(f"   Error: {failure['error']}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
