# /boilerforge-backend/app/services/archive_service.py

import io
import re
import zipfile
from typing import Any, Dict

DEFAULT_ROOT_KEY = "project_root"
# Windows drive prefix. A colon later in a name is a legal file name character.
DRIVE_LETTER = re.compile(r"^[A-Za-z]:")


def extract_project_tree(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Pulls the file tree out of the model's JSON answer. The prompt asks for a
    single "project_root" key; if the model picked another name we take the
    first key, whatever it is.
    """
    if not isinstance(payload, dict) or not payload:
        raise ValueError("AI response is empty or not a JSON object.")

    root_key = DEFAULT_ROOT_KEY if DEFAULT_ROOT_KEY in payload else next(iter(payload))
    tree = payload[root_key]
    if not isinstance(tree, dict):
        raise ValueError(f"Root entry '{root_key}' must be a folder (JSON object), got {type(tree).__name__}.")
    return tree


def _validate_name(name: str, parent: str) -> str:
    cleaned = name.strip() if isinstance(name, str) else ""
    if not cleaned:
        raise ValueError(f"Empty file or folder name under '{parent or '/'}'.")
    normalized = cleaned.replace("\\", "/")
    if normalized.startswith("/") or DRIVE_LETTER.match(normalized):
        raise ValueError(f"Absolute path '{name}' is not allowed in a project tree.")
    segments = normalized.strip("/").split("/")
    if any(segment in (".", "..") for segment in segments):
        raise ValueError(f"Path '{name}' uses '.' or '..' segments, which are not allowed in a project tree.")
    return normalized.strip("/")


def _write_tree(archive: zipfile.ZipFile, tree: Dict[str, Any], prefix: str = "") -> int:
    """Recursively writes the tree into the archive. Returns the number of files written."""
    file_count = 0
    for name, value in tree.items():
        path = f"{prefix}{_validate_name(name, prefix)}"
        if isinstance(value, str):
            archive.writestr(path, value)
            file_count += 1
        elif isinstance(value, dict):
            # Explicit directory entry so empty folders survive extraction.
            archive.writestr(f"{path}/", "")
            file_count += _write_tree(archive, value, prefix=f"{path}/")
        else:
            raise ValueError(f"'{path}' must be file content (string) or a folder (object), got {type(value).__name__}.")
    return file_count


def build_zip(tree: Dict[str, Any]) -> bytes:
    """Packages a {name: content | folder} tree into an in-memory, deflated zip."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
        file_count = _write_tree(archive, tree)
    print(f"Packaged {file_count} files into the project archive.")
    return buffer.getvalue()
