"""
Single-page front-end fallback.

Any GET request not matched by an API route is answered from the static
directory: the requested file if it exists, otherwise ``index.html`` so
the client-side router can take over. Must be registered last.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

INDEX_FILE = "index.html"


def resolve_static_path(static_dir: Path, requested: str) -> Path:
    """
    Map a request path to a file under ``static_dir``.

    Paths that escape the directory, or do not name an existing file,
    resolve to the index document.
    """
    root = static_dir.resolve()
    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    return root / INDEX_FILE


def create_frontend_router(static_dir: Path) -> APIRouter:
    """Build the catch-all router serving files from ``static_dir``."""
    router = APIRouter()

    @router.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str) -> FileResponse:
        path = resolve_static_path(static_dir, full_path)
        if not path.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Front-end not found")
        return FileResponse(path)

    return router
