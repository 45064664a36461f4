"""Serve the built single-page client for any unmatched GET path."""

import logging
from pathlib import Path

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from blog_api.errors import NotFoundError

logger = logging.getLogger(__name__)

FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def mount_spa(app: FastAPI, dist_dir: str) -> bool:
    """
    Mount the client bundle at ``dist_dir`` if it has been built.

    Must be called after all API routers are included: the catch-all route
    only sees paths nothing else matched. Returns False when there is no
    ``index.html`` to serve.
    """
    root = Path(dist_dir).resolve()
    index_file = root / "index.html"
    if not index_file.is_file():
        logger.info("No client bundle at %s, SPA fallback disabled", root)
        return False

    assets_dir = root / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")

    router = APIRouter(include_in_schema=False)

    # Every method, so unmatched non-GET requests get 404 rather than 405
    @router.api_route("/{full_path:path}", methods=FALLBACK_METHODS)
    def spa_fallback(full_path: str, request: Request) -> FileResponse:
        if request.method not in ("GET", "HEAD"):
            raise NotFoundError("Not Found")
        if full_path == "api" or full_path.startswith("api/"):
            raise NotFoundError("Not Found")

        # Top-level files such as favicon.ico; never anything outside the bundle
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        return FileResponse(index_file)

    app.include_router(router)
    logger.info("Serving client bundle from %s", root)
    return True
