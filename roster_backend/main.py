"""
Roster FastAPI application.

Entry point for the API server. Serves the browser bundle from PUBLIC_DIR
and the team split API.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from roster_backend.config import settings
from roster_backend.routes import team_data as team_data_routes


def create_app(public_dir: Path | None = None) -> FastAPI:
    app = FastAPI(
        title="Roster",
        docs_url=None,
        redoc_url=None,
    )

    # Register routes
    app.include_router(team_data_routes.router)

    @app.get("/health")
    async def health():
        """Health check endpoint for uptime monitoring."""
        return {"status": "ok"}

    # Serve frontend after all API routes
    frontend = public_dir if public_dir is not None else settings.public_root

    if frontend.is_dir():
        app.mount("/static", StaticFiles(directory=str(frontend)), name="static")

        @app.get("/")
        async def serve_index():
            """Serve the roster page."""
            return FileResponse(str(frontend / "index.html"))

    return app


app = create_app()
