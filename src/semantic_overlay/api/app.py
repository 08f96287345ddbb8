from __future__ import annotations

from fastapi import FastAPI

from semantic_overlay.api.lifespan import lifespan
from semantic_overlay.api.routes.health import router as health_router
from semantic_overlay.api.routes.hints import router as hints_router
from semantic_overlay.api.routes.tokens import router as tokens_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Semantic Overlay API",
        description="Semantic tokens and aligned inlay-hint decorations for source documents.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, include_in_schema=False)
    app.include_router(tokens_router)
    app.include_router(hints_router)

    return app
