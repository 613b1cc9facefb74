"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from findash.db import init_db
from findash.domain.exceptions import NotFoundError, ConflictError
from findash.logging import setup_logging


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from findash.infra.db.engine import engine  # triggers pragmas + mapper registration
        init_db(engine)
        yield

    setup_logging()
    app = FastAPI(
        title="Finance Dashboard API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from findash.api.routers.dashboard import router as dashboard_router
    from findash.api.routers.transactions import router as transactions_router
    from findash.api.routers.transactions import categories_router
    from findash.api.routers.holdings import router as holdings_router

    app.include_router(dashboard_router)
    app.include_router(transactions_router)
    app.include_router(categories_router)
    app.include_router(holdings_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(ConflictError)
    def _conflict(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
