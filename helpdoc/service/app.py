"""FastAPI application entrypoint for helpdoc service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..errors import MalformedBlockError, UnsupportedSourceError
from ..orchestrator import Orchestrator


class RenderRequest(BaseModel):
    name: Optional[str] = None
    path: Optional[str] = None
    dialect: Optional[str] = None
    heading_level: Optional[int] = None
    fill_missing: Optional[bool] = None


class RenderResponse(BaseModel):
    document: str
    dialect: str


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing help rendering.

    Requests that pass ``name`` import that module inside the server process,
    running its top-level code. Deployments that accept untrusted requests
    should supply a factory that builds ``Orchestrator(allowed_modules=...)``.
    """

    app = FastAPI(title="helpdoc Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # Lazy-instantiate per request to keep state predictable.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/render", response_model=RenderResponse)
    async def render(
        payload: RenderRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> RenderResponse:
        options = orchestrator.build_options(
            dialect=payload.dialect,
            heading_level=payload.heading_level,
            fill_missing=payload.fill_missing,
        )

        def _run_render() -> str:
            return orchestrator.run_render(
                name=payload.name,
                path=payload.path,
                dialect=options.dialect,
                heading_level=options.heading_level,
                fill_missing=options.fill_missing,
            )

        loop = asyncio.get_running_loop()
        document = await loop.run_in_executor(None, _run_render)
        return RenderResponse(document=document, dialect=options.dialect.value)

    @app.exception_handler(UnsupportedSourceError)
    async def unsupported_source_handler(
        _: Any, exc: UnsupportedSourceError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(MalformedBlockError)
    async def malformed_block_handler(
        _: Any, exc: MalformedBlockError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(
        _: Any, exc: ValueError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)
