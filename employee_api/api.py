"""
FastAPI app entry point aggregating the routers under employee_api/routes.
Run as `uvicorn --factory employee_api.api:create_app`, or run `python -m employee_api`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from .db import get_conn, get_db_path
from .domain.errors import EncodingError, StorageError, ValidationError
from .responses import JSONUTF8Response, error_response
from .services.employee_svc import ensure_employee_schema

logger = logging.getLogger(__name__)


def ensure_schemas(db_path: str):
    with get_conn(db_path) as conn:
        ensure_employee_schema(conn)


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request body"


def create_app(db_path: str | None = None) -> FastAPI:
    app = FastAPI(title="employee-api", version="0.1.0", default_response_class=JSONUTF8Response)
    app.state.db_path = get_db_path(db_path)

    @app.on_event("startup")
    def on_startup():
        logger.info("using database '%s'", app.state.db_path)
        ensure_schemas(app.state.db_path)

    @app.exception_handler(RequestValidationError)
    async def _on_request_validation(request: Request, exc: RequestValidationError):
        return error_response(_format_request_errors(exc), 400)

    @app.exception_handler(ValidationError)
    async def _on_validation(request: Request, exc: ValidationError):
        return error_response(str(exc), 400)

    @app.exception_handler(StorageError)
    async def _on_storage(request: Request, exc: StorageError):
        return error_response(str(exc), 400)

    @app.exception_handler(EncodingError)
    async def _on_encoding(request: Request, exc: EncodingError):
        logger.error("response encoding failed on %s: %s", request.url.path, exc)
        return Response(status_code=500)

    from .routes import employees as employee_routes

    app.include_router(employee_routes.router)
    return app

