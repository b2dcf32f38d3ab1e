from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.observability import configure_logging, emit, err_envelope, new_request_id
from app.core.store import CharacterStore
from app.modules.characters.router import router as characters_router
from app.modules.root.router import router as root_router

APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
HOST = "0.0.0.0"
PORT = 3000


def create_app(store: Optional[CharacterStore] = None) -> FastAPI:
    configure_logging()

    app = FastAPI(title="Character API", version=APP_VERSION)
    app.state.store = store if store is not None else CharacterStore.seeded()

    # === OBSERVABILITY ===
    @app.middleware("http")
    async def _request_id_mw(request: Request, call_next):
        rid = request.headers.get("X-Request-Id") or new_request_id()
        request.state.request_id = rid
        emit("info", "http.request.start", f"{request.method} {request.url.path}", rid, __name__)
        try:
            resp = await call_next(request)
        except Exception as e:
            emit("error", "http.request.exception", str(e), rid, __name__)
            raise
        resp.headers["X-Request-Id"] = rid
        emit("info", "http.request.end", f"{request.method} {request.url.path} -> {getattr(resp, 'status_code', None)}", rid, __name__)
        return resp

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        rid = getattr(request.state, "request_id", None)
        return err_envelope("http_error", str(exc.detail), rid, {"status_code": exc.status_code}, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _validation_exc_handler(request: Request, exc: RequestValidationError):
        rid = getattr(request.state, "request_id", None)
        return err_envelope("validation_error", "request validation failed", rid, jsonable_encoder(exc.errors()), 422)

    @app.exception_handler(Exception)
    async def _unhandled_exc_handler(request: Request, exc: Exception):
        rid = getattr(request.state, "request_id", None)
        return err_envelope("internal_error", "internal server error", rid, {"type": type(exc).__name__}, 500)
    # === END OBSERVABILITY ===

    app.include_router(root_router)
    app.include_router(characters_router)
    return app


app = create_app()
