"""Runtime entrypoint that layers custom behaviour on the generated FastAPI app."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from finder_api import main as generated_main
from finder_api.config.settings import environment_label, get_api_settings
from finder_api.http.errors import error_payload

LOGGER = logging.getLogger(__name__)

app = generated_main.app
api_settings = get_api_settings()

app.add_middleware(
    CORSMiddleware,
    allow_origins=api_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def _http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = error_payload(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload("Invalid request body", details=details),
    )


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload("Internal server error", details=str(exc)),
    )


if api_settings.static_dir:
    static_root = Path(api_settings.static_dir).expanduser()
    if static_root.is_dir():
        app.mount("/", StaticFiles(directory=static_root, html=True), name="static")
    else:
        LOGGER.warning("Static directory %s does not exist; UI not served", static_root)


@app.on_event("startup")
async def _startup() -> None:
    LOGGER.info("Access Package Resource Finder starting")
    LOGGER.info("Environment: %s", environment_label())
