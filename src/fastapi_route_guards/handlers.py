"""Response writer for rejected requests."""

from __future__ import annotations

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import JSONResponse

from fastapi_route_guards.exceptions import AuthorizationRejected


async def rejection_handler(
    request: Request, exc: AuthorizationRejected
) -> JSONResponse:
    """Render an AuthorizationRejected as ``{"error": reason}``."""
    return JSONResponse({"error": exc.reason}, status_code=exc.status_code)


def install_rejection_handler(app: FastAPI) -> None:
    app.add_exception_handler(AuthorizationRejected, rejection_handler)  # type: ignore[arg-type]
