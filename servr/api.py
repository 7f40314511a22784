"""
servr/api.py - Greeting App

This module builds the FastAPI application serving the greeting routes.

Endpoints:
- GET /: "Hello world"
- GET /evening: "Good evening"

Anything else answers 404 with a "Cannot <METHOD> <path>" page.

Usage:
    uvicorn servr.api:app --host 0.0.0.0 --port 3000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from servr.routs import handle_root, handle_evening

logger = logging.getLogger(__name__)


def not_found_page(request: Request) -> HTMLResponse:
    """Build the 404 response for an unmatched method/path pair."""
    return HTMLResponse(
        f"Cannot {request.method} {request.url.path}",
        status_code=404,
    )


async def route_miss_handler(request: Request, exc: StarletteHTTPException):
    """Turn routing misses into 404s.
    
    Starlette answers a known path with an unknown method with 405.
    Routes here are method-specific, so that is a miss like any other.
    """
    if exc.status_code in (404, 405):
        logger.debug(f"No route for {request.method} {request.url.path}")
        return not_found_page(request)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Create the greeting application.
    
    Returns:
        FastAPI app with both greeting routes registered
    """
    app = FastAPI(
        title="greetr",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    
    app.add_api_route("/", handle_root, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route("/evening", handle_evening, methods=["GET"], response_class=HTMLResponse)
    
    app.add_exception_handler(StarletteHTTPException, route_miss_handler)
    
    return app


app = create_app()
