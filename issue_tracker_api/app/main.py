"""
Main entrypoint for the Issue Tracker API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the in‑memory store and the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn issue_tracker_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import IssueStore, seed_sample_issues

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None, store: Optional[IssueStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[IssueStore]
        Store to serve.  When omitted a new store is created and, if
        ``seed_sample_data`` is enabled, filled with sample issues.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, debug=app_settings.debug)

    if store is None:
        store = IssueStore()
        if app_settings.seed_sample_data:
            seed_sample_issues(store)
    app.state.store = store
    app.state.settings = app_settings

    options_headers = {
        "Access-Control-Allow-Methods": ", ".join(app_settings.cors_allow_methods),
        "Access-Control-Allow-Headers": ", ".join(app_settings.cors_allow_headers),
    }

    # Registered before CORSMiddleware so it sits inside it: browser
    # pre‑flights are answered by CORSMiddleware, any other OPTIONS
    # request gets an empty 200 here.
    @app.middleware("http")
    async def answer_options(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=options_headers)
        return await call_next(request)

    # Pre‑flights asking for headers outside ``cors_allow_headers`` are
    # rejected by CORSMiddleware with 400.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # The frontend calls the unversioned paths; /api/v1 exposes the same
    # endpoints for clients that prefer an explicit version.
    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1")

    logger.info("%s %s ready with %d issues", app_settings.project_name, app_settings.api_version, len(store))
    return app


app = create_app()
