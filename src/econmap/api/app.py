"""FastAPI application factory.

API layer boundary:
- Validates inputs, reads the dashboard session
- Returns payloads for the map and chart views
- Forbidden: aggregation logic, file IO, rendering
"""

from __future__ import annotations

import threading

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from econmap import __version__
from econmap.core.session import DashboardSession
from econmap.core.settings import Settings, load_settings

# Guards the first build of each app's session
_session_lock = threading.Lock()


def get_dashboard_session(request: Request) -> DashboardSession:
    """Dependency to get the dashboard session.

    The session is loaded from the app's settings on first use and reused
    afterwards, so the summary table is computed once per app. Concurrent
    first requests build it only once.

    Args:
        request: Incoming request (injected), used to reach app state.

    Returns:
        Shared DashboardSession.
    """
    state = request.app.state
    session = state.dashboard_session
    if session is None:
        with _session_lock:
            session = state.dashboard_session
            if session is None:
                session = DashboardSession.from_settings(state.settings)
                state.dashboard_session = session
    return session


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings; read from the environment if omitted.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="econmap API",
        description="Year-synchronised indicator map and chart data",
        version=__version__,
    )
    app.state.settings = settings
    app.state.dashboard_session = None

    # Add CORS middleware for dashboard access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from econmap.api.routes import selection, summaries, years

    app.include_router(summaries.router, prefix="/api")
    app.include_router(selection.router, prefix="/api")
    app.include_router(years.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
