"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from view_partials import __version__
from view_partials.config import Settings, get_settings
from view_partials.core.lifespan import lifespan
from view_partials.middleware.error_handlers import register_error_handlers
from view_partials.routers import health_router, view_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the process-wide singleton

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="View Partials",
        description="""
        Template partial rendering for server-side views.

        - `/partials/{path}` - render one partial as an HTML fragment
        - `/collections/{path}` - render a partial once per `items` value
        - `/views/{path}` - render a full template with partial helpers
        - `/health` - basic health check
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    # Register exception handlers
    register_error_handlers(app)

    app.include_router(view_router.router, tags=["views"])
    app.include_router(health_router.router, tags=["health"])

    return app
