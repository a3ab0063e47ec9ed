"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from view_partials import __version__
from view_partials.config import Settings, get_settings
from view_partials.exceptions import ConfigurationException, ErrorCode
from view_partials.logging_config import get_logger, log_with_context
from view_partials.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


def build_template_renderer(settings: Settings) -> TemplateRenderer:
    """Create the shared renderer, failing fast on a missing template root.

    Raises:
        ConfigurationException: If ``settings.templates_dir`` is not a directory
    """
    if not settings.templates_dir.is_dir():
        raise ConfigurationException(
            f"Templates directory does not exist: {settings.templates_dir}",
            code=ErrorCode.CONFIG_INVALID,
            details={"templates_dir": str(settings.templates_dir)},
        )
    return TemplateRenderer.from_settings(settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events."""
    app.state.startup_time = time.time()
    settings: Settings = getattr(app.state, "settings", None) or get_settings()

    log_with_context(
        logger,
        "info",
        "Starting View Partials application",
        version=__version__,
        templates_dir=str(settings.templates_dir),
        event_type="app_startup",
    )

    app.state.template_renderer = build_template_renderer(settings)
    log_with_context(
        logger,
        "info",
        "Template renderer initialized",
        template_extension=settings.template_extension,
        default_controller_path=settings.default_controller_path,
        event_type="template_renderer_ready",
    )

    try:
        yield
    finally:
        app.state.template_renderer = None
        log_with_context(
            logger,
            "info",
            "Shutting down View Partials application",
            uptime_seconds=round(time.time() - app.state.startup_time, 2),
            event_type="app_shutdown",
        )
