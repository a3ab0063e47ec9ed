"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from view_partials.config import Settings, get_settings
from view_partials.views.template_renderer import TemplateRenderer


async def get_template_renderer(request: Request) -> TemplateRenderer:
    """
    Get the shared template renderer from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared TemplateRenderer instance.

    Raises:
        RuntimeError: If the template renderer is not initialized.
    """
    renderer: TemplateRenderer | None = getattr(request.app.state, "template_renderer", None)

    if renderer is None:
        raise RuntimeError("Template renderer not initialized.")

    return renderer


async def get_app_settings(request: Request) -> Settings:
    """
    Get the settings the application was created with.

    Falls back to the process-wide singleton when the app was built without
    explicit settings.
    """
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()
