"""Jinja2 adapter for the partial resolver and HTML view responses."""

from collections.abc import Iterable, Mapping
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound
from markupsafe import Markup

from view_partials.config import Settings
from view_partials.exceptions import TemplateNotFoundException, TemplateRenderException
from view_partials.logging_config import get_logger, log_with_context
from view_partials.partials import PartialResolver
from view_partials.protocols import Controller

logger = get_logger(__name__)


class TemplateRenderer:
    """Renders Jinja2 templates and wires partial helpers into every render."""

    def __init__(self, templates: Jinja2Templates, template_extension: str = ".html"):
        """Initialize renderer.

        Args:
            templates: Jinja2Templates holding the configured environment
            template_extension: Suffix appended to resolved template paths
        """
        self.templates = templates
        self.template_extension = template_extension

    @classmethod
    def from_settings(cls, settings: Settings) -> "TemplateRenderer":
        """Build a renderer for ``settings.templates_dir``."""
        env = Environment(
            loader=FileSystemLoader(str(settings.templates_dir)),
            autoescape=settings.autoescape,
        )
        return cls(Jinja2Templates(env=env), template_extension=settings.template_extension)

    @property
    def env(self) -> Environment:
        return self.templates.env

    def template_name(self, path: str) -> str:
        return f"{path}{self.template_extension}"

    def render(self, path: str, bindings: Mapping[str, Any] | None = None) -> Markup:
        """Render the template at ``path`` (without extension).

        Returns Markup so fragments embedded in other templates are not
        escaped a second time.

        Raises:
            TemplateNotFoundException: If no template exists at ``path``
            TemplateRenderException: If Jinja2 fails while rendering
        """
        name = self.template_name(path)
        try:
            template = self.env.get_template(name)
            return Markup(template.render(dict(bindings or {})))
        except TemplateNotFound as e:
            raise TemplateNotFoundException(
                f"Template not found: {e.name or name}",
                details={"template": name, "missing": e.name},
            ) from e
        except TemplateError as e:
            log_with_context(
                logger,
                "error",
                "Template render failed",
                template=name,
                error=str(e),
                error_type=type(e).__name__,
                event_type="template_render_error",
            )
            raise TemplateRenderException(f"Failed to render {name}: {e}", details={"template": name}) from e

    def resolver_for(self, controller: Controller) -> PartialResolver:
        """Partial resolver whose renders all see the partial helpers."""
        helpers: dict[str, Any] = {}

        def render_with_helpers(path: str, bindings: Mapping[str, Any]) -> Markup:
            return self.render(path, {**helpers, **bindings})

        resolver = PartialResolver(controller, render_with_helpers)
        helpers.update(resolver.template_helpers())
        return resolver

    def render_view(
        self,
        request: Request,
        controller: Controller,
        template: str,
        context: Mapping[str, Any] | None = None,
    ) -> HTMLResponse:
        """Render a full page template with the partial helpers available.

        Args:
            request: FastAPI request object
            controller: Controller whose state partials bind against
            template: Template path without extension (e.g. "advertiser/account")
            context: Extra template variables

        Returns:
            HTMLResponse with the rendered page
        """
        resolver = self.resolver_for(controller)
        name = self.template_name(template)
        try:
            return self.templates.TemplateResponse(
                request,
                name,
                {**resolver.template_helpers(), **(context or {})},
            )
        except TemplateNotFound as e:
            raise TemplateNotFoundException(f"Template not found: {name}", details={"template": name}) from e
        except TemplateError as e:
            raise TemplateRenderException(f"Failed to render {name}: {e}", details={"template": name}) from e

    def render_partial_response(
        self,
        controller: Controller,
        partial_path: str,
        local_assigns: Mapping[str, Any] | None = None,
    ) -> HTMLResponse:
        """Render one partial as an HTML fragment (for HTMX swaps)."""
        fragment = self.resolver_for(controller).render_partial(partial_path, local_assigns)
        return HTMLResponse(content=str(fragment))

    def render_collection_response(
        self,
        controller: Controller,
        partial_name: str,
        collection: Iterable[Any],
        spacer_template: str | None = None,
        local_assigns: Mapping[str, Any] | None = None,
    ) -> Response:
        """Render a partial collection as one HTML fragment.

        An empty collection produces 204 No Content.
        """
        rendered = self.resolver_for(controller).render_partial_collection(
            partial_name, collection, spacer_template, local_assigns
        )
        if rendered is None:
            return Response(status_code=204)
        if not isinstance(rendered, str):
            rendered = Markup("").join(rendered)
        return HTMLResponse(content=str(rendered))
