"""View routes serving partial fragments and full templates."""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from view_partials.config import Settings
from view_partials.controllers import ViewController
from view_partials.dependencies import get_app_settings, get_template_renderer
from view_partials.partials import partial_pieces
from view_partials.views.template_renderer import TemplateRenderer

router = APIRouter()

COLLECTION_PARAMS = ("items", "spacer")


@router.get("/partials/{partial_path:path}", response_class=HTMLResponse)
async def partial(
    partial_path: str,
    request: Request,
    renderer: TemplateRenderer = Depends(get_template_renderer),
    settings: Settings = Depends(get_app_settings),
):
    """Render one partial; query parameters become its local variables."""
    controller = ViewController(controller_path=settings.default_controller_path)
    return renderer.render_partial_response(controller, partial_path, dict(request.query_params))


@router.get("/collections/{partial_path:path}", response_class=HTMLResponse)
async def partial_collection(
    partial_path: str,
    request: Request,
    items: list[str] = Query(default=[]),
    spacer: str | None = None,
    renderer: TemplateRenderer = Depends(get_template_renderer),
    settings: Settings = Depends(get_app_settings),
):
    """Render a partial once per ``items`` value, optionally separated by ``spacer``."""
    controller = ViewController(controller_path=settings.default_controller_path)
    local_assigns = {key: value for key, value in request.query_params.items() if key not in COLLECTION_PARAMS}
    return renderer.render_collection_response(controller, partial_path, items, spacer, local_assigns)


@router.get("/views/{template_path:path}", response_class=HTMLResponse)
async def view(
    template_path: str,
    request: Request,
    renderer: TemplateRenderer = Depends(get_template_renderer),
    settings: Settings = Depends(get_app_settings),
):
    """Render a full template.

    The template's directory becomes the controller path and query parameters
    become controller state, so ``render_partial("account")`` inside
    ``advertiser/account`` binds ``?account=...``.
    """
    controller_path, _ = partial_pieces(template_path, settings.default_controller_path)
    controller = ViewController(controller_path=controller_path)
    for name, value in request.query_params.items():
        controller.assign(name, value)
    return renderer.render_view(request, controller, template_path, controller.assigns)
