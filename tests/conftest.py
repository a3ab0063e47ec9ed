"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from view_partials.config import Settings
from view_partials.controllers import ViewController
from view_partials.core.app_factory import create_app
from view_partials.partials import PartialResolver
from view_partials.views.template_renderer import TemplateRenderer

TEMPLATE_FILES = {
    "advertiser/_account.html": '<div class="account">{{ account }}:{{ account_counter }}</div>',
    "advertiser/_ad.html": "<li>{{ ad_counter }}:{{ ad }}</li>",
    "advertiser/_nested.html": '<section>{{ render_partial("advertisement/ad", {"ad": title}) }}</section>',
    "advertiser/account.html": '<main>{{ render_partial("account") }}</main>',
    "advertiser/ads.html": '<ul>{{ render_partial_collection("ad", ads, "shared/divider") }}</ul>',
    "advertiser/broken.html": '{{ render_partial("missing") }}',
    "advertiser/_syntax_error.html": "{% if %}",
    "advertiser/_with_include.html": '{% include "shared/_gone.html" %}',
    "advertisement/_ad.html": "<article>{{ ad }}</article>",
    "application/_flash.html": "<p>{{ message }}</p>",
    "shared/_divider.html": "<hr>",
}


def fake_render(path, bindings):
    """Render stand-in that makes the path and bound values visible."""
    if path.endswith("/_divider"):
        return "<hr>"
    return f"[{path}|{bindings.get('ad', bindings.get('account'))}]"


@pytest.fixture
def mock_render():
    """Mock renderer recording (path, bindings) for each call."""
    return MagicMock(side_effect=fake_render)


@pytest.fixture
def advertiser_controller():
    """Controller for the advertiser views with an account in its state."""
    return ViewController(controller_path="advertiser", account="acct1")


@pytest.fixture
def resolver(advertiser_controller, mock_render):
    """PartialResolver wired to the mock renderer."""
    return PartialResolver(advertiser_controller, mock_render)


@pytest.fixture
def templates_dir(tmp_path):
    """Template tree on disk for Jinja2-backed tests."""
    root = tmp_path / "templates"
    for relative_path, source in TEMPLATE_FILES.items():
        template_file = root / relative_path
        template_file.parent.mkdir(parents=True, exist_ok=True)
        template_file.write_text(source, encoding="utf-8")
    return root


@pytest.fixture
def test_settings(templates_dir):
    """Settings pointing at the temporary template tree."""
    return Settings(templates_dir=templates_dir)


@pytest.fixture
def template_renderer(test_settings):
    """Real TemplateRenderer over the temporary templates."""
    return TemplateRenderer.from_settings(test_settings)


@pytest.fixture
def test_client(test_settings):
    """FastAPI test client with lifespan context."""
    with TestClient(create_app(test_settings)) as client:
        yield client
