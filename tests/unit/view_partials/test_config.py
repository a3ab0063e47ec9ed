"""Unit tests for configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from view_partials import config
from view_partials.config import BASE_DIR, Settings, get_settings


def test_settings_defaults():
    """Test Settings model has correct defaults."""
    settings = Settings()

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"
    assert settings.templates_dir == BASE_DIR / "templates"
    assert settings.template_extension == ".html"
    assert settings.default_controller_path == "application"
    assert settings.autoescape is True


def test_settings_env_loading():
    """Test settings can load from environment."""
    with patch.dict(
        "os.environ",
        {
            "TEMPLATES_DIR": "/srv/templates",
            "DEFAULT_CONTROLLER_PATH": "advertiser",
            "API_PORT": "9000",
            "AUTOESCAPE": "false",
        },
    ):
        settings = Settings()

    assert settings.templates_dir == Path("/srv/templates")
    assert settings.default_controller_path == "advertiser"
    assert settings.api_port == 9000
    assert settings.autoescape is False


def test_log_level_is_normalised():
    assert Settings(log_level=" debug ").log_level == "DEBUG"


def test_log_level_rejects_unknown():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


@pytest.mark.parametrize("extension, expected", [("html", ".html"), (".jinja", ".jinja"), ("", "")])
def test_template_extension(extension, expected):
    assert Settings(template_extension=extension).template_extension == expected


def test_default_controller_path_strips_slashes():
    assert Settings(default_controller_path="/shared/").default_controller_path == "shared"


def test_default_controller_path_rejects_blank():
    with pytest.raises(ValidationError):
        Settings(default_controller_path="/")


def test_api_host_rejects_whitespace():
    with pytest.raises(ValidationError):
        Settings(api_host="   ")


def test_api_port_range():
    with pytest.raises(ValidationError):
        Settings(api_port=70000)


def test_get_settings_singleton():
    """get_settings caches its instance."""
    with patch.object(config, "_settings_instance", None):
        first = get_settings()
        second = get_settings()

    assert first is second


def test_render_log_level():
    assert Settings().render_log_level is None
    assert Settings(render_log_level="warning").render_log_level == "WARNING"


def test_render_log_level_rejects_unknown():
    with pytest.raises(ValidationError):
        Settings(render_log_level="chatty")


def test_log_dir_default():
    assert Settings().log_dir == BASE_DIR / "logs"
