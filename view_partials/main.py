"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from view_partials.config import get_settings
from view_partials.core.app_factory import create_app
from view_partials.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()

# Configure structured logging (JSON to file + console)
setup_logging(settings.log_level, settings.log_dir, settings.render_log_level)

# Create application
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "view_partials.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
