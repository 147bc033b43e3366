"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from crud_admin.config import get_settings
from crud_admin.core.app_factory import create_app
from crud_admin.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()
setup_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("crud_admin.main:app", host="127.0.0.1", port=8000, reload=True)
