"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from crud_admin import __version__
from crud_admin.logging_config import get_logger, log_with_context
from crud_admin.property_types import PropertyTypeRegistry
from crud_admin.views.template_renderer import TemplateRenderer
from crud_admin.views.view_helpers import ViewHelpers

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the shared view-layer objects on startup.

    Settings are placed on app.state by create_app before startup. Exceptions
    after yield are re-raised so FastAPI can clean up.
    """
    settings = app.state.settings

    log_with_context(
        logger,
        "info",
        "Starting CRUD Admin application",
        version=__version__,
        root_path=settings.root_path,
        event_type="app_startup",
    )

    renderer = TemplateRenderer()
    app.state.template_renderer = renderer
    app.state.property_types = PropertyTypeRegistry(renderer)
    app.state.view_helpers = ViewHelpers(settings)
    log_with_context(
        logger,
        "info",
        "View layer initialized",
        property_types=app.state.property_types.type_names(),
        event_type="view_layer_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down CRUD Admin application",
            event_type="app_shutdown",
        )
