"""Application factory for creating and configuring the FastAPI app."""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from crud_admin import __version__
from crud_admin.config import AdminSettings, get_settings
from crud_admin.core.lifespan import lifespan
from crud_admin.exceptions import ConfigurationException, ErrorCode
from crud_admin.logging_config import get_logger, log_with_context
from crud_admin.middleware.error_handlers import register_error_handlers
from crud_admin.models.records import Record, Resource
from crud_admin.routers import admin_router, health_router

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app(
    settings: AdminSettings | None = None,
    resources: Iterable[Resource] = (),
    records: Mapping[str, Sequence[Record]] | None = None,
    static_dir: Path = STATIC_DIR,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Admin settings (defaults to the process-wide singleton)
        resources: Resources listed in the navigation and served by the list view
        records: Records per resource id, as loaded by the data-access layer
        static_dir: Directory holding the bundled ``assets/`` folder

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationException: If the assets directory does not exist
    """
    settings = settings or get_settings()

    assets_dir = Path(static_dir) / "assets"
    if not assets_dir.is_dir():
        raise ConfigurationException(
            f"Admin assets directory not found: {assets_dir}",
            code=ErrorCode.CONFIG_INVALID,
            details={"assets_dir": str(assets_dir)},
        )

    app = FastAPI(
        title=settings.branding.company_name,
        description="Admin panel for managing application records",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.resources = list(resources)
    app.state.records = {resource_id: list(items) for resource_id, items in (records or {}).items()}

    register_error_handlers(app)

    # Served where ViewHelpers.asset_path points
    assets_path = f"{settings.root_path}/frontend/assets"
    app.mount(assets_path, StaticFiles(directory=str(assets_dir)), name="assets")

    app.include_router(admin_router.create_router(settings.root_path), tags=["admin"])
    app.include_router(health_router.router, tags=["health"])

    log_with_context(
        logger,
        "debug",
        "Admin application created",
        root_path=settings.root_path,
        assets_path=assets_path,
        resource_count=len(app.state.resources),
        event_type="app_created",
    )

    return app
