"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from crud_admin.models.records import Record, Resource
from crud_admin.property_types import PropertyTypeRegistry
from crud_admin.views.template_renderer import TemplateRenderer
from crud_admin.views.view_helpers import ViewHelpers


async def get_view_helpers(request: Request) -> ViewHelpers:
    """
    Get the shared view helpers from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared ViewHelpers instance.

    Raises:
        RuntimeError: If view helpers are not initialized.
    """
    helpers: ViewHelpers | None = getattr(request.app.state, "view_helpers", None)

    if helpers is None:
        raise RuntimeError("View helpers not initialized. This should never happen.")

    return helpers


async def get_template_renderer(request: Request) -> TemplateRenderer:
    """
    Get the template renderer from app state.

    Raises:
        RuntimeError: If the renderer is not initialized.
    """
    renderer: TemplateRenderer | None = getattr(request.app.state, "template_renderer", None)

    if renderer is None:
        raise RuntimeError("Template renderer not initialized.")

    return renderer


async def get_property_types(request: Request) -> PropertyTypeRegistry:
    """
    Get the property type registry from app state.

    Raises:
        RuntimeError: If the registry is not initialized.
    """
    registry: PropertyTypeRegistry | None = getattr(request.app.state, "property_types", None)

    if registry is None:
        raise RuntimeError("Property type registry not initialized.")

    return registry


async def get_resources(request: Request) -> list[Resource]:
    return list(getattr(request.app.state, "resources", []))


async def get_records(request: Request) -> dict[str, list[Record]]:
    return getattr(request.app.state, "records", {})
