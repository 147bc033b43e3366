"""Admin page routes.

Routes live under the configured root path, so the router is built per app
instead of at import time.
"""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from crud_admin.dependencies import (
    get_property_types,
    get_records,
    get_resources,
    get_template_renderer,
    get_view_helpers,
)
from crud_admin.exceptions import ResourceNotFoundException
from crud_admin.models.records import Record, Resource
from crud_admin.property_types import PropertyTypeRegistry
from crud_admin.views.template_renderer import TemplateRenderer
from crud_admin.views.view_helpers import ViewHelpers


async def dashboard(
    request: Request,
    h: ViewHelpers = Depends(get_view_helpers),
    renderer: TemplateRenderer = Depends(get_template_renderer),
    resources: list[Resource] = Depends(get_resources),
):
    """Render the admin dashboard."""
    return renderer.render_page(request, "dashboard", {"h": h, "resources": resources})


async def resource_list(
    request: Request,
    resource_id: str,
    page: int = Query(default=1),
    h: ViewHelpers = Depends(get_view_helpers),
    renderer: TemplateRenderer = Depends(get_template_renderer),
    property_types: PropertyTypeRegistry = Depends(get_property_types),
    resources: list[Resource] = Depends(get_resources),
    records: dict[str, list[Record]] = Depends(get_records),
):
    """Render one page of a resource's records.

    Every column is rendered by the property type registered for the
    property's declared type.
    """
    resource = next((item for item in resources if item.id == resource_id), None)
    if resource is None:
        raise ResourceNotFoundException(resource_id)

    resource_records = records.get(resource_id, [])
    pagination = h.paginate(len(resource_records), page)
    page_records = resource_records[pagination.start_index : pagination.end_index + 1]

    columns = [(prop, property_types.for_property(prop)) for prop in resource.properties]
    context = {
        "h": h,
        "resource": resource,
        "resources": resources,
        "heads": [property_type.head(prop, h) for prop, property_type in columns],
        "filters": [property_type.filter(prop, {}, h) for prop, property_type in columns],
        "rows": [
            (record, [property_type.list(prop, record, h) for prop, property_type in columns])
            for record in page_records
        ],
        "pagination": pagination,
    }
    return renderer.render_page(request, "resource_list", context)


def create_router(root_path: str) -> APIRouter:
    """Create the admin router for an app mounted at ``root_path``."""
    router = APIRouter()
    router.add_api_route(root_path or "/", dashboard, methods=["GET"], response_class=HTMLResponse, name="dashboard")
    router.add_api_route(
        f"{root_path}/resources/{{resource_id}}",
        resource_list,
        methods=["GET"],
        response_class=HTMLResponse,
        name="resource_list",
    )
    return router
