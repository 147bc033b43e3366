"""Generic property type used when no specialised renderer exists."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from crud_admin.protocols import PropertyProtocol, RecordProtocol, RendererProtocol

if TYPE_CHECKING:
    from crud_admin.views.view_helpers import ViewHelpers


def filter_key(property: PropertyProtocol) -> str:
    """Name of the filter form field for ``property``."""
    return f"filters.{property.name}"


class DefaultPropertyType:
    """Renders any property by printing its raw value."""

    def __init__(self, renderer: RendererProtocol):
        self.renderer = renderer

    def head(self, property: PropertyProtocol, h: "ViewHelpers") -> Markup | str:
        return self.renderer.render("property-types/default/head", {"property": property, "h": h})

    def list(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str:
        value = record.param(property.name)
        return self.renderer.render(
            "property-types/default/list",
            {"h": h, "value": value, "record": record, "property": property},
        )

    def show(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str:
        value = record.param(property.name)
        return self.renderer.render(
            "property-types/default/show",
            {"value": value, "property": property, "h": h},
        )

    def edit(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str:
        value = record.param(property.name)
        error = record.error(property.name)
        return self.renderer.render(
            "property-types/default/edit",
            {"value": value, "property": property, "h": h, "error": error},
        )

    def filter(self, property: PropertyProtocol, filters: Mapping[str, Any], h: "ViewHelpers") -> Markup | str:
        return self.renderer.render(
            "property-types/default/filter",
            {"property": property, "filter_key": filter_key(property), "h": h, "filters": filters},
        )
