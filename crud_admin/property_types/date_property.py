"""Property type for calendar dates."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

from crud_admin.property_types.base import DefaultPropertyType, filter_key
from crud_admin.protocols import PropertyProtocol, RecordProtocol

if TYPE_CHECKING:
    from crud_admin.views.view_helpers import ViewHelpers


class DatePropertyType(DefaultPropertyType):
    """Renders date values with the configured date format.

    Missing or unparseable values render as "Invalid date" rather than
    raising.
    """

    def format_value(self, value: Any, h: "ViewHelpers") -> str:
        return h.format_date(value, h.settings.date_format)

    def head(self, property: PropertyProtocol, h: "ViewHelpers") -> Markup | str:
        return self.renderer.render("property-types/date/head", {"property": property, "h": h})

    def list(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str:
        value = self.format_value(record.param(property.name), h)
        return self.renderer.render(
            "property-types/default/list",
            {"h": h, "value": value, "record": record, "property": property},
        )

    def show(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str:
        value = self.format_value(record.param(property.name), h)
        return self.renderer.render(
            "property-types/default/show",
            {"value": value, "property": property, "h": h},
        )

    def edit(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str:
        value = self.format_value(record.param(property.name), h)
        error = record.error(property.name)
        return self.renderer.render(
            "property-types/date/edit",
            {"value": value, "property": property, "h": h, "error": error},
        )

    def filter(self, property: PropertyProtocol, filters: Mapping[str, Any], h: "ViewHelpers") -> Markup | str:
        return self.renderer.render(
            "property-types/date/filter",
            {"property": property, "filter_key": filter_key(property), "h": h, "filters": filters},
        )
