"""Property type for timestamps.

Shares every view with the date type, including its column header; only the
display pattern differs.
"""

from typing import TYPE_CHECKING, Any

from crud_admin.property_types.date_property import DatePropertyType

if TYPE_CHECKING:
    from crud_admin.views.view_helpers import ViewHelpers


class DateTimePropertyType(DatePropertyType):
    def format_value(self, value: Any, h: "ViewHelpers") -> str:
        return h.format_date(value, h.settings.datetime_format)
