"""Protocol definitions for dependency injection."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from markupsafe import Markup

if TYPE_CHECKING:
    from crud_admin.views.view_helpers import ViewHelpers


class PropertyProtocol(Protocol):
    name: str
    type: str


class ResourceProtocol(Protocol):
    id: str


class RecordProtocol(Protocol):
    id: str

    def param(self, path: str) -> Any: ...

    def error(self, path: str) -> Any: ...


class RendererProtocol(Protocol):
    """Renders a template id with a context mapping."""

    def render(self, template_id: str, context: dict[str, Any]) -> Markup | str: ...


class PropertyTypeProtocol(Protocol):
    """Capability set every property type implements.

    The registry dispatches on a property's declared type name and calls one
    of these depending on the view being rendered.
    """

    def head(self, property: PropertyProtocol, h: "ViewHelpers") -> Markup | str: ...

    def list(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str: ...

    def show(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str: ...

    def edit(self, property: PropertyProtocol, record: RecordProtocol, h: "ViewHelpers") -> Markup | str: ...

    def filter(self, property: PropertyProtocol, filters: Mapping[str, Any], h: "ViewHelpers") -> Markup | str: ...
