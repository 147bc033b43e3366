"""Property type registry.

Each resource property declares a type name ("string", "date", "datetime",
...). The registry maps those names to renderer implementations and falls
back to the default type for names it does not know.
"""

from crud_admin.exceptions import PropertyTypeException
from crud_admin.logging_config import get_logger, log_with_context
from crud_admin.property_types.base import DefaultPropertyType
from crud_admin.property_types.date_property import DatePropertyType
from crud_admin.property_types.datetime_property import DateTimePropertyType
from crud_admin.protocols import PropertyProtocol, PropertyTypeProtocol, RendererProtocol

logger = get_logger(__name__)

DEFAULT_TYPE = "default"


class PropertyTypeRegistry:
    """Maps declared property type names to their renderers."""

    def __init__(self, renderer: RendererProtocol):
        self.renderer = renderer
        default = DefaultPropertyType(renderer)
        self._types: dict[str, PropertyTypeProtocol] = {
            DEFAULT_TYPE: default,
            "string": default,
            "date": DatePropertyType(renderer),
            "datetime": DateTimePropertyType(renderer),
        }

    def register(self, type_name: str, property_type: PropertyTypeProtocol) -> None:
        """Add or replace the renderer for ``type_name``.

        Raises:
            PropertyTypeException: If type_name is empty
        """
        if not type_name:
            raise PropertyTypeException(
                "Property type name must not be empty",
                details={"type_name": type_name, "implementation": type(property_type).__name__},
            )
        log_with_context(
            logger,
            "debug",
            "Registering property type",
            type_name=type_name,
            implementation=type(property_type).__name__,
            event_type="property_type_registered",
        )
        self._types[type_name] = property_type

    def get(self, type_name: str) -> PropertyTypeProtocol:
        property_type = self._types.get(type_name)
        if property_type is None:
            log_with_context(
                logger,
                "debug",
                "Unknown property type, using default",
                type_name=type_name,
                event_type="property_type_fallback",
            )
            return self._types[DEFAULT_TYPE]
        return property_type

    def for_property(self, property: PropertyProtocol) -> PropertyTypeProtocol:
        return self.get(property.type)

    def type_names(self) -> list[str]:
        return sorted(self._types)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._types


__all__ = [
    "DEFAULT_TYPE",
    "DatePropertyType",
    "DateTimePropertyType",
    "DefaultPropertyType",
    "PropertyTypeRegistry",
]
