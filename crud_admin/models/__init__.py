"""CRUD Admin models"""

from crud_admin.models.base_models import AssetOptions, Branding, HealthResponse
from crud_admin.models.records import Property, Record, RecordError, Resource

__all__ = [
    "AssetOptions",
    "Branding",
    "HealthResponse",
    "Property",
    "Record",
    "RecordError",
    "Resource",
]
