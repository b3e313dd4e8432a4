"""
Client Introspection Module

Derives request/response field maps for every operation of a typed API client.
Supports:
- dataclass, pydantic and TypedDict request/response types
- serialization aliases as field keys
- exclusion of client handles, context carriers, call options and errors
"""

from .catalog_builder import CatalogBuilder, describe_operation
from .field_flattener import DEFAULT_SKIP_FIELDS, FieldFlattener, is_composite
from .models import Catalog, FieldMap, InfrastructureKind, OperationDescriptor, OperationShape
from .shape_extractor import InfrastructureMarkers, ShapeExtractor, classify
from .type_display import format_type

__all__ = [
    "CatalogBuilder",
    "describe_operation",
    "FieldFlattener",
    "DEFAULT_SKIP_FIELDS",
    "is_composite",
    "ShapeExtractor",
    "InfrastructureMarkers",
    "classify",
    "Catalog",
    "FieldMap",
    "InfrastructureKind",
    "OperationDescriptor",
    "OperationShape",
    "format_type",
]
