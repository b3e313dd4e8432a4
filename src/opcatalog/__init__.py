"""SDK operation catalog - field-level request/response shapes of API clients."""

from .config import CollectorConfig, ServiceTarget
from .collector import collect_service, collect_services, resolve_client
from .errors import AmbiguousOperationError, CatalogError, ClientResolutionError, InvalidClientError
from .exporter.json_exporter import CatalogExporter
from .introspection import CatalogBuilder, Catalog, OperationShape

__version__ = "0.1.0"

__all__ = [
    "CollectorConfig",
    "ServiceTarget",
    "collect_service",
    "collect_services",
    "resolve_client",
    "CatalogError",
    "ClientResolutionError",
    "InvalidClientError",
    "AmbiguousOperationError",
    "CatalogExporter",
    "CatalogBuilder",
    "Catalog",
    "OperationShape",
]
