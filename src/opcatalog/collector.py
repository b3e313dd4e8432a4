"""
Service collector - resolves configured client classes, builds their catalogs
and writes one JSON file per service.
"""

import importlib
import logging
from pathlib import Path
from typing import Dict, Optional

from .config import CollectorConfig, ServiceTarget
from .errors import ClientResolutionError
from .exporter.json_exporter import CatalogExporter
from .introspection.catalog_builder import CatalogBuilder
from .introspection.field_flattener import FieldFlattener
from .introspection.models import Catalog
from .introspection.shape_extractor import ShapeExtractor

logger = logging.getLogger(__name__)


def resolve_client(target: ServiceTarget) -> type:
    """
    Import the client class of a service

    Args:
        target: Service with a "package.module:ClassName" client path

    Returns:
        The client class

    Raises:
        ClientResolutionError: If the module or attribute is missing or is not a class
    """
    module_name, sep, attr_path = target.client_path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ClientResolutionError(target.client_path, "expected 'module:ClassName'")

    try:
        obj = importlib.import_module(module_name)
    except Exception as e:
        # Any import-time failure of the client module is a configuration failure
        raise ClientResolutionError(target.client_path, str(e)) from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ClientResolutionError(target.client_path, f"no attribute '{attr}'") from e

    if not isinstance(obj, type):
        raise ClientResolutionError(target.client_path, f"{type(obj).__name__} is not a class")

    logger.debug(f"Resolved {target.name} client: {obj.__module__}.{obj.__qualname__}")
    return obj


def create_builder(config: CollectorConfig) -> CatalogBuilder:
    """Wire a CatalogBuilder from configuration"""
    flattener = FieldFlattener(skip_fields=config.skip_fields)
    extractor = ShapeExtractor(flattener=flattener, markers=config.markers, strict=config.strict)
    return CatalogBuilder(extractor=extractor)


def build_service_catalog(target: ServiceTarget, config: CollectorConfig) -> Catalog:
    """Resolve and introspect one service without writing anything"""
    client = resolve_client(target)
    return create_builder(config).build(client, service=target.name)


def collect_service(target: ServiceTarget, config: CollectorConfig) -> Optional[Path]:
    """
    Build and export the catalog of one service

    Returns:
        Path of the written file, or None if serialization failed

    Raises:
        ClientResolutionError: If the client class cannot be resolved
    """
    logger.info(f"Collecting {target.name} ({target.client_path})")
    catalog = build_service_catalog(target, config)

    exporter = CatalogExporter(file_prefix=config.file_prefix, indent=config.indent)
    return exporter.export(catalog, Path(config.output_dir))


def collect_services(config: CollectorConfig) -> Dict[str, Optional[Path]]:
    """
    Collect every configured service in order

    A resolution error aborts the run; a serialization failure only leaves
    that service without a file.
    """
    results: Dict[str, Optional[Path]] = {}
    for target in config.services:
        results[target.name] = collect_service(target, config)

    written = sum(1 for path in results.values() if path is not None)
    logger.info(f"Collected {written}/{len(results)} services")
    return results
