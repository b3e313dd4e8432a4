"""JSON catalog exporter."""
import json
import logging
from pathlib import Path
from typing import Optional

from ..introspection.models import Catalog

logger = logging.getLogger(__name__)


class CatalogExporter:
    """Export operation catalogs to <prefix><service>_operations.json."""

    def __init__(self, file_prefix: str = "", indent: int = 2):
        self.file_prefix = file_prefix
        self.indent = indent

    def render(self, catalog: Catalog) -> str:
        """Render a catalog as indented JSON with sorted keys."""
        return json.dumps(catalog.to_dict(), indent=self.indent, sort_keys=True)

    def output_path(self, service: str, output_dir: Path) -> Path:
        """Path of the catalog file for a service."""
        return Path(output_dir) / f"{self.file_prefix}{service}_operations.json"

    def export(self, catalog: Catalog, output_dir: Path) -> Optional[Path]:
        """
        Export a catalog to its JSON file.

        Args:
            catalog: Catalog to write
            output_dir: Directory receiving the file

        Returns:
            Path written, or None if the catalog could not be rendered or written
        """
        output_file = self.output_path(catalog.service, output_dir)

        try:
            content = self.render(catalog)
        except (TypeError, ValueError) as e:
            logger.error(f"Error rendering catalog for {catalog.service}: {e}")
            return None

        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(content)
                f.write("\n")
        except OSError as e:
            logger.error(f"Error writing {output_file}: {e}")
            return None

        logger.info(f"Saved {len(catalog)} operations to {output_file}")
        return output_file
