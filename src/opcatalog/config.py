"""Configuração do coletor."""
import os
from dataclasses import dataclass, field
from typing import FrozenSet, List

from .introspection.field_flattener import DEFAULT_SKIP_FIELDS
from .introspection.shape_extractor import InfrastructureMarkers


@dataclass
class ServiceTarget:
    """Nome do serviço e caminho de import da classe cliente."""

    name: str
    client_path: str  # "package.module:ClassName"

    @classmethod
    def parse(cls, spec: str) -> "ServiceTarget":
        """Interpreta uma entrada "nome=pacote.modulo:Classe"."""
        name, sep, client_path = spec.partition("=")
        name, client_path = name.strip(), client_path.strip()
        if not sep or not name or not client_path:
            raise ValueError(f"Expected NAME=module:Class, got '{spec}'")
        return cls(name=name, client_path=client_path)


@dataclass
class CollectorConfig:
    """Configuração do coletor de catálogos."""

    output_dir: str = "./output"
    file_prefix: str = ""
    services: List[ServiceTarget] = field(default_factory=list)
    skip_fields: FrozenSet[str] = DEFAULT_SKIP_FIELDS
    strict: bool = False
    indent: int = 2
    markers: InfrastructureMarkers = field(default_factory=InfrastructureMarkers)

    @classmethod
    def from_env(cls) -> "CollectorConfig":
        """Carrega config de variáveis de ambiente."""
        services = [
            ServiceTarget.parse(entry)
            for entry in os.getenv("CATALOG_SERVICES", "").split(",")
            if entry.strip()
        ]
        return cls(
            output_dir=os.getenv("CATALOG_OUTPUT_DIR", "./output"),
            file_prefix=os.getenv("CATALOG_FILE_PREFIX", ""),
            services=services,
            strict=os.getenv("CATALOG_STRICT", "").lower() in ("1", "true", "yes"),
        )
