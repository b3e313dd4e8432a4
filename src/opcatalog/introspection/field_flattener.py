"""
Field Flattener - turns one composite type into a flat field map.

Supported composite types:
- dataclasses (alias from field metadata: "json", "alias", "serialization_alias")
- pydantic models (serialization_alias, then alias)
- TypedDict classes from typing or typing_extensions (no aliases)

Only one level is flattened: nested composites render as their type name.
"""

import dataclasses
import logging
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple, get_origin, get_type_hints

from pydantic import BaseModel
from typing_extensions import is_typeddict

from .models import FieldMap
from .type_display import format_type

logger = logging.getLogger(__name__)

# Internal serialization marker and result metadata carried by generated SDK types
DEFAULT_SKIP_FIELDS = frozenset({
    "noSmithyDocumentSerde",
    "ResultMetadata",
    "result_metadata",
})

# Dataclass metadata keys holding a wire name, in lookup order
ALIAS_METADATA_KEYS = ("json", "serialization_alias", "alias")


def is_composite(tp: Any) -> bool:
    """Check if a type is a record type the flattener understands"""
    if not isinstance(tp, type) or get_origin(tp) is not None:
        return False
    if dataclasses.is_dataclass(tp):
        return True
    if is_typeddict(tp):
        return True
    return issubclass(tp, BaseModel) and tp is not BaseModel


class FieldFlattener:
    """
    Produces {wire name: type display string} for a composite type

    Usage:
    ```python
    flattener = FieldFlattener()
    flattener.flatten(GetWidgetOutput)   # {"size": "int"}
    ```
    """

    def __init__(self, skip_fields: Optional[Iterable[str]] = None):
        """
        Args:
            skip_fields: Raw field names never emitted (defaults to DEFAULT_SKIP_FIELDS)
        """
        self.skip_fields: FrozenSet[str] = (
            frozenset(skip_fields) if skip_fields is not None else DEFAULT_SKIP_FIELDS
        )

    def flatten(self, composite: type) -> FieldMap:
        """
        Flatten a composite type into its field map

        Args:
            composite: dataclass, pydantic model or TypedDict class

        Returns:
            Field map in declaration order; empty for types with no public
            fields or for types that are not composite
        """
        fields: FieldMap = {}

        for raw_name, alias, annotation in self._iter_fields(composite):
            if raw_name in self.skip_fields:
                continue
            key = alias if alias else raw_name
            fields[key] = format_type(annotation)

        return fields

    def _iter_fields(self, composite: type) -> Iterator[Tuple[str, Optional[str], Any]]:
        """Yield (raw name, alias, annotation) for each declared field"""
        if not is_composite(composite):
            logger.debug(f"{composite!r} is not a composite type, nothing to flatten")
            return

        if dataclasses.is_dataclass(composite):
            hints = _resolve_hints(composite)
            for f in dataclasses.fields(composite):
                yield f.name, _metadata_alias(f.metadata), hints.get(f.name, f.type)

        elif is_typeddict(composite):
            for name, annotation in _resolve_hints(composite).items():
                yield name, None, annotation

        else:
            for name, info in composite.model_fields.items():
                yield name, info.serialization_alias or info.alias, info.annotation


def _metadata_alias(metadata: Any) -> Optional[str]:
    """Read a wire name from dataclass field metadata"""
    for key in ALIAS_METADATA_KEYS:
        value = metadata.get(key)
        if not value or not isinstance(value, str):
            continue
        # json:"name,omitempty" style values carry options after the comma
        name = value.split(",", 1)[0].strip()
        if name and name != "-":
            return name
    return None


def _resolve_hints(tp: type) -> Dict[str, Any]:
    """Resolve annotations, falling back to the raw (possibly string) ones"""
    try:
        return get_type_hints(tp)
    except (NameError, TypeError) as e:
        logger.warning(f"Could not resolve annotations of {tp.__name__}: {e}")
        raw: Dict[str, Any] = {}
        for klass in reversed(tp.__mro__):
            raw.update(getattr(klass, "__annotations__", {}) or {})
        return raw
