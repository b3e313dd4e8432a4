"""
Operation Shape Extractor - classifies an operation's parameter and return
types into request and response shapes.

Infrastructure types (the client itself, context carriers, call-options bags,
errors) are recognized in this order:
1. explicit tag: class attribute __catalog_role__ = "client" | "context" | "options" | "error"
2. structure: the client class or a subclass, BaseException subclasses, contextvars.Context
3. name markers: suffix match on the referenced type's name (configurable)
"""

import contextvars
import logging
from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Optional, Tuple, get_origin

from ..errors import AmbiguousOperationError
from .field_flattener import FieldFlattener, is_composite
from .models import FieldMap, InfrastructureKind, OperationDescriptor, OperationShape
from .type_display import format_type, unwrap_indirection

logger = logging.getLogger(__name__)

PARAMETER_EXCLUSIONS: FrozenSet[InfrastructureKind] = frozenset({
    InfrastructureKind.CLIENT,
    InfrastructureKind.CONTEXT,
    InfrastructureKind.OPTIONS,
})
RETURN_EXCLUSIONS: FrozenSet[InfrastructureKind] = frozenset({InfrastructureKind.ERROR})


@dataclass
class InfrastructureMarkers:
    """Type name suffixes identifying infrastructure types"""
    client: Tuple[str, ...] = ("Client",)
    context: Tuple[str, ...] = ("Context",)
    options: Tuple[str, ...] = ("Options",)
    error: Tuple[str, ...] = ("Error", "Exception")

    def match(self, type_name: str) -> Optional[InfrastructureKind]:
        """Return the kind whose marker ends the type name, if any"""
        for kind, markers in (
            (InfrastructureKind.CLIENT, self.client),
            (InfrastructureKind.CONTEXT, self.context),
            (InfrastructureKind.OPTIONS, self.options),
            (InfrastructureKind.ERROR, self.error),
        ):
            if any(type_name.endswith(marker) for marker in markers):
                return kind
        return None


def classify(
    tp: Any,
    client: Optional[type] = None,
    markers: Optional[InfrastructureMarkers] = None,
) -> Optional[InfrastructureKind]:
    """
    Classify a parameter/return annotation as an infrastructure type

    Args:
        tp: Annotation as found on the operation
        client: Client class the operation belongs to
        markers: Name markers for the fallback match

    Returns:
        InfrastructureKind, or None for payload candidates
    """
    target = unwrap_indirection(tp)

    role = getattr(target, "__catalog_role__", None)
    if role is not None:
        try:
            return InfrastructureKind(role)
        except ValueError:
            logger.warning(f"Ignoring unknown __catalog_role__ {role!r} on {format_type(target)}")

    if isinstance(target, type) and get_origin(target) is None:
        if client is not None and issubclass(target, client):
            return InfrastructureKind.CLIENT
        if issubclass(target, BaseException):
            return InfrastructureKind.ERROR
        if target is contextvars.Context:
            return InfrastructureKind.CONTEXT

    name = getattr(target, "__name__", None) or format_type(target)
    return (markers or InfrastructureMarkers()).match(name)


class ShapeExtractor:
    """
    Builds the OperationShape of one operation

    When several composites qualify for the same side, the last one with
    fields wins and a warning is logged (strict mode raises instead).
    """

    def __init__(
        self,
        flattener: Optional[FieldFlattener] = None,
        markers: Optional[InfrastructureMarkers] = None,
        strict: bool = False,
    ):
        self.flattener = flattener or FieldFlattener()
        self.markers = markers or InfrastructureMarkers()
        self.strict = strict

    def extract(self, op: OperationDescriptor, client: Optional[type] = None) -> OperationShape:
        """
        Extract request and response shapes of an operation

        Args:
            op: Operation descriptor
            client: Client class owning the operation (for structural exclusion)

        Returns:
            OperationShape; a side is None when no composite qualified
        """
        request = self._select(op.name, "request", op.parameters, PARAMETER_EXCLUSIONS, client)
        response = self._select(op.name, "response", op.returns, RETURN_EXCLUSIONS, client)
        return OperationShape(request=request, response=response)

    def _select(
        self,
        operation: str,
        side: str,
        types: Iterable[Any],
        excluded: FrozenSet[InfrastructureKind],
        client: Optional[type],
    ) -> Optional[FieldMap]:
        """Pick the field map of the qualifying composite for one side"""
        selected: Optional[FieldMap] = None
        candidates = 0

        for tp in types:
            kind = classify(tp, client, self.markers)
            if kind in excluded:
                logger.debug(f"{operation}: skipping {kind.value} type {format_type(tp)}")
                continue

            target = unwrap_indirection(tp)
            if not is_composite(target):
                continue

            fields = self.flattener.flatten(target)
            if fields:
                candidates += 1
                selected = fields
            elif selected is None:
                # Empty composite still marks the side as present
                selected = fields

        if candidates > 1:
            if self.strict:
                raise AmbiguousOperationError(operation, side, candidates)
            logger.warning(
                f"{operation}: {candidates} {side} candidates, keeping the last one"
            )

        return selected

