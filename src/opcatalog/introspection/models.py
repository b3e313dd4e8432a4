"""
Data models for the operation catalog.

- OperationDescriptor: one client method with its parameter/return annotations
- OperationShape: flattened request and response field maps of one operation
- Catalog: operation name -> OperationShape for one service
"""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

FieldMap = Dict[str, str]


class InfrastructureKind(str, Enum):
    """Types that carry no payload and are never flattened"""
    CLIENT = "client"
    CONTEXT = "context"
    OPTIONS = "options"
    ERROR = "error"


@dataclass
class OperationDescriptor:
    """A single public method on a client type"""
    name: str
    parameters: Tuple[Any, ...] = ()
    returns: Tuple[Any, ...] = ()


@dataclass
class OperationShape:
    """Request/response field maps of one operation (either side may be None)"""
    request: Optional[FieldMap] = None
    response: Optional[FieldMap] = None

    def to_dict(self) -> Dict[str, Optional[FieldMap]]:
        """Convert to the serialized catalog entry"""
        return {
            "requestParameters": self.request,
            "responseElements": self.response,
        }


@dataclass
class Catalog:
    """Complete operation -> shape mapping for one service"""
    service: str
    operations: Dict[str, OperationShape] = dataclass_field(default_factory=dict)

    def get_operation(self, name: str) -> Optional[OperationShape]:
        """Get the shape of an operation by name"""
        return self.operations.get(name)

    def to_dict(self) -> Dict[str, Dict[str, Optional[FieldMap]]]:
        """Convert to dictionary representation, operations sorted by name"""
        return {
            name: self.operations[name].to_dict()
            for name in sorted(self.operations)
        }

    def __len__(self) -> int:
        return len(self.operations)
