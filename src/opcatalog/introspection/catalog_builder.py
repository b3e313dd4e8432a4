"""
Type Catalog Builder - enumerates a client's public methods and builds the
operation -> shape catalog.

Operations are the public (non-underscore) functions, staticmethods and
classmethods reachable on the client class, including inherited ones, in
name order. The receiver of instance and class methods is described as the
client class itself so it is excluded like any other client handle.
"""

import collections.abc
import inspect
import logging
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, get_args, get_origin, get_type_hints

from ..errors import InvalidClientError
from .models import Catalog, OperationDescriptor
from .shape_extractor import ShapeExtractor

logger = logging.getLogger(__name__)


class CatalogBuilder:
    """
    Builds the Catalog of a client type

    Usage:
    ```python
    builder = CatalogBuilder()
    catalog = builder.build(WidgetClient, service="widgets")
    catalog.get_operation("get_widget").response
    ```
    """

    def __init__(self, extractor: Optional[ShapeExtractor] = None):
        self.extractor = extractor or ShapeExtractor()

    def build(self, client: Any, service: Optional[str] = None) -> Catalog:
        """
        Build the catalog for one client

        Args:
            client: Client class (an instance is accepted, its type is used)
            service: Service name recorded on the catalog (defaults to the class name)

        Returns:
            Catalog with one entry per public operation

        Raises:
            InvalidClientError: If client is None, a module, a function or a builtin value
        """
        client_type = resolve_client_type(client)
        catalog = Catalog(service=service or client_type.__name__)

        for op in self.describe_operations(client_type):
            catalog.operations[op.name] = self.extractor.extract(op, client=client_type)
            logger.debug(f"{catalog.service}.{op.name}: {catalog.operations[op.name]}")

        logger.info(f"Built catalog for {catalog.service}: {len(catalog)} operations")
        return catalog

    def describe_operations(self, client_type: type) -> Iterator[OperationDescriptor]:
        """Yield an OperationDescriptor per public method, in name order"""
        for name, _ in inspect.getmembers(client_type):
            if name.startswith("_"):
                continue

            # Static lookup keeps staticmethod/classmethod wrappers visible
            member = inspect.getattr_static(client_type, name)
            if isinstance(member, staticmethod):
                func, has_receiver = member.__func__, False
            elif isinstance(member, classmethod):
                func, has_receiver = member.__func__, True
            elif inspect.isfunction(member):
                func, has_receiver = member, True
            else:
                continue

            yield describe_operation(name, func, client_type, has_receiver)


def resolve_client_type(client: Any) -> type:
    """Return the class to introspect, rejecting values that have no method surface"""
    if client is None:
        raise InvalidClientError("Client type descriptor is None")
    if inspect.ismodule(client) or inspect.isroutine(client):
        raise InvalidClientError(f"Expected a client class, got {client!r}")
    if isinstance(client, type):
        return client
    if type(client).__module__ == "builtins":
        raise InvalidClientError(f"Expected a client class, got {type(client).__name__} value")
    return type(client)


def describe_operation(
    name: str,
    func: Callable[..., Any],
    client_type: type,
    has_receiver: bool = True,
) -> OperationDescriptor:
    """
    Describe one method as ordered parameter and return annotations

    Unannotated parameters are described as Any; an unannotated receiver is
    described as the client class.
    """
    func = inspect.unwrap(func)
    hints = _method_hints(func)

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        logger.warning(f"No signature for {client_type.__name__}.{name}: {e}")
        return OperationDescriptor(name=name)

    parameters = []
    for index, param in enumerate(signature.parameters.values()):
        if param.name in hints:
            parameters.append(hints[param.name])
        elif index == 0 and has_receiver:
            parameters.append(client_type)
        elif param.annotation is not inspect.Parameter.empty:
            parameters.append(param.annotation)
        else:
            parameters.append(Any)

    if "return" in hints:
        returned = hints["return"]
    elif signature.return_annotation is not inspect.Signature.empty:
        returned = signature.return_annotation
    else:
        returned = None

    return OperationDescriptor(
        name=name,
        parameters=tuple(parameters),
        returns=_spread_returns(returned),
    )


def _method_hints(func: Callable[..., Any]) -> Dict[str, Any]:
    try:
        return get_type_hints(func)
    except (NameError, TypeError) as e:
        logger.warning(f"Could not resolve annotations of {func.__qualname__}: {e}")
        return {}


def _spread_returns(returned: Any) -> Tuple[Any, ...]:
    """Split a return annotation into the values it produces"""
    if returned is None or returned is type(None):
        return ()

    origin = get_origin(returned)
    args = get_args(returned)

    # async clients: Awaitable[T], Coroutine[Any, Any, T]
    if origin is collections.abc.Awaitable and args:
        return _spread_returns(args[0])
    if origin is collections.abc.Coroutine and args:
        return _spread_returns(args[-1])

    if origin is tuple:
        return tuple(a for a in args if a is not Ellipsis and a != ())
    return (returned,)
