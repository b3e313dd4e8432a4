"""Exceptions raised by the operation catalog."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class InvalidClientError(CatalogError):
    """Raised when the builder is given something that is not a client type."""


class ClientResolutionError(CatalogError):
    """Raised when a configured client class cannot be imported."""

    def __init__(self, client_path: str, reason: str):
        self.client_path = client_path
        self.reason = reason
        super().__init__(f"Cannot resolve client '{client_path}': {reason}")


class AmbiguousOperationError(CatalogError):
    """Raised in strict mode when an operation has several payload candidates."""

    def __init__(self, operation: str, side: str, candidates: int):
        self.operation = operation
        self.side = side
        self.candidates = candidates
        super().__init__(
            f"Operation '{operation}' has {candidates} {side} candidates"
        )
