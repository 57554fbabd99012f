# utils/errors.py
from typing import Any, Dict, Optional


class RegistryError(Exception):
    """
    Base class for every classified failure raised while talking to an
    external registry. Once raised, it travels up unchanged.
    """

    kind = "registry_error"

    def __init__(self, message: str, registry: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.registry = registry
        self.details: Dict[str, Any] = dict(details or {})

    def __str__(self) -> str:
        return self.message


class NotFoundError(RegistryError):
    """The registry explicitly reported that the identifier does not exist."""

    kind = "not_found"


class ValidationError(RegistryError):
    """
    The registry answered, but the payload does not match the expected shape.
    Keeps the raw payload and the field-level diagnostics for debugging.
    """

    kind = "validation_error"

    def __init__(
        self,
        message: str,
        registry: Optional[str] = None,
        raw_payload: Any = None,
        errors: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, registry=registry, details=details)
        self.raw_payload = raw_payload
        self.errors = list(errors or [])

    @property
    def field_paths(self) -> list:
        return [".".join(str(p) for p in e.get("loc", ())) for e in self.errors]


class TransportError(RegistryError):
    """
    Generic API failure: timeout, network error, non-2xx status, malformed
    JSON or a registry-level error status.
    """

    kind = "transport_error"

    def __init__(
        self,
        message: str,
        registry: Optional[str] = None,
        endpoint: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = {"endpoint": endpoint, "params": params or {}, "error": error}
        merged.update(details or {})
        super().__init__(message, registry=registry, details=merged)
        self.endpoint = endpoint
        self.params = params or {}
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message}: {self.error}"
        return self.message


class ConfigurationError(RegistryError):
    """A required setting (usually a credential) is missing."""

    kind = "configuration_error"


def classify_exception(
    exc: BaseException,
    message: str,
    registry: Optional[str] = None,
    endpoint: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
) -> RegistryError:
    """
    Returns `exc` untouched when it is already classified, otherwise wraps it
    into a TransportError.
    """
    if isinstance(exc, RegistryError):
        return exc
    return TransportError(
        message,
        registry=registry,
        endpoint=endpoint,
        params=params,
        error=str(exc) or exc.__class__.__name__,
    )
