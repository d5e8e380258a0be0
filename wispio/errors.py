"""
Normalized errors raised by the Wispio core.

Every failure that leaves the core is a ServiceError carrying:
- kind: a machine-readable ErrorKind, for programmatic handling
- details: a human-readable message, safe to display

Provider-specific details (raw error codes, tokens) never appear in either field.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    NOT_FOUND_OR_UNAUTHORIZED = "not_found_or_unauthorized"
    REMOTE_INTERNAL = "remote_internal_error"
    TRANSPORT = "transport_error"
    VALIDATION = "validation_error"
    PROVIDER = "provider_error"
    UNMAPPED_PROVIDER = "unmapped_provider_error"


class ServiceError(Exception):
    """Base class for every error surfaced by the core."""

    kind: ErrorKind = ErrorKind.TRANSPORT
    default_message: str = "An unexpected error occurred."

    def __init__(self, details: Optional[str] = None):
        self.details = details or self.default_message
        super().__init__(self.details)

    def to_dict(self) -> Dict[str, Any]:
        """Error body in the {"error": ..., "details": ...} shape."""
        return {"error": self.kind.value, "details": self.details}


class Unauthenticated(ServiceError):
    kind = ErrorKind.UNAUTHENTICATED
    default_message = "User is not logged in!"


class NotFoundOrUnauthorized(ServiceError):
    """
    The document is missing, or it belongs to another principal.

    The two cases share one kind and one message on purpose: callers cannot
    discover the existence of documents they do not own.
    """

    kind = ErrorKind.NOT_FOUND_OR_UNAUTHORIZED
    default_message = (
        "The target document does not exist, or you're not authorized to access it."
    )


class RemoteInternalError(ServiceError):
    kind = ErrorKind.REMOTE_INTERNAL
    default_message = "An internal error occured on the server side."


class TransportError(ServiceError):
    kind = ErrorKind.TRANSPORT
    default_message = "The remote service could not be reached."


class ValidationError(ServiceError):
    kind = ErrorKind.VALIDATION
    default_message = "Invalid input."


class ProviderError(ServiceError):
    kind = ErrorKind.PROVIDER


class UnmappedProviderError(ServiceError):
    kind = ErrorKind.UNMAPPED_PROVIDER


_ERRORS_BY_KIND = {
    cls.kind: cls
    for cls in (
        Unauthenticated,
        NotFoundOrUnauthorized,
        RemoteInternalError,
        TransportError,
        ValidationError,
        ProviderError,
        UnmappedProviderError,
    )
}


def error_for(kind: ErrorKind, details: Optional[str] = None) -> ServiceError:
    """Build the ServiceError subclass matching `kind`."""
    return _ERRORS_BY_KIND[kind](details)
