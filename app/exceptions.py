from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service and repository layers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code, defaults to the class-level one
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"
    default_code = "SERVICE_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found.

    Also used when the resource exists but belongs to another owner, so the
    caller can never tell the two cases apart.
    """

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class UnauthorizedError(ServiceError):
    """Raised when no owner identity can be resolved for the request."""

    http_status = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"


class PersistenceError(ServiceError):
    """Raised when the backing store fails (unreachable, constraint violation).

    Never retried here; the caller decides on a retry policy.
    """

    http_status = 500
    default_message = "Persistence failure"
    default_code = "PERSISTENCE_ERROR"
