"""Domain-specific exceptions — framework-independent.

Every application error carries an HTTP status, a machine-readable code and
an ``is_operational`` flag. Non-operational errors point at infrastructure
problems (the store is down, throttled, misconfigured) rather than caller
misuse, so monitoring can alert on them separately.
"""

from typing import Any


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
        is_operational: bool = True,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details
        self.is_operational = is_operational
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Render the error in the API response format."""
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"success": False, "error": error}


class NotFoundError(AppError):
    """Raised when a requested entity does not exist."""

    def __init__(self, resource: str, resource_id: str | None = None):
        self.resource = resource
        self.resource_id = resource_id
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, 404, "NOT_FOUND", {"resource": resource, "id": resource_id})


class ValidationError(AppError):
    """Raised by callers when input is malformed before reaching a repository."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, 400, "VALIDATION_ERROR", details)


class StorageError(AppError):
    """Raised when the underlying document store operation fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        status_code: int = 500,
        code: str = "STORAGE_ERROR",
        is_operational: bool = False,
    ):
        super().__init__(message, status_code, code, details, is_operational)


class DuplicateEntityError(StorageError):
    """Raised when creating an entity whose ID already exists."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{resource} with this ID already exists",
            details={"resource": resource, "id": resource_id},
            status_code=409,
            code="DUPLICATE_ENTITY",
            is_operational=True,
        )


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, 401, "UNAUTHORIZED")


class ForbiddenError(AppError):
    def __init__(self, message: str = "Access denied"):
        super().__init__(message, 403, "FORBIDDEN")


class ConflictError(AppError):
    """Raised when a request conflicts with the current state of an entity."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, 409, "CONFLICT", details)


class RateLimitError(AppError):
    def __init__(self, message: str = "Too many requests"):
        super().__init__(message, 429, "RATE_LIMITED")


class ExternalServiceError(AppError):
    """Raised when a third-party service call fails."""

    def __init__(self, service_name: str, original_error: Exception | None = None):
        self.service_name = service_name
        super().__init__(
            f"External service '{service_name}' failed",
            502,
            "EXTERNAL_SERVICE_ERROR",
            {
                "service_name": service_name,
                "original_message": str(original_error) if original_error else None,
            },
        )


def is_operational_error(error: BaseException) -> bool:
    """Return True for expected, caller-facing application errors."""
    if isinstance(error, AppError):
        return error.is_operational
    return False
