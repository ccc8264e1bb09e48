# 📄 File: garden_assistant/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Names every kind of problem the assistant can report, like "no photo selected" or
# "the AI service did not answer", so the user gets a clear message instead of a crash.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy carrying an HTTP status, a stable error code and a details dict.
# Subclasses declare their status/code as class attributes; keyword context passed to
# the constructor is merged into `details` (None values are dropped).
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Domain services, Gemini client, key-value storage, API endpoints, app exception handler

from typing import Any, Dict, Optional

from fastapi import status


class GardenAssistantException(Exception):
    """
    Base exception for the Garden Assistant application.

    The app-level handler in main.py renders any subclass as the
    `{"error": {code, message, details, ...}}` envelope using
    `status_code`, `error_code`, `message` and `details`.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "Internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **context: Any,
    ):
        self.message = message or self.default_message
        self.details = dict(details or {})
        self.details.update({k: v for k, v in context.items() if v is not None})
        super().__init__(self.message)


# =============================================================================
# REQUEST / STATE EXCEPTIONS
# =============================================================================

class ValidationError(GardenAssistantException):
    """Required input is missing or malformed; raised before any external call."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class NotFoundError(GardenAssistantException):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"
    default_message = "Resource not found"


class ConflictError(GardenAssistantException):
    """A request overlaps an operation that is still outstanding."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT_ERROR"
    default_message = "Operation already in progress"


class FileTooLargeError(GardenAssistantException):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    error_code = "FILE_TOO_LARGE"
    default_message = "Uploaded file is too large"


class InvalidFileTypeError(GardenAssistantException):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "INVALID_FILE_TYPE"
    default_message = "Invalid or unsupported file type"


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalAPIError(GardenAssistantException):
    """The generative model service failed or returned an unusable answer."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "EXTERNAL_API_ERROR"
    default_message = "External API error"


class ModelServiceError(ExternalAPIError):
    error_code = "MODEL_SERVICE_ERROR"
    default_message = "Generative model request failed"


class PlantIdentificationError(ModelServiceError):
    error_code = "PLANT_IDENTIFICATION_ERROR"
    default_message = "Plant identification failed"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None, **context: Any):
        super().__init__(message, details, operation="identify", **context)


class APITimeoutError(ExternalAPIError):
    error_code = "API_TIMEOUT"

    def __init__(self, api_name: str, timeout_seconds: Optional[float] = None):
        super().__init__(
            f"{api_name} API request timed out",
            api_name=api_name,
            timeout_seconds=timeout_seconds,
        )


class APIAuthenticationError(ExternalAPIError):
    error_code = "API_AUTHENTICATION_ERROR"

    def __init__(self, api_name: str, api_status_code: Optional[int] = None):
        super().__init__(
            f"Authentication failed for {api_name} API",
            api_name=api_name,
            api_status_code=api_status_code,
        )


class APIQuotaExceededError(ExternalAPIError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    error_code = "API_QUOTA_EXCEEDED"

    def __init__(self, api_name: str, retry_after: Optional[int] = None):
        super().__init__(f"{api_name} API quota exceeded", api_name=api_name, retry_after=retry_after)


# =============================================================================
# STORAGE EXCEPTIONS
# =============================================================================

class StorageError(GardenAssistantException):
    """The local key-value storage cannot be read or written."""

    error_code = "STORAGE_ERROR"
    default_message = "Storage error"


class CorruptedDataError(StorageError):
    """A stored value exists but cannot be decoded as text."""

    error_code = "CORRUPTED_DATA"
    default_message = "Stored data is corrupted"
