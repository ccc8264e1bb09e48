"""
Core utilities package for the Garden Assistant application.
Provides the exception hierarchy and service wiring used by the API layer.
"""

from .exceptions import (
    GardenAssistantException,
    ValidationError,
    NotFoundError,
    ConflictError,
    FileTooLargeError,
    InvalidFileTypeError,
    ExternalAPIError,
    ModelServiceError,
    PlantIdentificationError,
    APITimeoutError,
    APIAuthenticationError,
    APIQuotaExceededError,
    StorageError,
    CorruptedDataError,
)

__all__ = [
    "GardenAssistantException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "FileTooLargeError",
    "InvalidFileTypeError",
    "ExternalAPIError",
    "ModelServiceError",
    "PlantIdentificationError",
    "APITimeoutError",
    "APIAuthenticationError",
    "APIQuotaExceededError",
    "StorageError",
    "CorruptedDataError",
]
