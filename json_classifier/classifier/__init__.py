"""
Gemini-backed quantitative-data classification helpers.
"""

from .errors import (
    ClassifierBusyError,
    ClassifierError,
    ConfigurationError,
    ErrorType,
    ResponseFormatError,
    TransportError,
    ValidationError,
)
from .layer import ClassificationService, normalize_transport_error, parse_classification_response
from .models import ApiResponseError, ClassificationResult

__all__ = [
    "ApiResponseError",
    "ClassificationResult",
    "ClassificationService",
    "ClassifierBusyError",
    "ClassifierError",
    "ConfigurationError",
    "ErrorType",
    "ResponseFormatError",
    "TransportError",
    "ValidationError",
    "normalize_transport_error",
    "parse_classification_response",
]
