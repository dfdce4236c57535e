"""
Error primitives shared by the input stage, the classification service and the UI client.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from json_classifier.classifier.models import ApiResponseError


class ErrorType(str, Enum):
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    RESPONSE_FORMAT = "response_format"
    TRANSPORT = "transport"
    BUSY = "busy"


class ClassifierError(Exception):
    error_type: ErrorType = ErrorType.TRANSPORT

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response_error(self) -> ApiResponseError:
        return ApiResponseError(message=self.message, details=self.details or None)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message, "error_type": self.error_type.value}
        if self.details:
            payload["details"] = self.details
        return payload


class ConfigurationError(ClassifierError):
    error_type = ErrorType.CONFIGURATION


class ValidationError(ClassifierError):
    error_type = ErrorType.VALIDATION


class ResponseFormatError(ClassifierError):
    error_type = ErrorType.RESPONSE_FORMAT


class TransportError(ClassifierError):
    error_type = ErrorType.TRANSPORT


class ClassifierBusyError(ClassifierError):
    error_type = ErrorType.BUSY


__all__ = [
    "ClassifierBusyError",
    "ClassifierError",
    "ConfigurationError",
    "ErrorType",
    "ResponseFormatError",
    "TransportError",
    "ValidationError",
]
