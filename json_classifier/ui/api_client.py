"""
HTTP client the Streamlit page uses to reach the classification API.
"""

from __future__ import annotations

import os
from typing import Any, List, Optional, Tuple

import httpx
from pydantic import ValidationError as PydanticValidationError

from json_classifier.classifier.errors import (
    ClassifierBusyError,
    ClassifierError,
    TransportError,
    ValidationError,
)
from json_classifier.classifier.models import ClassificationResult

# API URL provided via environment (docker-compose) or default localhost
API_URL = os.getenv("API_URL", "http://localhost:8000")
DEFAULT_TIMEOUT = 60.0


class ClassifierApiClient:
    """
    Calls POST /classify and turns every response into a result or a ClassifierError.

    The processing steps reported by the API for the latest call are kept on
    ``last_logs`` / ``last_log_markdown`` for the log panel.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self.last_logs: List[str] = []
        self.last_log_markdown: Optional[str] = None

    def classify(self, json_text: str) -> ClassificationResult:
        self.last_logs = []
        self.last_log_markdown = None
        try:
            with httpx.Client(base_url=self._base_url, timeout=self._timeout, transport=self._transport) as client:
                response = client.post("/classify", json={"json_text": json_text})
        except httpx.RequestError as exc:
            self.last_logs = [f"RequestError: {exc}"]
            raise TransportError(f"Failed to reach API: {exc}") from exc

        if response.status_code != 200:
            raise self._error_from_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError("API returned a non-JSON body.", details=response.text) from exc

        self.last_logs = list(data.get("logs") or [])
        self.last_log_markdown = data.get("log_markdown")

        error = data.get("error")
        if error:
            raise ClassifierError(str(error.get("message") or "Classification failed."), details=error.get("details"))

        try:
            return ClassificationResult.model_validate(data.get("result"))
        except PydanticValidationError as exc:
            raise TransportError("API returned an unexpected classification payload.", details=str(exc)) from exc

    def _error_from_status(self, response: httpx.Response) -> ClassifierError:
        message, details = _detail_from_response(response)
        self.last_logs = [f"API error {response.status_code}: {message or response.text}"]
        if response.status_code == 400 and message:
            return ValidationError(message, details=details)
        if response.status_code == 409:
            return ClassifierBusyError(message or "A classification request is already in progress.", details=details)
        return TransportError(f"API error {response.status_code}", details=message or response.text or None)


def _detail_from_response(response: httpx.Response) -> Tuple[Optional[str], Optional[str]]:
    try:
        body: Any = response.json()
    except ValueError:
        return None, None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, dict):
        return detail.get("message"), detail.get("details")
    if isinstance(detail, str):
        return detail, None
    if detail is not None:
        return str(detail), None
    return None, None


__all__ = ["API_URL", "ClassifierApiClient"]
