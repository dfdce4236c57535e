"""
Gemini-backed classification layer that decides whether a JSON document reports
quantitative experimental data.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import TYPE_CHECKING, Any, Optional

from google import genai
from google.genai import types as genai_types

from json_classifier.classifier.errors import (
    ClassifierBusyError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)
from json_classifier.classifier.models import ClassificationResult
from json_classifier.prompts.classification_prompt import (
    QUANTITATIVE_DATA_SYSTEM_PROMPT,
    RESPONSE_SCHEMA,
    build_user_message,
)

if TYPE_CHECKING:  # pragma: no cover
    from json_classifier.config import ClassifierSettings
    from json_classifier.logging_utils import PipelineLogger

logger = logging.getLogger(__name__)

DEFAULT_CLASSIFIER_MODEL = "gemini-2.5-flash"
RESPONSE_MIME_TYPE = "application/json"
GENERIC_FAILURE_MESSAGE = "An unexpected error occurred during classification."


class ClassificationService:
    """
    Sends one JSON document to Gemini and normalizes whatever comes back.

    Only one request may be outstanding per instance; overlapping calls are
    rejected with ClassifierBusyError instead of being queued.
    """

    def __init__(self, settings: Optional["ClassifierSettings"] = None, client: Any = None) -> None:
        if client is None:
            if settings is None or not settings.api_key:
                raise ConfigurationError("API_KEY is not set. Please ensure it's configured.")
            client = genai.Client(api_key=settings.api_key)
        self._client = client
        self._model = settings.model if settings is not None else DEFAULT_CLASSIFIER_MODEL
        self._in_flight = threading.Lock()
        logger.info("ClassificationService initialized for model %s", self._model)

    @property
    def model(self) -> str:
        return self._model

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def classify(self, json_text: str, pipeline_logger: Optional["PipelineLogger"] = None) -> ClassificationResult:
        """
        Return the model's verdict for json_text or raise a ClassifierError subclass.
        """

        if not self._in_flight.acquire(blocking=False):
            raise ClassifierBusyError(
                "A classification request is already in progress.",
                details="Wait for the current request to finish before submitting again.",
            )
        try:
            raw_text = self._generate(json_text, pipeline_logger)
            result = parse_classification_response(raw_text)
        finally:
            self._in_flight.release()

        _log(
            pipeline_logger,
            "Classification completed",
            has_quantitative_data=result.has_quantitative_data,
            has_reasoning=bool(result.reasoning),
        )
        return result

    def _generate(self, json_text: str, pipeline_logger: Optional["PipelineLogger"]) -> str:
        config = genai_types.GenerateContentConfig(
            system_instruction=QUANTITATIVE_DATA_SYSTEM_PROMPT,
            response_mime_type=RESPONSE_MIME_TYPE,
            response_schema=genai_types.Schema.model_validate(RESPONSE_SCHEMA),
        )
        contents = [
            genai_types.Content(role="user", parts=[genai_types.Part(text=build_user_message(json_text))]),
        ]
        _log(pipeline_logger, "Sending document to Gemini", model=self._model, input_chars=len(json_text))
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=contents,
                config=config,
            )
        except Exception as exc:
            error = normalize_transport_error(exc)
            logger.error("Error classifying JSON text: %s", exc)
            _log(pipeline_logger, "Gemini request failed", level="error", error=error.message)
            raise error from exc

        text = getattr(response, "text", None) or ""
        _log(pipeline_logger, "Received Gemini response", response_chars=len(text))
        return text


def parse_classification_response(raw_text: str) -> ClassificationResult:
    text = (raw_text or "").strip()
    if not text:
        raise ResponseFormatError("Gemini API returned an empty response.")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse Gemini's JSON response: %s", text)
        raise ResponseFormatError(f"Invalid JSON response from API: {text}", details=str(exc)) from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("has_quantitative_data"), bool):
        raise ResponseFormatError("Missing or invalid 'has_quantitative_data' in API response.", details=text)

    reasoning = payload.get("reasoning")
    if reasoning is not None and not isinstance(reasoning, str):
        raise ResponseFormatError("Invalid 'reasoning' in API response; expected a string.", details=text)

    return ClassificationResult(has_quantitative_data=payload["has_quantitative_data"], reasoning=reasoning)


def normalize_transport_error(exc: BaseException) -> TransportError:
    """
    Map an SDK/network failure onto a TransportError using the richest detail available.
    """

    status_code = _status_code(exc)
    if status_code is not None:
        status_text = getattr(exc, "status", None) or getattr(exc, "reason_phrase", None) or ""
        message = f"API Error {status_code}: {status_text}" if status_text else f"API Error {status_code}"
        return TransportError(message, details=_nested_error_message(exc))

    own_message = str(exc).strip()
    if own_message:
        return TransportError(own_message)
    return TransportError(GENERIC_FAILURE_MESSAGE)


def _status_code(exc: BaseException) -> Optional[int]:
    for candidate in (getattr(exc, "code", None), getattr(exc, "status_code", None)):
        if isinstance(candidate, int):
            return candidate
    response = getattr(exc, "response", None)
    candidate = getattr(response, "status_code", None)
    return candidate if isinstance(candidate, int) else None


def _nested_error_message(exc: BaseException) -> Optional[str]:
    body = getattr(exc, "details", None)
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict) and nested.get("message"):
            return str(nested["message"])
        if body.get("message"):
            return str(body["message"])
    message = getattr(exc, "message", None)
    return str(message) if message else None


def _log(pipeline_logger: Optional["PipelineLogger"], message: str, *, level: str = "info", **metadata: Any) -> None:
    if pipeline_logger is None:
        logger.log(logging.getLevelName(level.upper()), "%s | %s", message, metadata)
        return
    log_method = getattr(pipeline_logger, level, pipeline_logger.info)
    log_method(message, stage="classify", **metadata)


__all__ = [
    "ClassificationService",
    "DEFAULT_CLASSIFIER_MODEL",
    "GENERIC_FAILURE_MESSAGE",
    "normalize_transport_error",
    "parse_classification_response",
]
