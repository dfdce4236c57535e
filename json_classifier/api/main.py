"""
FastAPI service exposing the quantitative-data classifier.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from json_classifier.classifier import (
    ApiResponseError,
    ClassificationResult,
    ClassificationService,
    ClassifierBusyError,
    ClassifierError,
    ConfigurationError,
    ValidationError,
)
from json_classifier.config import ClassifierSettings, load_env
from json_classifier.input_validation import validate_json_input
from json_classifier.logging_utils import PipelineLogger, setup_logging

setup_logging()
logger = logging.getLogger(__name__)

classification_service: Optional[ClassificationService] = None
configuration_error: Optional[ConfigurationError] = None


def build_service() -> ClassificationService:
    load_env()
    return ClassificationService(ClassifierSettings.from_env())


@asynccontextmanager
async def lifespan(_: FastAPI):
    global classification_service, configuration_error
    try:
        classification_service = build_service()
        configuration_error = None
    except ConfigurationError as exc:
        logger.error("Classifier is not configured: %s", exc.message)
        classification_service = None
        configuration_error = exc
    yield
    classification_service = None
    configuration_error = None


app = FastAPI(title="JSON Text Classifier API", version="0.1.0", lifespan=lifespan)


class ClassifyRequest(BaseModel):
    json_text: str


class ClassifyResponse(BaseModel):
    result: ClassificationResult | None = None
    error: ApiResponseError | None = None
    logs: list[str] = Field(default_factory=list)
    log_markdown: str | None = None

    @model_validator(mode="after")
    def _single_outcome(self) -> "ClassifyResponse":
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result or error must be set.")
        return self


@app.get("/health", response_model=dict)
async def health() -> dict:
    return {"status": "ok", "configured": classification_service is not None}


@app.post("/classify", response_model=ClassifyResponse)
def classify_endpoint(payload: ClassifyRequest) -> ClassifyResponse:
    service = classification_service
    if service is None:
        error = configuration_error or ConfigurationError("Classifier is not initialized.")
        raise HTTPException(status_code=503, detail=error.to_payload())

    request_id = str(uuid.uuid4())
    pipeline_logger = PipelineLogger("api.classify", context={"request_id": request_id})
    pipeline_logger.info("Received classification request", stage="receive", input_chars=len(payload.json_text))

    try:
        json_text = validate_json_input(payload.json_text)
    except ValidationError as exc:
        pipeline_logger.warning("Rejected input", stage="validate", reason=exc.message)
        raise HTTPException(status_code=400, detail=exc.to_payload()) from exc

    result: ClassificationResult | None = None
    error: ApiResponseError | None = None
    try:
        result = service.classify(json_text, pipeline_logger)
    except ClassifierBusyError as exc:
        pipeline_logger.warning("Rejected overlapping request", stage="classify")
        raise HTTPException(status_code=409, detail=exc.to_payload()) from exc
    except ClassifierError as exc:
        error = exc.to_response_error()
        pipeline_logger.error("Classification failed", stage="respond", error_type=exc.error_type.value)

    pipeline_logger.info("Responding to client", stage="respond", outcome="error" if error else "result")
    return ClassifyResponse(
        result=result,
        error=error,
        logs=pipeline_logger.as_text_lines(),
        log_markdown=pipeline_logger.as_markdown(),
    )
