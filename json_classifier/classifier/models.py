"""
Value shapes exchanged between the classification service, the API and the UI.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool


class ClassificationResult(BaseModel):
    """
    Verdict returned by the model for one JSON document.
    """

    model_config = ConfigDict(frozen=True)

    has_quantitative_data: StrictBool
    reasoning: Optional[str] = None


class ApiResponseError(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    details: Optional[str] = None


__all__ = ["ApiResponseError", "ClassificationResult"]
