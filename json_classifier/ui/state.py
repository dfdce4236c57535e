"""
UI-side state for one browser session: the pasted input, the busy flag, and the
current outcome of the most recent submission.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from json_classifier.classifier.errors import ClassifierError, ValidationError
from json_classifier.classifier.models import ApiResponseError, ClassificationResult
from json_classifier.input_validation import validate_json_input

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during classification."


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Success:
    result: ClassificationResult


@dataclass(frozen=True)
class Failure:
    error: ApiResponseError


Outcome = Union[Pending, Success, Failure]
Classifier = Callable[[str], ClassificationResult]


@dataclass
class ClassifierSession:
    """
    Owns the single outcome slot and enforces one outstanding submission at a time.
    """

    raw_text: str = ""
    input_error: Optional[str] = None
    outcome: Outcome = field(default_factory=Pending)
    busy: bool = False

    def begin(self, raw_text: str) -> bool:
        """
        Validate raw_text and mark the session busy until resolve() runs.
        Returns False when the submission was rejected.
        """

        self.raw_text = raw_text
        if self.busy:
            logger.warning("Ignoring submission while a classification is in progress")
            return False

        self.input_error = None
        try:
            validate_json_input(raw_text)
        except ValidationError as exc:
            self.input_error = exc.message
            return False

        self.outcome = Pending()
        self.busy = True
        return True

    def resolve(self, classify: Classifier) -> None:
        if not self.busy:
            return
        try:
            self.outcome = Success(classify(self.raw_text))
        except ClassifierError as exc:
            self.outcome = Failure(exc.to_response_error())
        except Exception:
            logger.exception("Unexpected failure while classifying submission")
            self.outcome = Failure(ApiResponseError(message=UNKNOWN_ERROR_MESSAGE))
        finally:
            self.busy = False

    def submit(self, raw_text: str, classify: Classifier) -> bool:
        """
        Run begin() and resolve() in one step. Returns True when classify was invoked.
        """

        if not self.begin(raw_text):
            return False
        self.resolve(classify)
        return True

    @property
    def result(self) -> Optional[ClassificationResult]:
        return self.outcome.result if isinstance(self.outcome, Success) else None

    @property
    def error(self) -> Optional[ApiResponseError]:
        return self.outcome.error if isinstance(self.outcome, Failure) else None


__all__ = [
    "ClassifierSession",
    "Failure",
    "Outcome",
    "Pending",
    "Success",
    "UNKNOWN_ERROR_MESSAGE",
]
