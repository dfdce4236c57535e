"""
Logging setup plus a per-request step recorder whose entries travel back to the UI.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def setup_logging() -> None:
    """
    Configure the root logger once, honouring LOG_LEVEL.
    """

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    logging.basicConfig(level=level if isinstance(level, int) else logging.INFO, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True


class PipelineLogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    level: str
    message: str
    stage: Optional[str] = None
    metadata: Dict[str, Any] | None = None

    def as_text(self) -> str:
        suffix = f" | stage={self.stage}" if self.stage else ""
        if self.metadata:
            suffix += f" | {self.metadata}"
        return f"{self.timestamp} [{self.level}] {self.message}{suffix}"

    def as_markdown_line(self) -> str:
        notes = []
        if self.stage:
            notes.append(f"stage `{self.stage}`")
        if self.metadata:
            notes.append(f"meta {self.metadata}")
        trailer = f" ({' • '.join(notes)})" if notes else ""
        return f"- `{self.timestamp}` – **{self.message}**{trailer}"


class PipelineLogger:
    """
    Records the steps of one request and forwards each to the stdlib logger.

    A ``stage`` keyword is lifted out of the metadata onto the entry itself.
    """

    def __init__(self, name: str, *, context: Dict[str, Any] | None = None) -> None:
        setup_logging()
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})
        self._entries: List[PipelineLogEntry] = []

    def info(self, message: str, **metadata: Any) -> None:
        self._record(logging.INFO, message, metadata)

    def warning(self, message: str, **metadata: Any) -> None:
        self._record(logging.WARNING, message, metadata)

    def error(self, message: str, **metadata: Any) -> None:
        self._record(logging.ERROR, message, metadata)

    def _record(self, level: int, message: str, metadata: Dict[str, Any]) -> None:
        stage = metadata.pop("stage", None)
        fields = {**self._context, **metadata}
        self._entries.append(
            PipelineLogEntry(
                timestamp=datetime.now(timezone.utc).isoformat(),
                level=logging.getLevelName(level),
                message=message,
                stage=stage,
                metadata=fields or None,
            )
        )
        if fields:
            self._logger.log(level, "%s | %s", message, fields)
        else:
            self._logger.log(level, "%s", message)

    def as_entries(self) -> List[PipelineLogEntry]:
        return list(self._entries)

    def as_text_lines(self) -> List[str]:
        return [entry.as_text() for entry in self._entries]

    def as_markdown(self) -> str:
        return "\n".join(entry.as_markdown_line() for entry in self._entries)


__all__ = ["PipelineLogEntry", "PipelineLogger", "setup_logging"]
