from __future__ import annotations

from enum import Enum


class EduAIError(Exception):
    """Base class for errors raised by the lesson services."""


class ValidationError(EduAIError):
    """Required input missing or blank. Raised before any model call."""


class NotFoundError(EduAIError):
    pass


class ModelErrorKind(str, Enum):
    TRANSPORT = "transport"
    SCHEMA_MISMATCH = "schema_mismatch"
    EMPTY_RESPONSE = "empty_response"


class ModelError(EduAIError):
    def __init__(self, kind: ModelErrorKind, message: str) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message


class PipelineError(EduAIError):
    """A lesson-generation stage failed; the whole attempt is discarded."""

    def __init__(self, stage: str, error: ModelError) -> None:
        super().__init__(f"Lesson generation failed at stage '{stage}': {error.message}")
        self.stage = stage
        self.error = error


class TranscriptionError(EduAIError):
    pass


class ChatBusyError(EduAIError):
    """A chat session already has a request in flight."""
