from dataclasses import dataclass
from enum import Enum

from simplifier.processor.exceptions import ExtractionError


class DetectedFormat(str, Enum):
    """Classification of an upload by its content."""

    IMAGE = "image"
    PLAIN_TEXT = "plain_text"
    UNSUPPORTED = "unsupported"


class ErrorKind(str, Enum):
    BAD_REQUEST = "BadRequest"
    EXTRACTION_FAILURE = "ExtractionFailure"
    INTERNAL_FAILURE = "InternalFailure"


@dataclass(frozen=True)
class UploadedDocument:
    """A single uploaded file; filename and mime_type are client-asserted."""

    content: bytes
    filename: str = ""
    mime_type: str = ""

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class PipelineError:
    """Error returned instead of a summary when a stage fails unrecoverably."""

    error_kind: ErrorKind
    message: str

    @classmethod
    def missing_file(cls) -> "PipelineError":
        return cls(error_kind=ErrorKind.BAD_REQUEST, message="No file uploaded")

    @classmethod
    def from_exception(cls, exc: Exception) -> "PipelineError":
        if isinstance(exc, ExtractionError):
            return cls(error_kind=ErrorKind.EXTRACTION_FAILURE, message=str(exc))
        return cls(error_kind=ErrorKind.INTERNAL_FAILURE, message=str(exc))
