class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ExtractionError(ProcessorError):
    """Raised when text cannot be extracted from a supported document."""


class UnsupportedFormatError(ProcessorError):
    """Raised when extraction is requested for an unsupported format."""
