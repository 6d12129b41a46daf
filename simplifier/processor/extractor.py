from simplifier.ocr.base import BaseOcrEngine
from simplifier.ocr.exceptions import OcrError
from simplifier.processor.exceptions import ExtractionError, UnsupportedFormatError
from simplifier.processor.models import DetectedFormat


class TextExtractor:
    """Recovers plain text from an image (OCR) or a text file (UTF-8 decode)."""

    def __init__(self, ocr_engine: BaseOcrEngine) -> None:
        self._ocr_engine = ocr_engine

    def extract(self, content: bytes, detected_format: DetectedFormat) -> str:
        """Extract text from document bytes.

        Raises:
            ExtractionError: if the OCR engine fails.
            UnsupportedFormatError: if called for an unsupported format.
        """
        if detected_format is DetectedFormat.IMAGE:
            return self._recognize(content)
        if detected_format is DetectedFormat.PLAIN_TEXT:
            return content.decode("utf-8", errors="replace")
        raise UnsupportedFormatError(
            f"Text extraction is not available for format '{detected_format.value}'"
        )

    def _recognize(self, content: bytes) -> str:
        try:
            with self._ocr_engine.open() as session:
                return session.recognize(content)
        except OcrError as exc:
            raise ExtractionError(f"OCR failed: {exc}") from exc
