import io
from collections.abc import Iterator
from contextlib import contextmanager

import pytesseract
from PIL import Image

from simplifier.logging.logger import Log
from simplifier.ocr.base import BaseOcrEngine, BaseOcrSession
from simplifier.ocr.exceptions import OcrError


class TesseractSession(BaseOcrSession):
    """Runs tesseract for a single language and tracks the images it opened."""

    def __init__(self, language: str) -> None:
        self._language = language
        self._images: list[Image.Image] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def recognize(self, image_bytes: bytes) -> str:
        if self._closed:
            raise OcrError("OCR session is already closed")
        try:
            image = Image.open(io.BytesIO(image_bytes))
            self._images.append(image)
            return pytesseract.image_to_string(image, lang=self._language)
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc

    def close(self) -> None:
        for image in self._images:
            image.close()
        self._images.clear()
        self._closed = True


class TesseractAdapter(BaseOcrEngine):
    """OCR engine backed by the tesseract binary through pytesseract."""

    def __init__(self, language: str = "eng", tesseract_cmd: str | None = None) -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    @contextmanager
    def open(self) -> Iterator[TesseractSession]:
        session = TesseractSession(self._language)
        Log.debug(f"OCR session opened (lang={self._language})")
        try:
            yield session
        finally:
            session.close()
            Log.debug("OCR session released")
