from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class BaseOcrSession(ABC):
    """A live OCR engine handle, valid only inside its engine's context."""

    @abstractmethod
    def recognize(self, image_bytes: bytes) -> str:
        """Recognize text in an encoded image (PNG, JPEG, ...).

        Raises:
            OcrError: if the engine fails or the image cannot be decoded.
        """


class BaseOcrEngine(ABC):
    """Contract for all OCR adapters.

    Engines are acquired per call and released on exit:

        with engine.open() as session:
            text = session.recognize(image_bytes)
    """

    @abstractmethod
    def open(self) -> AbstractContextManager[BaseOcrSession]:
        """Acquire a session that is released when the context exits."""
