from abc import ABC, abstractmethod

from simplifier.summarization.models import SummaryResult


class BaseSummarizer(ABC):
    """Contract for all summarizers."""

    @abstractmethod
    def summarize(self, text: str) -> SummaryResult:
        """Produce a plain-language summary with key points.

        Args:
            text: Extracted document text, possibly empty.

        Returns:
            SummaryResult whose key_points holds between one and four entries.

        Never raises for a str input.
        """
