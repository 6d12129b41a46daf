from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from simplifier.processor.models import DetectedFormat, UploadedDocument
from simplifier.summarization.models import SummaryResult


class PipelineStage(str, Enum):
    RECEIVED = "received"
    FORMAT_DETECTED = "format_detected"
    TEXT_EXTRACTED = "text_extracted"
    UNSUPPORTED_SHORT_CIRCUIT = "unsupported_short_circuit"
    SUMMARIZED = "summarized"
    RESPONDED = "responded"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    stage: PipelineStage = PipelineStage.RECEIVED
    detected_format: DetectedFormat | None = None
    extracted_text: str = ""
    summary_result: SummaryResult | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
