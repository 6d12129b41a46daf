from simplifier.config.settings import Settings
from simplifier.logging.logger import Log
from simplifier.ocr.base import BaseOcrEngine
from simplifier.ocr.tesseract_adapter import TesseractAdapter
from simplifier.processor.detector import FormatDetector
from simplifier.processor.extractor import TextExtractor
from simplifier.processor.models import DetectedFormat, UploadedDocument
from simplifier.processor.pipeline import PipelineContext, PipelineStage
from simplifier.processor.steps import DetectFormatStep, ExtractTextStep, SummarizeStep
from simplifier.summarization.base import BaseSummarizer
from simplifier.summarization.factory import SummarizerFactory
from simplifier.summarization.models import SummaryResult

UNSUPPORTED_FORMAT_MESSAGE = (
    "Automatic OCR for this filetype is not supported in the demo. "
    "Please upload an image (.png/.jpg) or a .txt file."
)


def unsupported_format_result() -> SummaryResult:
    return SummaryResult(summary=UNSUPPORTED_FORMAT_MESSAGE, key_points=[], original_extract="")


class Processor:
    """Orchestrates the document-to-summary pipeline for one upload.

    Pipeline: detect format -> extract text -> summarize.
    Unsupported formats short-circuit with a canned result; extraction and
    summarization are then never invoked.
    """

    def __init__(
        self,
        detect_step: DetectFormatStep,
        extract_step: ExtractTextStep,
        summarize_step: SummarizeStep,
    ) -> None:
        self._detect_step = detect_step
        self._extract_step = extract_step
        self._summarize_step = summarize_step

    def process(self, document: UploadedDocument) -> SummaryResult:
        """Run the pipeline and return the summary.

        Raises:
            ExtractionError: if OCR fails.
        """
        context = self.run(document)
        if context.summary_result is None:
            raise RuntimeError(f"Pipeline finished in stage '{context.stage.value}' without a result")
        return context.summary_result

    def run(self, document: UploadedDocument) -> PipelineContext:
        """Run the pipeline and return the final context (stage and result)."""
        context = PipelineContext(document=document)
        Log.info(
            f"Processing upload of {document.size_bytes} bytes",
            upload_name=document.filename,
        )
        try:
            self._detect_step.run(context)
            if context.detected_format is DetectedFormat.UNSUPPORTED:
                context.stage = PipelineStage.UNSUPPORTED_SHORT_CIRCUIT
                context.summary_result = unsupported_format_result()
                Log.info("Unsupported format, skipping extraction and summarization")
                return context
            self._extract_step.run(context)
            self._summarize_step.run(context)
        except Exception as exc:
            Log.debug(f"Pipeline failed after stage '{context.stage.value}': {exc}")
            context.stage = PipelineStage.FAILED
            context.error_message = str(exc)
            raise
        context.stage = PipelineStage.RESPONDED
        return context


def build_processor(
    settings: Settings,
    ocr_engine: BaseOcrEngine | None = None,
    summarizer: BaseSummarizer | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if ocr_engine is None:
        ocr_engine = TesseractAdapter(
            language=settings.ocr_language,
            tesseract_cmd=settings.tesseract_cmd,
        )
    if summarizer is None:
        summarizer = SummarizerFactory.create(settings)
    return Processor(
        detect_step=DetectFormatStep(FormatDetector()),
        extract_step=ExtractTextStep(TextExtractor(ocr_engine)),
        summarize_step=SummarizeStep(summarizer),
    )
