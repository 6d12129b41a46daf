from simplifier.logging.logger import Log
from simplifier.processor.detector import FormatDetector
from simplifier.processor.extractor import TextExtractor
from simplifier.processor.pipeline import PipelineContext, PipelineStage, PipelineStep
from simplifier.summarization.base import BaseSummarizer


class DetectFormatStep(PipelineStep):
    def __init__(self, detector: FormatDetector) -> None:
        self._detector = detector

    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        context.detected_format = self._detector.detect(document.content, document.filename)
        context.stage = PipelineStage.FORMAT_DETECTED
        Log.info(
            f"Detected format '{context.detected_format.value}'",
            upload_name=document.filename,
            declared_mime_type=document.mime_type,
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.detected_format is None:
            raise ValueError("PipelineContext.detected_format must be set before extraction")
        context.extracted_text = self._extractor.extract(
            context.document.content,
            context.detected_format,
        )
        context.stage = PipelineStage.TEXT_EXTRACTED
        Log.info(f"Extracted {len(context.extracted_text)} chars")
        return context


class SummarizeStep(PipelineStep):
    def __init__(self, summarizer: BaseSummarizer) -> None:
        self._summarizer = summarizer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.stage is not PipelineStage.TEXT_EXTRACTED:
            raise ValueError("PipelineContext text must be extracted before summarization")
        context.summary_result = self._summarizer.summarize(context.extracted_text)
        context.stage = PipelineStage.SUMMARIZED
        Log.info(f"Summary ready with {len(context.summary_result.key_points)} key points")
        return context
