from formease.extraction.base import BaseExtractor
from formease.ingestion.ingestor import DocumentIngestor
from formease.logging.logger import Log
from formease.processor.pipeline import PipelineContext, PipelineStep
from formease.reconciler.merger import FieldMergeReconciler


class IngestStep(PipelineStep):
    def __init__(self, ingestor: DocumentIngestor) -> None:
        self._ingestor = ingestor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.payload = self._ingestor.ingest(context.document)
        return context


class ExtractStep(PipelineStep):
    def __init__(self, extractor: BaseExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.payload is None:
            raise ValueError("PipelineContext.payload must be set before extraction")
        context.record = self._extractor.extract(context.payload)
        return context


class MergeStep(PipelineStep):
    def __init__(self, reconciler: FieldMergeReconciler) -> None:
        self._reconciler = reconciler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before merge")
        if context.record.is_empty:
            Log.info("Extraction found nothing, form left untouched")
            return context
        context.fields_filled = self._reconciler.merge(context.record, context.form_state)
        Log.info(f"Pre-filled {context.fields_filled} form field(s)")
        return context
