from collections.abc import Sequence

from formease.config.settings import Settings
from formease.extraction.exceptions import ExtractionError
from formease.extraction.factory import ExtractorFactory
from formease.ingestion.exceptions import IngestionError
from formease.ingestion.ingestor import DocumentIngestor
from formease.ingestion.models import UploadedDocument
from formease.logging.logger import Log
from formease.processor.models import ExtractionOutcome, ProcessorResult
from formease.processor.pipeline import PipelineContext, PipelineStep
from formease.processor.steps import ExtractStep, IngestStep, MergeStep
from formease.reconciler.merger import FieldMergeReconciler, FormState


class Processor:
    """Orchestrates the document pre-fill pipeline.

    Pipeline: ingest -> extract -> merge. A failing step stops the run before
    the merge, so the form state is only written from a validated record.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, document: UploadedDocument, form_state: FormState) -> ProcessorResult:
        """Run one document through the pipeline and classify the outcome."""
        Log.info(f"Processing document '{document.filename}' ({document.media_type})")
        context = PipelineContext(document=document, form_state=form_state)
        try:
            for step in self._steps:
                context = step.run(context)
        except IngestionError as exc:
            Log.warning(f"Document rejected ({exc.kind.value}): {exc}")
            return ProcessorResult(
                outcome=ExtractionOutcome(exc.kind.value),
                error_message=str(exc),
            )
        except ExtractionError as exc:
            Log.error(f"Extraction failed ({exc.kind.value}): {exc}")
            return ProcessorResult(
                outcome=ExtractionOutcome(exc.kind.value),
                error_message=str(exc),
            )

        outcome = (
            ExtractionOutcome.EMPTY_EXTRACTION
            if context.record is None or context.record.is_empty
            else ExtractionOutcome.FILLED
        )
        return ProcessorResult(
            outcome=outcome,
            fields_filled=context.fields_filled,
            record=context.record,
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    ingestor = DocumentIngestor(max_bytes=settings.max_upload_bytes)
    extractor = ExtractorFactory.create(settings)
    reconciler = FieldMergeReconciler()
    return Processor(
        steps=[
            IngestStep(ingestor),
            ExtractStep(extractor),
            MergeStep(reconciler),
        ]
    )
