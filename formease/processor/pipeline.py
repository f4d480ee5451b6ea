from abc import ABC, abstractmethod
from dataclasses import dataclass

from formease.extraction.models import ExtractedRecord
from formease.ingestion.models import EncodedPayload, UploadedDocument
from formease.reconciler.merger import FormState


@dataclass(slots=True)
class PipelineContext:
    document: UploadedDocument
    form_state: FormState
    payload: EncodedPayload | None = None
    record: ExtractedRecord | None = None
    fields_filled: int = 0


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
