from dataclasses import dataclass
from enum import Enum

from formease.extraction.exceptions import FailureKind
from formease.extraction.models import ExtractedRecord
from formease.ingestion.exceptions import RejectionKind


class ExtractionOutcome(str, Enum):
    FILLED = "Filled"
    EMPTY_EXTRACTION = "EmptyExtraction"
    UNSUPPORTED_TYPE = RejectionKind.UNSUPPORTED_TYPE.value
    TOO_LARGE = RejectionKind.TOO_LARGE.value
    BACKEND_UNAVAILABLE = FailureKind.BACKEND_UNAVAILABLE.value
    SCHEMA_VIOLATION = FailureKind.SCHEMA_VIOLATION.value
    UNREADABLE_DOCUMENT = FailureKind.UNREADABLE_DOCUMENT.value

    @property
    def is_failure(self) -> bool:
        return self not in (ExtractionOutcome.FILLED, ExtractionOutcome.EMPTY_EXTRACTION)


_EXTRACTION_ERROR_NOTICE = (
    "Extraction Error",
    "An error occurred during extraction. This may be due to a missing or invalid API key.",
)

# (title, description) shown to the user for each outcome.
_NOTICES: dict[ExtractionOutcome, tuple[str, str]] = {
    ExtractionOutcome.FILLED: (
        "Details Extracted!",
        "{fields_filled} field(s) have been pre-filled for you.",
    ),
    ExtractionOutcome.EMPTY_EXTRACTION: (
        "Nothing Found",
        "We couldn't find details in the document. Please fill the form manually.",
    ),
    ExtractionOutcome.UNSUPPORTED_TYPE: ("Invalid File Type", "Please upload a PDF or TXT file."),
    ExtractionOutcome.TOO_LARGE: ("File Too Large", "Please upload a file smaller than 5MB."),
    ExtractionOutcome.BACKEND_UNAVAILABLE: _EXTRACTION_ERROR_NOTICE,
    ExtractionOutcome.SCHEMA_VIOLATION: _EXTRACTION_ERROR_NOTICE,
    ExtractionOutcome.UNREADABLE_DOCUMENT: ("File Read Error", "Could not read the selected file."),
}


@dataclass(frozen=True)
class ProcessorResult:
    """Outcome of running one document through the pipeline."""

    outcome: ExtractionOutcome
    fields_filled: int = 0
    record: ExtractedRecord | None = None
    error_message: str = ""

    @property
    def title(self) -> str:
        return _NOTICES[self.outcome][0]

    @property
    def message(self) -> str:
        return _NOTICES[self.outcome][1].format(fields_filled=self.fields_filled)
