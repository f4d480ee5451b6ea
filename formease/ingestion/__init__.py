from formease.ingestion.exceptions import (
    IngestionError,
    RejectionKind,
    TooLargeError,
    UnsupportedTypeError,
)
from formease.ingestion.ingestor import DocumentIngestor
from formease.ingestion.models import EncodedPayload, UploadedDocument

__all__ = [
    "DocumentIngestor",
    "EncodedPayload",
    "IngestionError",
    "RejectionKind",
    "TooLargeError",
    "UnsupportedTypeError",
    "UploadedDocument",
]
