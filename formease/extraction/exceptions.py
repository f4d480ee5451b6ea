from enum import Enum


class FailureKind(str, Enum):
    BACKEND_UNAVAILABLE = "BackendUnavailable"
    SCHEMA_VIOLATION = "SchemaViolation"
    UNREADABLE_DOCUMENT = "UnreadableDocument"


class ExtractionError(Exception):
    """Raised when extraction fails. No partial record is produced."""

    kind: FailureKind = FailureKind.SCHEMA_VIOLATION


class ExtractionValidationError(ExtractionError):
    """Raised when the provider response does not conform to the contract."""

    kind = FailureKind.SCHEMA_VIOLATION


class ExtractionBackendError(ExtractionError):
    """Raised when the AI provider cannot be reached or rejects the call."""

    kind = FailureKind.BACKEND_UNAVAILABLE


class UnreadableDocumentError(ExtractionError):
    """Raised when a document cannot be rendered for the provider."""

    kind = FailureKind.UNREADABLE_DOCUMENT
