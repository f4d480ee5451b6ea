from enum import Enum


class RejectionKind(str, Enum):
    UNSUPPORTED_TYPE = "UnsupportedType"
    TOO_LARGE = "TooLarge"


class IngestionError(Exception):
    """Raised when an uploaded document is rejected before extraction."""

    kind: RejectionKind


class UnsupportedTypeError(IngestionError):
    """Raised when a document is neither PDF nor plain text."""

    kind = RejectionKind.UNSUPPORTED_TYPE


class TooLargeError(IngestionError):
    """Raised when a document exceeds the upload size ceiling."""

    kind = RejectionKind.TOO_LARGE
