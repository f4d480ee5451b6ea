from collections.abc import Collection

from formease.ingestion.exceptions import TooLargeError, UnsupportedTypeError
from formease.ingestion.models import (
    MAX_UPLOAD_BYTES,
    SUPPORTED_MEDIA_TYPES,
    EncodedPayload,
    UploadedDocument,
)
from formease.logging.logger import Log


class DocumentIngestor:
    """Validates an uploaded document and encodes it for extraction."""

    def __init__(
        self,
        max_bytes: int = MAX_UPLOAD_BYTES,
        allowed_media_types: Collection[str] = SUPPORTED_MEDIA_TYPES,
    ) -> None:
        self._max_bytes = max_bytes
        self._allowed_media_types = frozenset(allowed_media_types)

    def ingest(self, document: UploadedDocument) -> EncodedPayload:
        """Validate type then size, and encode the content as a data URI payload.

        Raises:
            UnsupportedTypeError: if the media type is not PDF or plain text.
            TooLargeError: if the document is larger than the ceiling.
        """
        media_type = document.media_type.strip().lower()
        if media_type not in self._allowed_media_types:
            Log.warning(f"Rejected document with media type '{document.media_type}'")
            raise UnsupportedTypeError(
                f"Unsupported media type '{document.media_type}'. "
                f"Choose from: {sorted(self._allowed_media_types)}"
            )

        size = max(document.size_bytes, len(document.content))
        if size > self._max_bytes:
            Log.warning(f"Rejected document of {size} bytes (max {self._max_bytes})")
            raise TooLargeError(
                f"Document is {size} bytes, larger than the {self._max_bytes} byte limit"
            )

        payload = EncodedPayload.encode(document.content, media_type)
        Log.info(f"Encoded {len(document.content)} bytes of {media_type}")
        return payload
