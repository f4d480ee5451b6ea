from abc import ABC, abstractmethod

from formease.extraction.models import ExtractedRecord
from formease.ingestion.models import EncodedPayload


class BaseExtractor(ABC):
    """Contract for all extraction adapters."""

    @abstractmethod
    def extract(self, payload: EncodedPayload) -> ExtractedRecord:
        """Extract personal details from an encoded document.

        Args:
            payload: The document as produced by the ingestor.

        Returns:
            ExtractedRecord with every contract field set, possibly empty.

        Raises:
            ExtractionError: on any failure. No partial record is returned.
        """
