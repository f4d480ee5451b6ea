"""Inbound extraction operation: ``{"fileDataUri": ...}`` in, six contract keys out."""

from collections.abc import Mapping

from formease.extraction.base import BaseExtractor
from formease.ingestion.models import EncodedPayload

FILE_DATA_URI_KEY = "fileDataUri"


def extract_details(input_data: Mapping[str, object], extractor: BaseExtractor) -> dict[str, str]:
    """Extract personal details from a document given as a base64 data URI.

    Returns:
        Dict with exactly the keys firstName, surname, address, postcode,
        email and favoriteTimeOfDay, each a possibly empty string.

    Raises:
        ValueError: if ``fileDataUri`` is missing or is not a base64 data URI.
        ExtractionError: if extraction fails.
    """
    uri = input_data.get(FILE_DATA_URI_KEY)
    if not isinstance(uri, str):
        raise ValueError(f"'{FILE_DATA_URI_KEY}' must be a data URI string")
    payload = EncodedPayload.from_data_uri(uri)
    return extractor.extract(payload).to_contract_dict()
