"""Tests for DocumentIngestor (type and size validation, encoding)."""

import base64
from unittest.mock import MagicMock, patch

import pytest

from formease.ingestion.exceptions import (
    IngestionError,
    RejectionKind,
    TooLargeError,
    UnsupportedTypeError,
)
from formease.ingestion.ingestor import DocumentIngestor
from formease.ingestion.models import MAX_UPLOAD_BYTES, UploadedDocument
from formease.processor.processor import Processor
from formease.processor.steps import ExtractStep, IngestStep


def _make_document(
    content: bytes = b"hello",
    media_type: str = "text/plain",
) -> UploadedDocument:
    return UploadedDocument.from_bytes(content, media_type, filename="doc.txt")


class TestIngestSuccess:
    def test_encodes_plain_text(self) -> None:
        payload = DocumentIngestor().ingest(_make_document(b"hello"))
        assert payload.media_type == "text/plain"
        assert payload.data == base64.b64encode(b"hello").decode("ascii")

    def test_data_uri_form(self) -> None:
        payload = DocumentIngestor().ingest(_make_document(b"hello"))
        assert payload.data_uri == "data:text/plain;base64,aGVsbG8="
        assert payload.tag == "text/plain;base64"

    def test_encodes_pdf(self, sample_pdf_bytes: bytes) -> None:
        doc = _make_document(sample_pdf_bytes, "application/pdf")
        payload = DocumentIngestor().ingest(doc)
        assert payload.data_uri.startswith("data:application/pdf;base64,")
        assert payload.decode() == sample_pdf_bytes

    def test_round_trip_arbitrary_bytes(self) -> None:
        content = bytes(range(256)) * 3
        payload = DocumentIngestor().ingest(_make_document(content))
        assert payload.decode() == content

    def test_empty_file_is_accepted(self) -> None:
        payload = DocumentIngestor().ingest(_make_document(b""))
        assert payload.decode() == b""

    def test_media_type_is_case_insensitive(self) -> None:
        payload = DocumentIngestor().ingest(_make_document(media_type="Application/PDF"))
        assert payload.media_type == "application/pdf"

    def test_exactly_at_limit_is_accepted(self) -> None:
        ingestor = DocumentIngestor(max_bytes=10)
        payload = ingestor.ingest(_make_document(b"x" * 10))
        assert payload.decode() == b"x" * 10


class TestUnsupportedType:
    @pytest.mark.parametrize(
        "media_type",
        ["image/png", "application/msword", "application/octet-stream", ""],
    )
    def test_rejects_other_media_types(self, media_type: str) -> None:
        with pytest.raises(UnsupportedTypeError) as exc_info:
            DocumentIngestor().ingest(_make_document(media_type=media_type))
        assert exc_info.value.kind is RejectionKind.UNSUPPORTED_TYPE

    def test_type_checked_before_size(self) -> None:
        ingestor = DocumentIngestor(max_bytes=1)
        with pytest.raises(UnsupportedTypeError):
            ingestor.ingest(_make_document(b"too big", "image/png"))


class TestTooLarge:
    def test_default_ceiling_is_five_mebibytes(self) -> None:
        assert MAX_UPLOAD_BYTES == 5 * 1024 * 1024

    def test_rejects_one_byte_over_limit(self) -> None:
        doc = _make_document(b"x" * (MAX_UPLOAD_BYTES + 1))
        with pytest.raises(TooLargeError) as exc_info:
            DocumentIngestor().ingest(doc)
        assert exc_info.value.kind is RejectionKind.TOO_LARGE

    def test_rejects_on_declared_size(self) -> None:
        doc = UploadedDocument(
            content=b"small",
            media_type="application/pdf",
            size_bytes=MAX_UPLOAD_BYTES + 1,
        )
        with pytest.raises(TooLargeError):
            DocumentIngestor().ingest(doc)

    def test_is_an_ingestion_error(self) -> None:
        with pytest.raises(IngestionError):
            DocumentIngestor(max_bytes=2).ingest(_make_document(b"xyz"))

    def test_extractor_never_invoked(self) -> None:
        extractor = MagicMock()
        processor = Processor(
            steps=[IngestStep(DocumentIngestor(max_bytes=2)), ExtractStep(extractor)]
        )
        result = processor.process(_make_document(b"xyz"), {})
        assert result.outcome.value == "TooLarge"
        assert extractor.extract.call_count == 0


class TestLogging:
    def test_logs_rejection_as_warning(self) -> None:
        with patch("formease.ingestion.ingestor.Log") as mock_log:
            with pytest.raises(UnsupportedTypeError):
                DocumentIngestor().ingest(_make_document(media_type="image/gif"))
            assert mock_log.warning.call_count == 1
            assert "image/gif" in mock_log.warning.call_args.args[0]
