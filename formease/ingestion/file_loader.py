from pathlib import Path

from formease.ingestion.models import PDF_MEDIA_TYPE, TEXT_MEDIA_TYPE, UploadedDocument

_EXTENSION_MEDIA_TYPES = {
    ".pdf": PDF_MEDIA_TYPE,
    ".txt": TEXT_MEDIA_TYPE,
}
_UNKNOWN_MEDIA_TYPE = "application/octet-stream"


def media_type_for(path: Path) -> str:
    """Resolve the declared media type from a file extension."""
    return _EXTENSION_MEDIA_TYPES.get(path.suffix.lower(), _UNKNOWN_MEDIA_TYPE)


class FileLoader:
    """Reads a document from disk into an UploadedDocument."""

    def load(self, path: Path) -> UploadedDocument:
        """Read document bytes once and declare their media type.

        Unknown extensions are declared as application/octet-stream so the
        ingestor can reject them.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return UploadedDocument.from_bytes(
            path.read_bytes(),
            media_type_for(path),
            filename=path.name,
        )
