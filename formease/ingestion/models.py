import base64
import binascii
from dataclasses import dataclass

PDF_MEDIA_TYPE = "application/pdf"
TEXT_MEDIA_TYPE = "text/plain"
SUPPORTED_MEDIA_TYPES = frozenset({PDF_MEDIA_TYPE, TEXT_MEDIA_TYPE})

MAX_UPLOAD_BYTES = 5 * 1024 * 1024

_DATA_URI_PREFIX = "data:"
_BASE64_MARKER = ";base64"


@dataclass(frozen=True)
class UploadedDocument:
    """A user-selected file as received from the document picker."""

    content: bytes
    media_type: str
    size_bytes: int
    filename: str = ""

    @classmethod
    def from_bytes(
        cls, content: bytes, media_type: str, filename: str = ""
    ) -> "UploadedDocument":
        return cls(
            content=content,
            media_type=media_type,
            size_bytes=len(content),
            filename=filename,
        )


@dataclass(frozen=True)
class EncodedPayload:
    """Document bytes as a self-describing base64 data URI."""

    media_type: str
    data: str

    @property
    def tag(self) -> str:
        return f"{self.media_type}{_BASE64_MARKER}"

    @property
    def data_uri(self) -> str:
        return f"{_DATA_URI_PREFIX}{self.tag},{self.data}"

    def decode(self) -> bytes:
        return base64.b64decode(self.data, validate=True)

    def __str__(self) -> str:
        return self.data_uri

    @classmethod
    def encode(cls, content: bytes, media_type: str) -> "EncodedPayload":
        return cls(
            media_type=media_type,
            data=base64.b64encode(content).decode("ascii"),
        )

    @classmethod
    def from_data_uri(cls, uri: str) -> "EncodedPayload":
        """Parse a ``data:<mediaType>[;param=value]*;base64,<data>`` string.

        Media type parameters such as ``name=cv.pdf`` are dropped.

        Raises:
            ValueError: if the string is not a base64 data URI.
        """
        if not uri.startswith(_DATA_URI_PREFIX):
            raise ValueError("Data URI must start with 'data:'")
        header, sep, data = uri[len(_DATA_URI_PREFIX):].partition(",")
        if not sep:
            raise ValueError("Data URI is missing the ',' separator")
        tokens = [token.strip() for token in header.split(";")]
        if len(tokens) < 2 or tokens[-1].lower() != _BASE64_MARKER.lstrip(";"):
            raise ValueError("Data URI must use base64 encoding")
        media_type = tokens[0].lower()
        if not media_type:
            raise ValueError("Data URI is missing a media type")
        try:
            base64.b64decode(data, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Data URI payload is not valid base64: {exc}") from exc
        return cls(media_type=media_type, data=data)
