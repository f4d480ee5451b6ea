import io
import json
from unittest.mock import MagicMock

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

JOHN_DOE_TEXT = (
    "My name is John Doe, I live at 10 Elm St, Anytown, AN1 1AA. "
    "My email is john@x.com. I love sunrises."
)

JOHN_DOE_RESPONSE = {
    "firstName": "John",
    "surname": "Doe",
    "address": "10 Elm St, Anytown",
    "postcode": "AN1 1AA",
    "email": "john@x.com",
    "favoriteTimeOfDay": "Morning",
}

EMPTY_RESPONSE = {key: "" for key in JOHN_DOE_RESPONSE}


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "My name is John Doe")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def john_doe_client() -> MagicMock:
    """Fake extraction client answering with the John Doe record."""
    client = MagicMock()
    client.create_chat_completion.return_value = json.dumps(JOHN_DOE_RESPONSE)
    return client


@pytest.fixture()
def empty_client() -> MagicMock:
    """Fake extraction client that finds nothing."""
    client = MagicMock()
    client.create_chat_completion.return_value = json.dumps(EMPTY_RESPONSE)
    return client


@pytest.fixture()
def john_doe_text() -> str:
    return JOHN_DOE_TEXT


@pytest.fixture()
def john_doe_response() -> dict[str, str]:
    return dict(JOHN_DOE_RESPONSE)
