import re
from abc import ABC, abstractmethod
from typing import ClassVar

from formease.pdf.exceptions import PdfExtractionError

PAGE_SEPARATOR = "\n\n"

_INLINE_WHITESPACE = re.compile(r"[ \t\u00a0]+")
_BLANK_RUNS = re.compile(r"\n{3,}")


class BasePdfExtractor(ABC):
    """Renders a PDF's text layer as plain text for an inline prompt.

    Subclasses only read raw page texts; the shared ``extract`` turns them
    into one block the backend can read: inline whitespace collapsed, blank
    line runs squeezed, empty pages dropped, pages separated by a blank line.
    """

    engine: ClassVar[str]

    def extract(self, pdf_bytes: bytes) -> str:
        """Render ``pdf_bytes`` as prompt text.

        Returns:
            The normalized text, or ``""`` when the PDF has no text layer.

        Raises:
            PdfExtractionError: if the document cannot be opened or read.
        """
        try:
            pages = self._page_texts(pdf_bytes)
        except Exception as exc:
            raise PdfExtractionError(f"{self.engine} could not read document: {exc}") from exc
        return normalize_pages(pages)

    @abstractmethod
    def _page_texts(self, pdf_bytes: bytes) -> list[str]:
        """Return the raw text of every page, in order."""


def normalize_pages(pages: list[str]) -> str:
    rendered = []
    for page in pages:
        lines = [_INLINE_WHITESPACE.sub(" ", line).strip() for line in page.splitlines()]
        text = _BLANK_RUNS.sub("\n\n", "\n".join(lines)).strip()
        if text:
            rendered.append(text)
    return PAGE_SEPARATOR.join(rendered)
