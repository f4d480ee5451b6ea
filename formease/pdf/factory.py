from typing import ClassVar

from formease.pdf.base import BasePdfExtractor
from formease.pdf.pdfplumber_adapter import PdfPlumberAdapter
from formease.pdf.pymupdf_adapter import PyMuPdfAdapter

FILE_MODE = "file"
TEXT_MODE = "text"


class PdfExtractorFactory:
    """Picks the PDF renderer a document mode needs.

    In ``file`` mode PDFs travel to the backend as file parts and nothing is
    rendered locally. In ``text`` mode the chosen engine renders them to
    inline text.
    """

    DOCUMENT_MODES: ClassVar[tuple[str, ...]] = (FILE_MODE, TEXT_MODE)
    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        PdfPlumberAdapter.engine: PdfPlumberAdapter,
        PyMuPdfAdapter.engine: PyMuPdfAdapter,
    }

    @classmethod
    def for_document_mode(cls, mode: str, engine: str) -> BasePdfExtractor | None:
        """Return the renderer for ``mode``, or None when PDFs are sent as files.

        Raises:
            ValueError: for an unknown mode, or an unknown engine in text mode.
        """
        mode = mode.lower()
        if mode not in cls.DOCUMENT_MODES:
            raise ValueError(
                f"Unknown extraction document mode '{mode}'. "
                f"Choose from: {list(cls.DOCUMENT_MODES)}"
            )
        if mode == FILE_MODE:
            return None

        engine = engine.lower()
        adapter_cls = cls.ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}")
        return adapter_cls()
