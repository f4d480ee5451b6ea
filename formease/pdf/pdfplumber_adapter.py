import io

import pdfplumber

from formease.pdf.base import BasePdfExtractor


class PdfPlumberAdapter(BasePdfExtractor):
    engine = "pdfplumber"

    def _page_texts(self, pdf_bytes: bytes) -> list[str]:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
