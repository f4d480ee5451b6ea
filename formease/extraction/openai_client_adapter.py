import httpx
import openai

from formease.extraction.client_base import BaseExtractionClient
from formease.extraction.exceptions import ExtractionBackendError, UnreadableDocumentError
from formease.ingestion.models import PDF_MEDIA_TYPE, EncodedPayload
from formease.pdf.base import BasePdfExtractor
from formease.pdf.exceptions import PdfExtractionError


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction AI client adapter built on the OpenAI-compatible chat API.

    PDFs are attached as file content parts carrying the data URI. When a
    PDF renderer is configured (for providers without file inputs) the PDF
    text layer is sent inline instead. Plain text is always sent inline.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        pdf_extractor: BasePdfExtractor | None = None,
    ) -> None:
        self._api_key = api_key
        self._pdf_extractor = pdf_extractor
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        document: EncodedPayload,
        json_schema: dict[str, object],
    ) -> str:
        if not self._api_key:
            raise ExtractionBackendError("AI provider API key is missing")

        content = [{"type": "text", "text": user_prompt}, self._document_part(document)]
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "extracted_details",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": content},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionBackendError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ExtractionBackendError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ExtractionBackendError("AI returned no choices")
        message = response.choices[0].message.content
        if message is None:
            raise ExtractionBackendError("AI returned empty response")
        return message

    def _document_part(self, document: EncodedPayload) -> dict[str, object]:
        if document.media_type == PDF_MEDIA_TYPE and self._pdf_extractor is None:
            return {
                "type": "file",
                "file": {"filename": "document.pdf", "file_data": document.data_uri},
            }
        return {"type": "text", "text": f"DOCUMENT:\n---\n{self._document_text(document)}\n---"}

    def _document_text(self, document: EncodedPayload) -> str:
        raw = document.decode()
        if document.media_type == PDF_MEDIA_TYPE and self._pdf_extractor is not None:
            try:
                return self._pdf_extractor.extract(raw)
            except PdfExtractionError as exc:
                raise UnreadableDocumentError(str(exc)) from exc
        return raw.decode("utf-8", errors="replace")
