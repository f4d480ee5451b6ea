"""AI-powered personal details extractor."""

import json
import re
from pathlib import Path

from formease.extraction.base import BaseExtractor
from formease.extraction.client_base import BaseExtractionClient
from formease.extraction.exceptions import ExtractionValidationError
from formease.extraction.models import ExtractedRecord
from formease.extraction.prompt_loader import SYSTEM_PROMPT, ExtractionPrompt
from formease.extraction.validator import validate_and_build
from formease.ingestion.models import EncodedPayload
from formease.logging.logger import Log

# Markdown code fence with an optional language tag; the body may share a line with the fences.
_FENCED_REPLY = re.compile(r"^```[A-Za-z]*\s*(.*?)\s*(?:```)?$", re.DOTALL)


class Extractor(BaseExtractor):
    """Extracts a schema-conformant personal details record using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._prompt = ExtractionPrompt.load(
            template_path=prompt_template_path,
            schema_path=json_schema_path,
            system_prompt=system_prompt,
        )

    def extract(self, payload: EncodedPayload) -> ExtractedRecord:
        """Submit the document with the extraction instruction and validate the reply."""
        prompt = self._prompt.render()
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = self._call_ai(prompt, payload)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        record = validate_and_build(parsed)

        filled = sum(1 for value in record.to_contract_dict().values() if value)
        Log.info(f"Extraction complete: {filled} of 6 fields found")
        return record

    def _call_ai(self, prompt: str, payload: EncodedPayload) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._prompt.system_prompt,
            user_prompt=prompt,
            document=payload,
            json_schema=self._prompt.schema,
        )

    @staticmethod
    def _strip_fences(raw: str) -> str:
        cleaned = raw.strip()
        match = _FENCED_REPLY.match(cleaned)
        return match.group(1) if match else cleaned

    @classmethod
    def _parse_json(cls, raw: str) -> dict[str, object]:
        cleaned = cls._strip_fences(raw)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionValidationError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ExtractionValidationError("JSON response must be an object")
        return parsed
