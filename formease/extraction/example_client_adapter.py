"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from formease.extraction.client_base import BaseExtractionClient
from formease.extraction.models import CONTRACT_KEYS
from formease.ingestion.models import EncodedPayload


class ExampleClientAdapter(BaseExtractionClient):
    """Offline adapter that finds nothing in any document.

    No network calls. Useful for local development of the form flow.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, str]] = {key: "" for key in CONTRACT_KEYS}

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
        _ = model, temperature, system_prompt, user_prompt, document, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
