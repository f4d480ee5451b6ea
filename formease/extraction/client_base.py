from abc import ABC, abstractmethod

from formease.ingestion.models import EncodedPayload


class BaseExtractionClient(ABC):
    """Contract for provider-specific extraction AI clients."""

    @abstractmethod
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
        """Submit the instruction and document, return the provider response text."""
