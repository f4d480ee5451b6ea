import json
from dataclasses import dataclass, field
from pathlib import Path

from formease.extraction.exceptions import ExtractionError
from formease.extraction.models import CONTRACT_KEYS

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"
_SCHEMA_PLACEHOLDER = "{json_schema}"

SYSTEM_PROMPT = "You are a highly-trained data extraction model."


@dataclass(frozen=True)
class ExtractionPrompt:
    """Instruction template and response schema sent with every document.

    The schema is checked against the record contract when loaded, so an
    edited schema file that drops, renames or loosens a field is refused
    before any backend call is made.
    """

    template: str
    schema_text: str
    schema: dict[str, object] = field(repr=False)
    system_prompt: str = SYSTEM_PROMPT

    @classmethod
    def load(
        cls,
        template_path: Path | None = None,
        schema_path: Path | None = None,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> "ExtractionPrompt":
        """Load and check the bundled (or custom) prompt files.

        Raises:
            ExtractionError: if a file cannot be read, the template lacks the
                ``{json_schema}`` placeholder, or the schema does not describe
                exactly the six contract fields.
        """
        template_path = template_path or _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
        template = _read(template_path, "prompt template")
        if _SCHEMA_PLACEHOLDER not in template:
            raise ExtractionError(
                f"Prompt template must contain the {_SCHEMA_PLACEHOLDER} placeholder"
            )

        schema_path = schema_path or _DEFAULT_PROMPT_DIR / "extraction_schema.json"
        schema_text = _read(schema_path, "JSON schema")
        try:
            schema = json.loads(schema_text)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"JSON schema is not valid JSON: {exc}") from exc
        _check_schema(schema)

        return cls(
            template=template,
            schema_text=schema_text,
            schema=schema,
            system_prompt=system_prompt,
        )

    def render(self) -> str:
        return self.template.replace(_SCHEMA_PLACEHOLDER, self.schema_text.strip())


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load {what}: {exc}") from exc


def _check_schema(schema: object) -> None:
    if not isinstance(schema, dict):
        raise ExtractionError("JSON schema must be an object")

    properties = schema.get("properties")
    if not isinstance(properties, dict) or set(properties) != set(CONTRACT_KEYS):
        raise ExtractionError(f"JSON schema properties must be exactly {list(CONTRACT_KEYS)}")

    required = schema.get("required")
    if not isinstance(required, list) or sorted(required) != sorted(CONTRACT_KEYS):
        raise ExtractionError("JSON schema must require every contract field")

    if schema.get("additionalProperties") is not False:
        raise ExtractionError("JSON schema must set additionalProperties to false")

    for key in CONTRACT_KEYS:
        field_schema = properties[key]
        if not isinstance(field_schema, dict) or field_schema.get("type") != "string":
            raise ExtractionError(f"JSON schema field '{key}' must be of type string")
