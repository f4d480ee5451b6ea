"""Validates parsed provider JSON against the six-field extraction contract."""

from typing import Any

from formease.extraction.exceptions import ExtractionValidationError
from formease.extraction.models import CONTRACT_FIELDS, CONTRACT_KEYS, ExtractedRecord, TimeOfDay

_TIME_OF_DAY_FIELD = "favoriteTimeOfDay"
_TIME_OF_DAY_BY_LOWER = {t.value.lower(): t.value for t in TimeOfDay}


def validate_and_build(data: dict[str, Any]) -> ExtractedRecord:
    """Validate a parsed response and build an ExtractedRecord.

    Absent keys are read as empty strings. Values are trimmed and the time of
    day is normalized to its canonical spelling.

    Raises:
        ExtractionValidationError: on unknown keys, non-string values, or a
            time of day outside the allowed values.
    """
    _reject_unknown_fields(data)
    values = {attr: _build_string(data.get(key, ""), key) for attr, key in CONTRACT_FIELDS}
    values["favorite_time_of_day"] = _build_time_of_day(values["favorite_time_of_day"])
    return ExtractedRecord(**values)


def _reject_unknown_fields(data: dict[str, Any]) -> None:
    unknown = sorted(set(data) - set(CONTRACT_KEYS))
    if unknown:
        raise ExtractionValidationError(f"Unexpected fields in response: {unknown}")


def _build_string(raw: Any, key: str) -> str:
    if not isinstance(raw, str):
        raise ExtractionValidationError(
            f"'{key}' must be a string, got {type(raw).__name__}"
        )
    return raw.strip()


def _build_time_of_day(raw: str) -> str:
    if not raw:
        return ""
    canonical = _TIME_OF_DAY_BY_LOWER.get(raw.lower())
    if canonical is None:
        raise ExtractionValidationError(
            f"'{_TIME_OF_DAY_FIELD}' must be one of "
            f"{[t.value for t in TimeOfDay]} or empty, got {raw!r}"
        )
    return canonical
