"""Tests for the extraction contract validator."""

import pytest

from formease.extraction.exceptions import ExtractionValidationError, FailureKind
from formease.extraction.models import ExtractedRecord
from formease.extraction.validator import validate_and_build


def _valid_data(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "firstName": "John",
        "surname": "Doe",
        "address": "10 Elm St, Anytown",
        "postcode": "AN1 1AA",
        "email": "john@x.com",
        "favoriteTimeOfDay": "Morning",
    }
    data.update(overrides)
    return data


class TestValidPayloads:
    def test_builds_full_record(self) -> None:
        record = validate_and_build(_valid_data())
        assert record == ExtractedRecord(
            first_name="John",
            surname="Doe",
            address="10 Elm St, Anytown",
            postcode="AN1 1AA",
            email="john@x.com",
            favorite_time_of_day="Morning",
        )

    def test_all_empty_strings(self) -> None:
        data = {key: "" for key in _valid_data()}
        record = validate_and_build(data)
        assert record.is_empty

    def test_absent_keys_read_as_empty(self) -> None:
        record = validate_and_build({"email": "john@x.com"})
        assert record.email == "john@x.com"
        assert record.first_name == ""
        assert record.favorite_time_of_day == ""

    def test_values_are_trimmed(self) -> None:
        record = validate_and_build(_valid_data(firstName="  John \n"))
        assert record.first_name == "John"

    @pytest.mark.parametrize("value", ["Morning", "Afternoon", "Evening", "Night"])
    def test_accepts_each_time_of_day(self, value: str) -> None:
        record = validate_and_build(_valid_data(favoriteTimeOfDay=value))
        assert record.favorite_time_of_day == value

    def test_normalizes_time_of_day_case(self) -> None:
        record = validate_and_build(_valid_data(favoriteTimeOfDay="night"))
        assert record.favorite_time_of_day == "Night"

    def test_whitespace_time_of_day_is_empty(self) -> None:
        record = validate_and_build(_valid_data(favoriteTimeOfDay="  "))
        assert record.favorite_time_of_day == ""


class TestSchemaViolations:
    def test_time_of_day_outside_enumeration(self) -> None:
        with pytest.raises(ExtractionValidationError, match="favoriteTimeOfDay") as exc_info:
            validate_and_build(_valid_data(favoriteTimeOfDay="Dawn"))
        assert exc_info.value.kind is FailureKind.SCHEMA_VIOLATION

    def test_null_value(self) -> None:
        with pytest.raises(ExtractionValidationError, match="'surname' must be a string"):
            validate_and_build(_valid_data(surname=None))

    def test_numeric_value(self) -> None:
        with pytest.raises(ExtractionValidationError, match="'postcode' must be a string"):
            validate_and_build(_valid_data(postcode=12345))

    def test_nested_object_value(self) -> None:
        with pytest.raises(ExtractionValidationError, match="'address' must be a string"):
            validate_and_build(_valid_data(address={"street": "10 Elm St"}))

    def test_unknown_field(self) -> None:
        with pytest.raises(ExtractionValidationError, match="phone"):
            validate_and_build(_valid_data(phone="555-0100"))
