"""Tests for ModelRecord validation and parsing."""

import json

import pytest
from pydantic import ValidationError

from modeldex.errors import RecordValidationError
from modeldex.models import (
    RECORD_FIELDS,
    ModelRecord,
    parse_records_json,
    record_json_schema,
    strip_code_fence,
    validate_records,
)


class TestModelRecord:
    def test_wire_names_map_to_attributes(self, translation_payload):
        record = ModelRecord.model_validate(translation_payload[0])

        assert record.long_description == "T1 described at length."
        assert record.primary_function == "Translation"
        assert record.website_url == "https://t1.example"
        assert record.pricing_model == "Free"

    def test_to_wire_uses_camel_case(self, translation_payload):
        record = ModelRecord.model_validate(translation_payload[0])
        assert record.to_wire() == translation_payload[0]

    def test_records_are_immutable(self, translation_records):
        with pytest.raises(ValidationError):
            translation_records[0].name = "changed"

    def test_equal_records_are_equal(self, translation_payload):
        a = ModelRecord.model_validate(translation_payload[0])
        b = ModelRecord.model_validate(dict(translation_payload[0]))
        assert a == b

    def test_schema_lists_six_required_strings(self):
        schema = record_json_schema()
        assert schema["required"] == list(RECORD_FIELDS)
        assert {p["type"] for p in schema["properties"].values()} == {"string"}


class TestValidateRecords:
    def test_preserves_order(self, make_payload):
        payload = [make_payload(n, "Free") for n in ["Z", "A", "M"]]
        assert [r.name for r in validate_records(payload)] == ["Z", "A", "M"]

    def test_empty_list(self):
        assert validate_records([]) == []

    @pytest.mark.parametrize("field", RECORD_FIELDS)
    def test_missing_field_rejects_all(self, translation_payload, field):
        del translation_payload[1][field]
        with pytest.raises(RecordValidationError):
            validate_records(translation_payload)

    def test_blank_name_rejected(self, translation_payload):
        translation_payload[0]["name"] = "  "
        with pytest.raises(RecordValidationError):
            validate_records(translation_payload)

    def test_number_not_coerced_to_string(self, translation_payload):
        translation_payload[0]["description"] = 3
        with pytest.raises(RecordValidationError):
            validate_records(translation_payload)

    def test_null_field_rejected(self, translation_payload):
        translation_payload[0]["websiteUrl"] = None
        with pytest.raises(RecordValidationError):
            validate_records(translation_payload)

    def test_non_list_rejected(self, translation_payload):
        with pytest.raises(RecordValidationError, match="Expected a JSON array"):
            validate_records({"models": translation_payload})

    def test_extra_keys_ignored(self, translation_payload):
        translation_payload[0]["rating"] = "5"
        assert len(validate_records(translation_payload)) == 2


class TestParseRecordsJson:
    def test_plain_json(self, translation_payload):
        assert len(parse_records_json(json.dumps(translation_payload))) == 2

    def test_fenced_json(self, translation_payload):
        text = "Sure!\n```json\n" + json.dumps(translation_payload) + "\n```\n"
        assert len(parse_records_json(text)) == 2

    def test_not_json(self):
        with pytest.raises(RecordValidationError, match="not valid JSON"):
            parse_records_json("I could not find any models.")

    def test_strip_code_fence_without_language(self):
        assert strip_code_fence("```\n[]\n```") == "[]"
