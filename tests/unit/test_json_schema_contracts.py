"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений enum и условных ограничений
- Интеграция с Pydantic моделью TranscriptRecord
"""

import json

import pytest
from jsonschema import ValidationError

from merchants_guide.core.contracts import (
    ContractValidator,
    SchemaLoader,
    TranscriptRecordValidator,
    validate_transcript_record,
)
from merchants_guide.core.domain import ErrorKind
from merchants_guide.session import RecordKind, TranscriptRecord


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_answer_record():
    """Валидная запись ответа."""
    return {
        "line": "how much is pish tegj glob glob ?",
        "kind": "answer",
        "output": "pish tegj glob glob is 42",
        "error_kind": None,
    }


@pytest.fixture
def valid_error_record():
    """Валидная запись ошибки."""
    return {
        "line": "glob is II",
        "kind": "error",
        "output": "'II' is not a roman numeral (use one of I V X L C D M)",
        "error_kind": "INVALID_SYMBOL",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader."""

    def test_load_schema(self):
        schema = SchemaLoader().load_schema("transcript_record")
        assert schema["title"] == "TranscriptRecord"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("transcript_record") is loader.load_schema("transcript_record")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_dialect_taken_from_schema_key(self, tmp_path):
        """Схема draft-07 проверяется по мета-схеме draft-07, а не 2020-12."""
        # 'items' в виде массива допустим в draft-07 и запрещён в 2020-12
        schema = {
            "$schema": "http://json-schema.org/draft-07/schema#",
            "type": "array",
            "items": [{"type": "string"}, {"type": "integer"}],
        }
        (tmp_path / "pair.json").write_text(json.dumps(schema), encoding="utf-8")
        loader = SchemaLoader(tmp_path)
        assert loader.load_schema("pair") == schema

        validator = ContractValidator("pair", loader=loader)
        assert validator.is_valid(["glob", 1])
        assert not validator.is_valid([1, "glob"])


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class TestContractValidator:
    """Тесты ContractValidator поверх произвольного каталога схем."""

    @pytest.fixture
    def loader(self, tmp_path):
        schema = {
            "type": "object",
            "properties": {
                "word": {"type": "string"},
                "value": {"type": "integer", "minimum": 1},
            },
            "required": ["word", "value"],
        }
        (tmp_path / "binding.json").write_text(json.dumps(schema), encoding="utf-8")
        return SchemaLoader(tmp_path)

    def test_error_messages_sorted_by_path(self, loader):
        validator = ContractValidator("binding", loader=loader)
        messages = validator.error_messages({"word": 5, "value": 0})
        assert len(messages) == 2
        assert messages[0].startswith("value: ")
        assert messages[1].startswith("word: ")

    def test_error_messages_root_path(self, loader):
        messages = ContractValidator("binding", loader=loader).error_messages({"word": "glob"})
        assert messages == ["<root>: 'value' is a required property"]

    def test_error_messages_empty_for_valid(self, loader):
        assert ContractValidator("binding", loader=loader).error_messages({"word": "glob", "value": 1}) == []

    def test_validate_raises_for_invalid(self, loader):
        with pytest.raises(ValidationError):
            ContractValidator("binding", loader=loader).validate({"word": "glob", "value": 0})


# =============================================================================
# TRANSCRIPT RECORD
# =============================================================================


class TestTranscriptRecordContract:
    """Тесты transcript_record контракта."""

    def test_valid_answer(self, valid_answer_record):
        validate_transcript_record(valid_answer_record)

    def test_valid_error(self, valid_error_record):
        validate_transcript_record(valid_error_record)

    def test_valid_statement(self):
        validate_transcript_record(
            {"line": "glob is I", "kind": "statement", "output": None, "error_kind": None}
        )

    def test_missing_required_field(self, valid_answer_record):
        del valid_answer_record["kind"]
        with pytest.raises(ValidationError):
            validate_transcript_record(valid_answer_record)

    def test_unknown_kind(self, valid_answer_record):
        valid_answer_record["kind"] = "shout"
        with pytest.raises(ValidationError):
            validate_transcript_record(valid_answer_record)

    def test_additional_property(self, valid_answer_record):
        valid_answer_record["extra"] = 1
        with pytest.raises(ValidationError):
            validate_transcript_record(valid_answer_record)

    def test_error_requires_error_kind(self, valid_error_record):
        valid_error_record["error_kind"] = None
        with pytest.raises(ValidationError):
            validate_transcript_record(valid_error_record)

    def test_answer_requires_output(self, valid_answer_record):
        valid_answer_record["output"] = None
        with pytest.raises(ValidationError):
            validate_transcript_record(valid_answer_record)

    def test_non_error_forbids_error_kind(self, valid_answer_record):
        valid_answer_record["error_kind"] = "INVALID_INPUT"
        assert not TranscriptRecordValidator().is_valid(valid_answer_record)
        assert list(TranscriptRecordValidator().iter_errors(valid_answer_record))

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_pydantic_record_dump_valid(self, kind):
        record = TranscriptRecord(
            line="x", kind=RecordKind.ERROR, output="message", error_kind=kind
        )
        validate_transcript_record(record.model_dump(mode="json"))
