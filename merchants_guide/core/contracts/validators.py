"""
JSON Schema Contract Validators

Контракты описывают данные, которые Merchant's Guide отдаёт наружу.
Сейчас это одна схема:
- transcript_record.json — запись JSON-транскрипта сессии (режим --json CLI)

Схемы поставляются внутри пакета (schema/ рядом с модулем) и читаются через
importlib.resources, поэтому работают и из обычной установки, и из editable.
Диалект определяется по ключу $schema; без него используется Draft 2020-12.
"""

import json
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match
from jsonschema.validators import validator_for


DEFAULT_DIALECT = Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем с кэшем и meta-validation.

    Args:
        schema_dir: Каталог со схемами (по умолчанию schema/ внутри пакета)
    """

    def __init__(self, schema_dir: Union[Path, None] = None):
        self._root = schema_dir if schema_dir is not None else files(__package__) / "schema"
        if not self._root.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._root}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения ('transcript_record').

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если схема не проходит meta-validation своего диалекта
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        resource = self._root / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")
        schema = json.loads(resource.read_text(encoding="utf-8"))

        try:
            validator_for(schema, default=DEFAULT_DIALECT).check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка данных против одной схемы.

    validate() поднимает самую релевантную ошибку (best_match), а не первую
    попавшуюся; error_messages() собирает все ошибки в виде 'path: message'.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        dialect = validator_for(self.schema, default=DEFAULT_DIALECT)
        self.validator = dialect(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение схемы
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения схемы, отсортированные по пути в документе."""
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))):
            path = "/".join(str(p) for p in error.absolute_path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return messages


class TranscriptRecordValidator(ContractValidator):
    """Валидатор для transcript_record контракта."""

    def __init__(self):
        super().__init__("transcript_record")


def validate_transcript_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если запись не соответствует transcript_record.json
    """
    TranscriptRecordValidator().validate(data)
