"""
JSON Schema контракты сериализованных дробей

Схемы (tokenmath/core/contracts/schema/):
- fraction.json ({"isFraction", "numeratorStr", "denominatorStr"})
- percent.json  (fraction + {"isPercent": true})

Схемы загружаются и проходят meta-validation один раз при импорте;
валидаторы Draft 2020-12 переиспользуются всеми вызовами from_object.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Mapping

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем из каталога (по умолчанию schema/ внутри пакета).

    Загруженные схемы кэшируются по имени.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения ('fraction', 'percent').

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не проходит meta-validation Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator(self, schema_name: str) -> Draft202012Validator:
        """Готовый Draft202012Validator для схемы."""
        return Draft202012Validator(self.load_schema(schema_name))


_SCHEMA_LOADER = SchemaLoader()

FRACTION_VALIDATOR: Final[Draft202012Validator] = _SCHEMA_LOADER.validator("fraction")
PERCENT_VALIDATOR: Final[Draft202012Validator] = _SCHEMA_LOADER.validator("percent")


# =============================================================================
# VALIDATION
# =============================================================================


def validate_fraction_object(data: Mapping[str, Any]) -> None:
    """
    Проверка dict, из которого строится Fraction.

    Raises:
        jsonschema.ValidationError: Первое найденное нарушение схемы fraction
    """
    FRACTION_VALIDATOR.validate(data)


def validate_percent_object(data: Mapping[str, Any]) -> None:
    """
    Проверка dict с тегом isPercent, из которого строится Percent.

    Raises:
        jsonschema.ValidationError: Первое найденное нарушение схемы percent
    """
    PERCENT_VALIDATOR.validate(data)
