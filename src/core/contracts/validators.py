"""
JSON Schema Contract Validators

Валидация structured (JSON) значений Fixed против контракта
contracts/schema/fixed_decimal.json. Использует библиотеку jsonschema.

Контракт описывает одно значение после json.loads: null, неотрицательное
число меньше 1e10 или строка в текстовой грамматике Fixed. Всё, что
принимает контракт, декодируется через FixedDecimalValidator.decode.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

from src.core.contracts.fixed_json import unmarshal_json
from src.core.math.fixed_point import Fixed

# Корень проекта (4 уровня вверх от этого файла)
SCHEMA_PATH = Path(__file__).parents[3] / "contracts" / "schema" / "fixed_decimal.json"


# =============================================================================
# SCHEMA
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(path: Path = SCHEMA_PATH) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (с кэшированием по пути).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной Draft 2020-12 схемой
    """
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e

    return schema


# =============================================================================
# VALIDATOR
# =============================================================================


class FixedDecimalValidator:
    """Валидатор одного structured значения Fixed."""

    def __init__(self, schema_path: Path = SCHEMA_PATH):
        self.schema = load_schema(schema_path)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def decode(self, data: Any) -> Fixed | None:
        """
        Валидация и декодирование значения в Fixed.

        Числа проходят тот же путь, что и в loads (через текст токена),
        строки разбираются как текст Fixed; null даёт None.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validate(data)
        if data is None:
            return None
        if isinstance(data, str):
            return Fixed.from_string(data)
        return unmarshal_json(json.dumps(data))


_FIXED_DECIMAL_VALIDATOR: FixedDecimalValidator | None = None


def _default_validator() -> FixedDecimalValidator:
    global _FIXED_DECIMAL_VALIDATOR
    if _FIXED_DECIMAL_VALIDATOR is None:
        _FIXED_DECIMAL_VALIDATOR = FixedDecimalValidator()
    return _FIXED_DECIMAL_VALIDATOR


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fixed_decimal(data: Any) -> None:
    """
    Валидация structured значения Fixed (результат json.loads).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _default_validator().validate(data)


def decode_fixed_decimal(data: Any) -> Fixed | None:
    """Валидация по контракту и декодирование в Fixed (None для null)."""
    return _default_validator().decode(data)
