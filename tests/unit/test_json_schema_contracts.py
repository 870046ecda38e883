"""
Tests for JSON Schema Contract Validators

Тестирование контракта fixed_decimal:
- Валидность самой схемы
- Валидация правильных значений (null, число, строка)
- Детекция нарушений (отрицательные, вне диапазона, неверный тип/синтаксис)
- Интеграция с marshal_json и декодирование принятых значений
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SCHEMA_PATH,
    FixedDecimalValidator,
    decode_fixed_decimal,
    load_schema,
    loads,
    marshal_json,
    validate_fixed_decimal,
)
from src.core.math.fixed_point import MAX, ONE, ZERO, Fixed


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def validator():
    """Валидатор fixed_decimal."""
    return FixedDecimalValidator()


# =============================================================================
# SCHEMA
# =============================================================================


class TestLoadSchema:
    """Тесты загрузки схемы"""

    def test_load_schema(self) -> None:
        schema = load_schema()
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["title"] == "FixedDecimal"

    def test_schema_cached(self) -> None:
        assert load_schema(SCHEMA_PATH) is load_schema(SCHEMA_PATH)

    def test_missing_schema(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_schema(tmp_path / "does_not_exist.json")

    def test_invalid_schema(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"type": 5}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            load_schema(path)


# =============================================================================
# VALID DATA
# =============================================================================

VALID_DATA = [None, 0, 1, 1.5, 9999999999.9999, "0", "123.456", ".5", "1.", "NaN", "9999999999.99999999"]


class TestValidValues:
    """Допустимые structured значения"""

    @pytest.mark.parametrize("data", VALID_DATA)
    def test_valid(self, validator, data) -> None:
        validator.validate(data)
        assert validator.is_valid(data)

    @pytest.mark.parametrize("data", VALID_DATA)
    def test_valid_data_decodes(self, data) -> None:
        """Всё, что принимает контракт, декодируется в Fixed"""
        if isinstance(data, str):
            assert isinstance(Fixed.from_string(data), Fixed)
        else:
            decoded = loads(json.dumps(data))
            assert decoded is None or isinstance(decoded, Fixed)

    @pytest.mark.parametrize("value", [ZERO, ONE, Fixed.from_string("12345678.12345678")])
    def test_marshalled_token(self, value: Fixed) -> None:
        """Токен marshal_json после json.loads соответствует схеме"""
        validate_fixed_decimal(json.loads(marshal_json(value)))

    def test_max_as_string(self) -> None:
        """Токен MAX через float округляется до 1e10, строкой проходит"""
        validate_fixed_decimal(MAX.padded())
        assert not FixedDecimalValidator().is_valid(json.loads(marshal_json(MAX)))


# =============================================================================
# INVALID DATA
# =============================================================================


class TestInvalidValues:
    """Нарушения контракта"""

    @pytest.mark.parametrize(
        "data",
        [-1, -0.5, 1e10, 10000000000, 1e11, "-1", "abc", ".", "", "12345678901", True, [1], {"value": 1}],
    )
    def test_invalid(self, validator, data) -> None:
        assert not validator.is_valid(data)
        with pytest.raises(ValidationError):
            validate_fixed_decimal(data)

    def test_iter_errors(self, validator) -> None:
        errors = list(validator.iter_errors("abc"))
        assert len(errors) == 1


# =============================================================================
# DECODE
# =============================================================================


class TestDecode:
    """Валидация с декодированием в Fixed"""

    def test_null(self) -> None:
        assert decode_fixed_decimal(None) is None

    def test_number_and_string_agree(self) -> None:
        assert decode_fixed_decimal(1.5).equal(Fixed.from_string("1.5"))
        assert decode_fixed_decimal("1.5").equal(Fixed.from_string("1.5"))
        assert decode_fixed_decimal(7).equal(Fixed.from_int(7))

    def test_small_number_in_exponent_form(self) -> None:
        """json.dumps(1e-07) даёт '1e-07'"""
        assert decode_fixed_decimal(1e-07).original() == 10

    def test_string_max(self) -> None:
        assert decode_fixed_decimal("9999999999.99999999").equal(MAX)

    def test_nan_string(self) -> None:
        assert decode_fixed_decimal("NaN").is_nan()

    def test_invalid_rejected_before_decode(self) -> None:
        with pytest.raises(ValidationError):
            decode_fixed_decimal(10000000000)
