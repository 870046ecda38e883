"""
FixedDecimal — Pydantic тип поля для Fixed

Позволяет объявлять поля моделей как Fixed:

    class Quote(BaseModel):
        price: FixedDecimal

Вход: Fixed, str (грамматика Fixed), int, float.
Выход в JSON режиме: полная запись с 8 знаками, в кавычках (pydantic пишет
пользовательские скаляры строками). В python режиме остаётся Fixed.

Поле модели — граница системы, поэтому fatal нарушения диапазона
(отрицательное число, переполнение) превращаются в ValidationError.
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, SerializationInfo, WithJsonSchema

from src.core.math.fixed_errors import FixedRangeError
from src.core.math.fixed_point import Fixed

# Строковая ветка контракта contracts/schema/fixed_decimal.json
FIXED_STRING_PATTERN = r"^(NaN|[0-9]{1,10}(\.[0-9]*)?|\.[0-9]+)$"


def coerce_fixed(value: Any) -> Fixed:
    """
    Приведение входного значения к Fixed.

    Raises:
        ValueError: Значение не приводится к Fixed или вне диапазона
    """
    if isinstance(value, Fixed):
        return value
    # bool — подкласс int, но не число в смысле домена
    if isinstance(value, bool):
        raise ValueError("bool is not a fixed-point value")

    try:
        if isinstance(value, int):
            return Fixed.from_int(value)
        if isinstance(value, float):
            return Fixed.from_float(value)
    except FixedRangeError as e:
        raise ValueError(str(e)) from e

    if isinstance(value, str):
        return Fixed.from_string(value)

    raise ValueError(f"cannot convert {type(value).__name__} to a fixed-point value")


def serialize_fixed(value: Fixed, info: SerializationInfo) -> Any:
    """Полная запись в JSON режиме, сам Fixed в python режиме."""
    if info.mode_is_json():
        return value.padded()
    return value


FixedDecimal = Annotated[
    Fixed,
    PlainValidator(coerce_fixed),
    PlainSerializer(serialize_fixed, return_type=Any),
    WithJsonSchema(
        {
            "type": "string",
            "pattern": FIXED_STRING_PATTERN,
            "description": "Non-negative fixed-point decimal, 8 fractional digits",
        }
    ),
]
