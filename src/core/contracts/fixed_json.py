"""
Fixed JSON — structured text кодирование Fixed

Формат токена:
- Fixed пишется как голое число с ровно 8 дробными знаками
  (например, 12345678.12345678), без кавычек
- NaN пишется как голый токен NaN. Это НЕ валидный strict JSON
  (модуль json его принимает, строгие парсеры — нет)
- На входе null не меняет значение (возвращается default)

Функции документа (dumps/loads) кодируют все числа документа как Fixed.
"""

import json
import logging
from typing import Any

from src.core.math.fixed_errors import FixedDecodeError, FixedParseError
from src.core.math.fixed_point import Fixed

logger = logging.getLogger(__name__)

NULL_TOKEN = "null"


# =============================================================================
# ТОКЕН
# =============================================================================


def marshal_json(value: Fixed) -> str:
    """
    Кодирование Fixed в JSON токен.

    Examples:
        >>> marshal_json(Fixed.from_string("1.5"))
        '1.50000000'
    """
    return value.padded()


def unmarshal_json(token: str | bytes, default: Fixed | None = None) -> Fixed | None:
    """
    Декодирование JSON токена.

    Args:
        token: Токен числа (str или bytes в UTF-8)
        default: Значение, возвращаемое для null

    Returns:
        Fixed, либо default для null

    Raises:
        FixedDecodeError: Токен не разбирается как Fixed
    """
    if isinstance(token, bytes):
        try:
            token = token.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FixedDecodeError(f"error decoding bytes {token!r}: {e}", token=token) from e
    token = token.strip()

    if token == NULL_TOKEN:
        return default

    try:
        return Fixed.from_string(token)
    except FixedParseError as e:
        logger.debug("cannot decode fixed-point token %r: %s", token, e)
        raise FixedDecodeError(f"error decoding string '{token}': {e}", token=token) from e


# =============================================================================
# ДОКУМЕНТ
# =============================================================================


def dumps(obj: Any) -> str:
    """
    Сериализация документа, в котором Fixed пишется голым токеном.

    Поддерживаются dict (ключи — строки), list, tuple, Fixed и любые
    значения, которые понимает json.dumps.
    """
    if isinstance(obj, Fixed):
        return marshal_json(obj)
    if isinstance(obj, dict):
        items = (f"{json.dumps(str(k))}: {dumps(v)}" for k, v in obj.items())
        return "{" + ", ".join(items) + "}"
    if isinstance(obj, (list, tuple)):
        return "[" + ", ".join(dumps(v) for v in obj) + "]"
    return json.dumps(obj)


def _parse_constant(token: str) -> Fixed:
    if token == "NaN":
        return unmarshal_json(token)
    raise FixedDecodeError(f"error decoding string '{token}': not a fixed-point value", token=token)


def loads(text: str | bytes) -> Any:
    """
    Разбор документа: каждое число и NaN декодируются как Fixed.

    null остаётся None.

    Raises:
        FixedDecodeError: Число документа не является допустимым Fixed
            (например, отрицательное)
        json.JSONDecodeError: Документ не является JSON
    """
    return json.loads(
        text,
        parse_float=unmarshal_json,
        parse_int=unmarshal_json,
        parse_constant=_parse_constant,
    )
