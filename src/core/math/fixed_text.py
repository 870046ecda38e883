"""
Fixed Text — разбор и форматирование scaled value

Чистые функции над внутренним представлением (int), без зависимости от
класса Fixed:
- parse_scaled: строка → scaled value (или NAN_BITS)
- format_padded: scaled value → полная запись с N_PLACES дробными знаками
- format_canonical: полная запись без хвостовых нулей
- format_n: запись с фиксированным числом знаков (truncation, не rounding)

ГРАММАТИКА:
    [0-9]*(\\.[0-9]*)?   — хотя бы одна цифра
    NaN                  — sentinel
    [0-9]+\\.?[0-9]*[eE][+-]?[0-9]+ — разбирается через float
                         (также .[0-9]+ перед экспонентой)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Лишние дробные знаки отбрасываются, НЕ округляются
2. Отрицательный знак всегда ошибка (а не отрицательное значение)
3. Текстовый ввод никогда не приводит к fatal ошибке
"""

import math
import re

from src.core.math.fixed_constants import (
    MAX_FLOAT,
    MAX_INTEGER_PART,
    N_PLACES,
    NAN_BITS,
    SCALE,
    ZEROS,
)
from src.core.math.fixed_errors import FixedParseError

_DIGITS = re.compile(r"[0-9]*")
_EXPONENT_LITERAL = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)[eE][+-]?[0-9]+")
_INTEGER_DIGITS = len(str(MAX_INTEGER_PART))

NAN_LITERAL = "NaN"


# =============================================================================
# РАЗБОР
# =============================================================================


def scaled_from_float(value: float) -> int:
    """
    Перевод float в scaled value усечением к нулю.

    Проверка диапазона — ответственность вызывающего кода.
    Наследует ошибку округления double для длинных значений.
    """
    return int(value * float(SCALE))


def parse_scaled(text: str) -> int:
    """
    Разбор строки в scaled value.

    Args:
        text: Строка по грамматике модуля

    Returns:
        scaled value, либо NAN_BITS для литерала "NaN"

    Raises:
        FixedParseError: Некорректный синтаксис, знак минус или
            целая часть больше MAX_INTEGER_PART

    Examples:
        >>> parse_scaled("123.456")
        12345600000
        >>> parse_scaled(".1")
        10000000
        >>> parse_scaled("1.123456789")
        112345678
    """
    if text.startswith("-"):
        raise FixedParseError("negative number", text=text)

    if "e" in text or "E" in text:
        return _parse_exponent(text)

    if text == NAN_LITERAL:
        return NAN_BITS

    int_part, _, frac_part = text.partition(".")
    if not (int_part or frac_part):
        raise FixedParseError(f"invalid syntax: {text!r}", text=text)
    if not (_DIGITS.fullmatch(int_part) and _DIGITS.fullmatch(frac_part)):
        raise FixedParseError(f"invalid syntax: {text!r}", text=text)

    # Ведущие нули не значимы; длина проверяется до int()
    int_part = int_part.lstrip("0")
    if len(int_part) > _INTEGER_DIGITS:
        raise FixedParseError("significand too large", text=text)

    integer = int(int_part) if int_part else 0
    if integer > MAX_INTEGER_PART:
        raise FixedParseError("significand too large", text=text)

    # Паддинг до N_PLACES и усечение лишней точности
    fraction = int((frac_part + ZEROS)[:N_PLACES])

    return integer * SCALE + fraction


def _parse_exponent(text: str) -> int:
    """Разбор записи с экспонентой через float."""
    if not _EXPONENT_LITERAL.fullmatch(text):
        raise FixedParseError(f"invalid syntax: {text!r}", text=text)

    try:
        value = float(text)
    except ValueError:
        raise FixedParseError(f"invalid syntax: {text!r}", text=text) from None

    if not math.isfinite(value) or value >= MAX_FLOAT:
        raise FixedParseError("significand too large", text=text)

    return scaled_from_float(value)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_padded(fp: int) -> tuple[str, int]:
    """
    Полная запись scaled value с ровно N_PLACES дробными знаками.

    Args:
        fp: scaled value (или NAN_BITS)

    Returns:
        (строка, позиция десятичной точки); для NaN позиция равна -1

    Examples:
        >>> format_padded(0)
        ('0.00000000', 1)
        >>> format_padded(12345600000)
        ('123.45600000', 3)
    """
    if fp == NAN_BITS:
        return NAN_LITERAL, -1

    integer, fraction = divmod(fp, SCALE)
    text = f"{integer}.{fraction:0{N_PLACES}d}"
    return text, len(text) - N_PLACES - 1


def format_canonical(fp: int) -> str:
    """
    Каноническая запись: без хвостовых нулей дробной части.

    Если после точки ничего не осталось, точка тоже удаляется.

    Examples:
        >>> format_canonical(12345600000)
        '123.456'
        >>> format_canonical(100 * 10**8)
        '100'
    """
    text, point = format_padded(fp)
    if point == -1:
        return text

    text = text.rstrip("0")
    if text.endswith("."):
        return text[:-1]
    return text


def format_n(fp: int, decimals: int) -> str:
    """
    Запись с ровно `decimals` дробными знаками (усечение, не округление).

    Args:
        fp: scaled value
        decimals: Число дробных знаков, 0..N_PLACES

    Raises:
        ValueError: Если decimals вне [0, N_PLACES]

    Examples:
        >>> format_n(112300000, 2)
        '1.12'
        >>> format_n(110000000, 0)
        '1'
    """
    if not 0 <= decimals <= N_PLACES:
        raise ValueError(f"decimals must be in [0, {N_PLACES}], got {decimals}")

    text, point = format_padded(fp)
    if point == -1:
        return text
    if decimals == 0:
        return text[:point]
    return text[: point + decimals + 1]
