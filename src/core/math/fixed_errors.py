"""
Fixed Errors — иерархия исключений fixed-point типа

Два класса ошибок, которые нельзя смешивать:

1. Recoverable (FixedParseError, FixedDecodeError):
   некорректный текст, знак минус, слишком большая целая часть,
   обрезанный или битый binary/JSON поток. Наследуют ValueError.

2. Fatal (FixedRangeError и наследники):
   переполнение при сложении/умножении, вычитание большего из меньшего,
   построение из float вне диапазона. Это нарушение контракта диапазона,
   а не значение; NaN в этих случаях НЕ возвращается.
"""


class FixedPointError(Exception):
    """Базовый класс ошибок fixed-point типа."""

    pass


# =============================================================================
# RECOVERABLE
# =============================================================================


class FixedParseError(FixedPointError, ValueError):
    """
    Текст не может быть разобран как fixed-point значение.

    Attributes:
        text: Исходная строка
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class FixedDecodeError(FixedPointError, ValueError):
    """
    Ошибка декодирования binary (varint) или structured (JSON token) формата.

    Attributes:
        token: Исходный токен (для JSON; bytes, если он не декодируется
            как UTF-8), None для binary
    """

    def __init__(self, message: str, token: str | bytes | None = None):
        super().__init__(message)
        self.token = token


# =============================================================================
# FATAL
# =============================================================================


class FixedRangeError(FixedPointError, ArithmeticError):
    """
    Критическое нарушение диапазона [0, MAX].

    Вызывающий код должен заранее проверять величины, если ему нужна
    graceful degradation. Ловить допустимо только на границе системы.
    """

    pass


class FixedOverflowError(FixedRangeError, OverflowError):
    """Результат превышает максимальное представимое значение."""

    pass


class FixedNegativeError(FixedRangeError):
    """Результат или вход отрицательный (отрицательные числа не поддерживаются)."""

    pass
