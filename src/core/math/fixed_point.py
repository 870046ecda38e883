"""
Fixed Point — десятичное число с фиксированной точкой (10.8)

Замена float там, где важно точное десятичное представление (деньги,
измерения). Значение хранится как один scaled integer:

    scaled value = value * 10**8

Диапазон: [0, 9_999_999_999.99999999] плюс выделенный NaN.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательные числа НЕ поддерживаются: операция с отрицательным
   результатом — fatal FixedNegativeError, а не отрицательное значение
2. Не-NaN scaled value всегда в [0, MAX_SCALED]
3. NaN — ровно один bit pattern (2**64 - 1)
4. Значение immutable: каждая операция возвращает новый Fixed
5. NaN молча распространяется через add/mul/div (это "неизвестно", а не ошибка)
6. Переполнение — fatal FixedOverflowError, никогда не NaN

СРАВНЕНИЕ:
    cmp() — полный порядок, NaN == NaN и NaN больше любого значения
    equal() / == — всегда False, если хотя бы один операнд NaN
"""

import logging
import math
from typing import BinaryIO, Final

from src.core.math.fixed_constants import (
    MAX_FLOAT,
    MAX_SCALED,
    N_PLACES,
    NAN_BITS,
    SCALE,
)
from src.core.math.fixed_errors import (
    FixedDecodeError,
    FixedNegativeError,
    FixedOverflowError,
    FixedParseError,
    FixedRangeError,
)
from src.core.math.fixed_text import (
    format_canonical,
    format_n,
    format_padded,
    parse_scaled,
    scaled_from_float,
)
from src.core.math.varint import (
    decode_uvarint,
    encode_uvarint,
    read_uvarint,
    write_uvarint,
)

logger = logging.getLogger(__name__)


def _range_violation(error_cls: type[FixedRangeError], message: str) -> FixedRangeError:
    """Фиксация fatal нарушения диапазона в логе перед raise."""
    logger.error("fixed-point range violation: %s", message)
    return error_cls(message)


# =============================================================================
# FIXED
# =============================================================================


class Fixed:
    """
    Неотрицательное десятичное число с 8 знаками после точки.

    Прямой конструктор принимает сырой scaled value; в прикладном коде
    используются from_string / from_float / from_scaled_integer.
    """

    __slots__ = ("_fp",)

    def __init__(self, fp: int = 0):
        if isinstance(fp, bool) or not isinstance(fp, int):
            raise TypeError(f"scaled value must be int, got {type(fp).__name__}")
        if fp < 0:
            raise _range_violation(FixedNegativeError, f"negative scaled value {fp}")
        if fp != NAN_BITS and fp > MAX_SCALED:
            raise _range_violation(
                FixedOverflowError, f"scaled value {fp} outside [0, {MAX_SCALED}]"
            )
        object.__setattr__(self, "_fp", fp)

    def __setattr__(self, name, value):
        raise AttributeError("Fixed is immutable")

    def __delattr__(self, name):
        raise AttributeError("Fixed is immutable")

    def __reduce__(self):
        return (Fixed, (self._fp,))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> "Fixed":
        """
        Разбор строки.

        Лишние дробные знаки отбрасываются (без округления). Литерал "NaN"
        даёт NaN без ошибки. Запись с e/E разбирается как float.

        Raises:
            FixedParseError: Некорректный текст, знак минус, целая часть
                больше 9_999_999_999

        Examples:
            >>> str(Fixed.from_string("123.456"))
            '123.456'
            >>> str(Fixed.from_string("9999999999.12345678901234567890"))
            '9999999999.12345678'
        """
        return cls(parse_scaled(text))

    @classmethod
    def from_string_or_nan(cls, text: str) -> "Fixed":
        """Разбор строки; при ошибке возвращает NaN вместо исключения."""
        try:
            return cls.from_string(text)
        except FixedParseError as e:
            logger.debug("cannot parse %r as fixed-point: %s", text, e)
            return NAN

    @classmethod
    def from_float(cls, value: float) -> "Fixed":
        """
        Построение из float усечением на 8-м знаке.

        Наследует ошибку представления double: 0.1 → 0.1, но длинные
        значения могут потерять последний знак.

        Raises:
            FixedNegativeError: value < 0
            FixedOverflowError: value >= 9999999999.99999999
        """
        if math.isnan(value):
            return NAN
        if value < 0:
            raise _range_violation(FixedNegativeError, f"negative float {value}")
        if value >= MAX_FLOAT:
            raise _range_violation(FixedOverflowError, f"float {value} exceeds maximum")

        return cls(scaled_from_float(value))

    @classmethod
    def from_scaled_integer(cls, value: int, exponent: int) -> "Fixed":
        """
        Построение из целого с десятичной точкой на `exponent` знаков слева.

        При exponent > 8 лишние знаки отбрасываются.

        Examples:
            >>> str(Fixed.from_scaled_integer(123, 1))
            '12.3'
            >>> str(Fixed.from_scaled_integer(123456789012, 9))
            '123.45678901'
        """
        if value < 0 or exponent < 0:
            raise _range_violation(
                FixedNegativeError, f"negative scaled integer {value}e-{exponent}"
            )

        if exponent > N_PLACES:
            value //= 10 ** (exponent - N_PLACES)
            exponent = N_PLACES
        value *= 10 ** (N_PLACES - exponent)

        if value == NAN_BITS:
            return NAN
        if value > MAX_SCALED:
            raise _range_violation(
                FixedOverflowError, f"scaled integer {value} exceeds maximum"
            )
        return cls(value)

    @classmethod
    def from_int(cls, value: int) -> "Fixed":
        """Построение из целого числа (123 → 123)."""
        return cls.from_scaled_integer(value, 0)

    @classmethod
    def from_original(cls, raw: int) -> "Fixed":
        """Построение из сырого scaled value (123 → 0.00000123)."""
        return cls.from_scaled_integer(raw, N_PLACES)

    # -------------------------------------------------------------------------
    # Доступ к представлению
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        return self._fp == NAN_BITS

    def is_zero(self) -> bool:
        return self.equal(ZERO)

    def sign(self) -> int:
        """0 для NaN и нуля, иначе +1 (отрицательных значений не бывает)."""
        if self.is_nan():
            return 0
        return self.cmp(ZERO)

    def original(self) -> int:
        """Сырой scaled value, включая NaN pattern (для binary совместимости)."""
        return self._fp

    def as_scaled(self) -> int | None:
        """Scaled value или None для NaN."""
        if self.is_nan():
            return None
        return self._fp

    def to_float(self) -> float:
        if self.is_nan():
            return math.nan
        return float(self._fp) / float(SCALE)

    def uint(self) -> int:
        """Целая часть; 0 для NaN."""
        if self.is_nan():
            return 0
        return self._fp // SCALE

    def frac(self) -> float:
        """Дробная часть как float; nan для NaN."""
        if self.is_nan():
            return math.nan
        return float(self._fp % SCALE) / float(SCALE)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Fixed") -> "Fixed":
        """
        Сложение.

        Raises:
            FixedOverflowError: Сумма больше MAX
        """
        if self.is_nan() or other.is_nan():
            return NAN

        result = self._fp + other._fp
        if result > MAX_SCALED:
            raise _range_violation(FixedOverflowError, f"{self} + {other} overflows")
        return Fixed(result)

    def sub(self, other: "Fixed") -> "Fixed":
        """
        Вычитание.

        Порядок проверяется ДО распространения NaN: NaN - x даёт NaN,
        а x - NaN — fatal, так как NaN больше любого значения.

        Raises:
            FixedNegativeError: self < other
        """
        if self.less_than(other):
            raise _range_violation(FixedNegativeError, f"{self} - {other} is negative")
        if self.is_nan() or other.is_nan():
            return NAN
        return Fixed(self._fp - other._fp)

    def mul(self, other: "Fixed") -> "Fixed":
        """
        Умножение.

        Операнды раскладываются на целую и дробную части:
            intA*intB*scale + fracA*intB + intA*fracB + fracA*fracB // scale
        Остаток младше 8-го знака отбрасывается. Промежуточные значения
        не ограничены 64 битами, поэтому проверка переполнения точная.

        Raises:
            FixedOverflowError: Произведение больше MAX
        """
        if self.is_nan() or other.is_nan():
            return NAN

        int_a, frac_a = divmod(self._fp, SCALE)
        int_b, frac_b = divmod(other._fp, SCALE)

        result = (
            int_a * int_b * SCALE
            + frac_a * int_b
            + int_a * frac_b
            + (frac_a * frac_b) // SCALE
        )
        if result > MAX_SCALED:
            raise _range_violation(FixedOverflowError, f"{self} * {other} overflows")
        return Fixed(result)

    def div(self, other: "Fixed") -> "Fixed":
        """
        Деление через float.

        Точность не гарантируется до 8-го знака: результат строится через
        from_float (усечение, fatal при переполнении). 0 / 0 даёт NaN.

        Raises:
            FixedOverflowError: Результат больше MAX или деление x > 0 на ноль
        """
        if self.is_nan() or other.is_nan():
            return NAN

        if other._fp == 0:
            if self._fp == 0:
                return NAN
            raise _range_violation(FixedOverflowError, f"{self} / 0 overflows")

        return Fixed.from_float(self.to_float() / other.to_float())

    def round(self, n: int) -> "Fixed":
        """
        Округление half-up до n знаков после точки.

        При n >= 8 значение возвращается без изменений.

        Raises:
            ValueError: n < 0

        Examples:
            >>> str(Fixed.from_string("1.12345").round(4))
            '1.1235'
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        if self.is_nan():
            return NAN
        if n >= N_PLACES:
            return self

        pow10 = 10.0**n
        fraction = float(int(self.frac() * pow10 + 0.5)) / pow10
        return Fixed.from_float(float(self.uint()) + fraction)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def cmp(self, other: "Fixed") -> int:
        """
        Полный порядок.

        Returns:
            0 если равны (в том числе оба NaN),
            +1 если self больше (или только self NaN),
            -1 если self меньше (или только other NaN)
        """
        if self.is_nan() and other.is_nan():
            return 0
        if self.is_nan():
            return 1
        if other.is_nan():
            return -1

        if self._fp == other._fp:
            return 0
        if self._fp < other._fp:
            return -1
        return 1

    def equal(self, other: "Fixed") -> bool:
        """Равенство; False, если хотя бы один операнд NaN (используйте is_nan)."""
        if self.is_nan() or other.is_nan():
            return False
        return self.cmp(other) == 0

    def greater_than(self, other: "Fixed") -> bool:
        return self.cmp(other) == 1

    def greater_than_or_equal(self, other: "Fixed") -> bool:
        return self.cmp(other) >= 0

    def less_than(self, other: "Fixed") -> bool:
        return self.cmp(other) == -1

    def less_than_or_equal(self, other: "Fixed") -> bool:
        return self.cmp(other) <= 0

    # -------------------------------------------------------------------------
    # Текст
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Каноническая запись без хвостовых нулей."""
        return format_canonical(self._fp)

    def string_n(self, decimals: int) -> str:
        """Запись с ровно `decimals` знаками (усечение, не округление)."""
        return format_n(self._fp, decimals)

    def padded(self) -> str:
        """Полная запись с 8 дробными знаками ("NaN" для NaN)."""
        text, _ = format_padded(self._fp)
        return text

    # -------------------------------------------------------------------------
    # Binary
    # -------------------------------------------------------------------------

    def marshal_binary(self) -> bytes:
        """Varint сырого scaled value (1..10 байт)."""
        return encode_uvarint(self._fp)

    @classmethod
    def unmarshal_binary(cls, data: bytes) -> "Fixed":
        """
        Декодирование из varint.

        Raises:
            FixedDecodeError: Обрезанный/переполненный varint, значение вне
                диапазона или лишние байты после varint
        """
        value, n = decode_uvarint(data)
        if n != len(data):
            raise FixedDecodeError(f"{len(data) - n} trailing bytes after varint")
        return cls._from_decoded(value)

    def write_to(self, stream: BinaryIO) -> int:
        """Запись в поток; возвращает количество байт."""
        return write_uvarint(stream, self._fp)

    @classmethod
    def read_from(cls, stream: BinaryIO) -> "Fixed":
        """Чтение одного значения из потока."""
        return cls._from_decoded(read_uvarint(stream))

    @classmethod
    def _from_decoded(cls, value: int) -> "Fixed":
        if value == NAN_BITS:
            return NAN
        if value > MAX_SCALED:
            raise FixedDecodeError(f"decoded value {value} outside fixed-point range")
        return cls(value)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.div(other)

    def __round__(self, ndigits: int | None = None):
        if ndigits is None:
            # Протокол round(x): без ndigits результат — int
            if self.is_nan():
                raise ValueError("cannot convert NaN to integer")
            return int(self.round(0))
        return self.round(ndigits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __hash__(self) -> int:
        return hash(self._fp)

    def __bool__(self) -> bool:
        return self._fp != 0

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.uint()

    def __bytes__(self) -> bytes:
        return self.marshal_binary()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fixed({self.to_string()!r})"


# =============================================================================
# ИМЕНОВАННЫЕ КОНСТАНТЫ
# =============================================================================

NAN: Final[Fixed] = Fixed(NAN_BITS)
ZERO: Final[Fixed] = Fixed(0)
ONE: Final[Fixed] = Fixed(1 * SCALE)
TWO: Final[Fixed] = Fixed(2 * SCALE)
THREE: Final[Fixed] = Fixed(3 * SCALE)
FOUR: Final[Fixed] = Fixed(4 * SCALE)
FIVE: Final[Fixed] = Fixed(5 * SCALE)
SIX: Final[Fixed] = Fixed(6 * SCALE)
SEVEN: Final[Fixed] = Fixed(7 * SCALE)
EIGHT: Final[Fixed] = Fixed(8 * SCALE)
NINE: Final[Fixed] = Fixed(9 * SCALE)
TEN: Final[Fixed] = Fixed(10 * SCALE)
MAX: Final[Fixed] = Fixed(MAX_SCALED)
