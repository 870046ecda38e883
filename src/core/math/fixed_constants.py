"""
Fixed Constants — параметры fixed-point формата 10.8

Единственное место, где задаётся формат числа:
- N_PLACES дробных знаков
- SCALE = 10 ** N_PLACES
- Зарезервированный bit pattern для NaN

Для другого числа знаков достаточно согласованно изменить N_PLACES, SCALE и
ZEROS. Поддерживается не более 18 значащих цифр (один pattern занят под NaN).
"""

from typing import Final

# =============================================================================
# ФОРМАТ
# =============================================================================

# Количество дробных знаков
N_PLACES: Final[int] = 8

# Масштаб: scaled value = value * SCALE
SCALE: Final[int] = 10**N_PLACES

# Паддинг дробной части
ZEROS: Final[str] = "0" * N_PLACES


# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

# Максимальное значение как double (округляется до 1e10)
MAX_FLOAT: Final[float] = 9999999999.99999999

# Максимальная целая часть
MAX_INTEGER_PART: Final[int] = 9_999_999_999

# Максимальный не-NaN scaled value
MAX_SCALED: Final[int] = 999_999_999_999_999_999

# Разрядность внутреннего представления
UINT64_MAX: Final[int] = 2**64 - 1

# NaN — единственный зарезервированный pattern (максимальный uint64)
NAN_BITS: Final[int] = UINT64_MAX


# =============================================================================
# VARINT
# =============================================================================

# Максимальная длина uvarint для 64-битного значения
MAX_VARINT_LEN64: Final[int] = 10
