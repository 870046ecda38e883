"""
Core math modules

Fixed-point decimal 10.8 и его примитивы: текстовый формат, varint.
"""

# Constants
from src.core.math.fixed_constants import (
    MAX_FLOAT,
    MAX_INTEGER_PART,
    MAX_SCALED,
    MAX_VARINT_LEN64,
    N_PLACES,
    NAN_BITS,
    SCALE,
    UINT64_MAX,
    ZEROS,
)

# Exceptions
from src.core.math.fixed_errors import (
    FixedDecodeError,
    FixedNegativeError,
    FixedOverflowError,
    FixedParseError,
    FixedPointError,
    FixedRangeError,
)

# Text
from src.core.math.fixed_text import (
    format_canonical,
    format_n,
    format_padded,
    parse_scaled,
)

# Varint
from src.core.math.varint import (
    decode_uvarint,
    encode_uvarint,
    read_uvarint,
    write_uvarint,
)

# Fixed
from src.core.math.fixed_point import (
    EIGHT,
    FIVE,
    FOUR,
    MAX,
    NAN,
    NINE,
    ONE,
    SEVEN,
    SIX,
    TEN,
    THREE,
    TWO,
    ZERO,
    Fixed,
)

__all__ = [
    # Constants
    "MAX_FLOAT",
    "MAX_INTEGER_PART",
    "MAX_SCALED",
    "MAX_VARINT_LEN64",
    "N_PLACES",
    "NAN_BITS",
    "SCALE",
    "UINT64_MAX",
    "ZEROS",
    # Exceptions
    "FixedDecodeError",
    "FixedNegativeError",
    "FixedOverflowError",
    "FixedParseError",
    "FixedPointError",
    "FixedRangeError",
    # Text
    "format_canonical",
    "format_n",
    "format_padded",
    "parse_scaled",
    # Varint
    "decode_uvarint",
    "encode_uvarint",
    "read_uvarint",
    "write_uvarint",
    # Fixed
    "Fixed",
    "NAN",
    "ZERO",
    "ONE",
    "TWO",
    "THREE",
    "FOUR",
    "FIVE",
    "SIX",
    "SEVEN",
    "EIGHT",
    "NINE",
    "TEN",
    "MAX",
]
