"""
Contract Module

Structured (JSON) кодирование Fixed и его JSON Schema контракт.
"""

from .fixed_json import (
    dumps,
    loads,
    marshal_json,
    unmarshal_json,
)
from .validators import (
    SCHEMA_PATH,
    FixedDecimalValidator,
    decode_fixed_decimal,
    load_schema,
    validate_fixed_decimal,
)

__all__ = [
    # Classes
    "FixedDecimalValidator",
    # Constants
    "SCHEMA_PATH",
    # Functions
    "load_schema",
    "validate_fixed_decimal",
    "decode_fixed_decimal",
    "marshal_json",
    "unmarshal_json",
    "dumps",
    "loads",
]
