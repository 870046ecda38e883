"""
Core fixed-point decimal type, its codecs and contracts.

- math/      : Fixed value type, text format, varint
- contracts/ : JSON token encoding and JSON Schema contract
- domain/    : pydantic field type
"""
