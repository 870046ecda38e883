"""
Varint — unsigned LEB128 кодирование 64-битных значений

Единственная пара encoder/decoder для binary формата Fixed:
- 7 значащих бит на байт, старший бит — флаг продолжения
- little-endian порядок групп
- 1..MAX_VARINT_LEN64 байт, без framing и length prefix

Работает и над bytes, и над потоками (объекты с read(n) / write(b)).
"""

from typing import BinaryIO

from src.core.math.fixed_constants import MAX_VARINT_LEN64, UINT64_MAX
from src.core.math.fixed_errors import FixedDecodeError

_CONTINUATION = 0x80
_PAYLOAD = 0x7F


# =============================================================================
# ENCODE
# =============================================================================


def encode_uvarint(value: int) -> bytes:
    """
    Кодирование unsigned 64-битного значения в varint.

    Args:
        value: Значение в [0, 2**64 - 1]

    Returns:
        1..10 байт

    Raises:
        ValueError: Если значение вне диапазона uint64

    Examples:
        >>> encode_uvarint(1)
        b'\\x01'
        >>> encode_uvarint(300)
        b'\\xac\\x02'
    """
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"value must be in [0, 2**64 - 1], got {value}")

    out = bytearray()
    while value >= _CONTINUATION:
        out.append((value & _PAYLOAD) | _CONTINUATION)
        value >>= 7
    out.append(value)
    return bytes(out)


def write_uvarint(stream: BinaryIO, value: int) -> int:
    """
    Запись varint в поток.

    Returns:
        Количество записанных байт
    """
    data = encode_uvarint(value)
    stream.write(data)
    return len(data)


# =============================================================================
# DECODE
# =============================================================================


class _Accumulator:
    """Сборка значения из групп по 7 бит с проверкой переполнения."""

    def __init__(self):
        self.value = 0
        self.shift = 0
        self.count = 0

    def feed(self, byte: int) -> bool:
        """Добавить байт. Возвращает True, если varint завершён."""
        if self.count == MAX_VARINT_LEN64 - 1 and byte > 1:
            # 10-й байт может нести только последний бит uint64
            raise FixedDecodeError("varint overflows a 64-bit integer")
        self.value |= (byte & _PAYLOAD) << self.shift
        self.shift += 7
        self.count += 1
        return byte < _CONTINUATION


def decode_uvarint(data: bytes) -> tuple[int, int]:
    """
    Декодирование varint из начала буфера.

    Args:
        data: Буфер (лишние байты после varint не читаются)

    Returns:
        (значение, количество прочитанных байт)

    Raises:
        FixedDecodeError: Буфер закончился посреди varint или
            значение не помещается в 64 бита
    """
    acc = _Accumulator()
    for byte in data:
        if acc.feed(byte):
            return acc.value, acc.count
    raise FixedDecodeError("unexpected end of varint data")


def read_uvarint(stream: BinaryIO) -> int:
    """
    Чтение одного varint из потока, байт за байтом.

    Raises:
        FixedDecodeError: Поток закончился посреди varint (или пуст),
            либо значение не помещается в 64 бита
    """
    acc = _Accumulator()
    while True:
        chunk = stream.read(1)
        if not chunk:
            raise FixedDecodeError("unexpected end of varint stream")
        if acc.feed(chunk[0]):
            return acc.value
