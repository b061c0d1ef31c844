"""Binary encodings the proxy host uses for property values."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime, timedelta, timezone

_BOOL = struct.Struct("<?")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")
_F64 = struct.Struct("<d")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MICROSECOND = timedelta(microseconds=1)


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _decode(raw: bytes) -> str:
    return bytes(raw).decode("utf-8", "surrogateescape")


def _unpack(layout: struct.Struct, data: bytes, offset: int = 0):
    try:
        return layout.unpack_from(data, offset)[0]
    except struct.error as exc:
        raise ValueError(f"truncated property data: {exc}") from exc


def _take(data: bytes, start: int, length: int) -> bytes:
    end = start + length
    if end > len(data):
        raise ValueError("truncated property data")
    return bytes(data[start:end])


def _encode_pairs(pairs: list[tuple[bytes, bytes]]) -> bytes:
    sizes = b"".join(_U32.pack(len(key)) + _U32.pack(len(value)) for key, value in pairs)
    body = b"".join(key + b"\x00" + value + b"\x00" for key, value in pairs)
    return _U32.pack(len(pairs)) + sizes + body


def _decode_pairs(data: bytes) -> Iterator[tuple[bytes, bytes]]:
    count = _unpack(_U32, data)
    size_offset = 4
    data_offset = 4 + 8 * count
    for _ in range(count):
        key_size = _unpack(_U32, data, size_offset)
        value_size = _unpack(_U32, data, size_offset + 4)
        size_offset += 8
        key = _take(data, data_offset, key_size)
        data_offset += key_size + 1
        value = _take(data, data_offset, value_size)
        data_offset += value_size + 1
        yield key, value


def _encode_items(items: list[bytes]) -> bytes:
    sizes = b"".join(_U64.pack(len(item)) for item in items)
    body = b"".join(item + b"\x00\x00" for item in items)
    return _U32.pack(len(items)) + sizes + body


def _decode_items(data: bytes) -> Iterator[bytes]:
    count = _unpack(_U32, data)
    size_offset = 4
    data_offset = 4 + 8 * count
    for _ in range(count):
        length = _unpack(_U64, data, size_offset)
        size_offset += 8
        yield _take(data, data_offset, length)
        data_offset += length + 2


def serialize_bool(value: bool) -> bytes:
    """Encode a boolean as a single byte: 1 for true, 0 for false."""
    return _BOOL.pack(bool(value))


def deserialize_bool(data: bytes) -> bool:
    """Decode a boolean; empty data means False."""
    if len(data) == 0:
        return False
    if len(data) != 1:
        raise ValueError("invalid byte slice length for boolean deserialization")
    return data[0] != 0


def serialize_byte_slice_map(mapping: Mapping[str, bytes]) -> bytes:
    """Encode a map of string keys to raw byte values."""
    if not mapping:
        return b""
    return _encode_pairs([(_encode(key), bytes(value)) for key, value in mapping.items()])


def deserialize_byte_slice_map(data: bytes) -> dict[str, bytes]:
    """Decode a map of string keys to raw byte values."""
    if len(data) == 0:
        return {}
    return {_decode(key): value for key, value in _decode_pairs(bytes(data))}


def serialize_byte_slice_slice(items: Iterable[bytes]) -> bytes:
    """Encode a list of byte strings, each prefixed by its 64-bit length."""
    encoded = [bytes(item) for item in items]
    if not encoded:
        return b""
    return _encode_items(encoded)


def deserialize_byte_slice_slice(data: bytes) -> list[bytes]:
    """Decode a list of byte strings."""
    if len(data) == 0:
        return []
    return list(_decode_items(bytes(data)))


def serialize_float64(value: float) -> bytes:
    """Encode a float as 8 little-endian bytes."""
    return _F64.pack(float(value))


def deserialize_float64(data: bytes) -> float:
    """Decode a float from 8 little-endian bytes."""
    return _unpack(_F64, bytes(data))


def serialize_proto_string_slice(strings: Iterable[str]) -> bytes:
    """Encode strings as protobuf-like length-delimited fields."""
    parts = []
    for text in strings:
        raw = _encode(text)
        if len(raw) > 255:
            raise ValueError("string length exceeds 255 characters")
        parts.append(b"\x00" + bytes([len(raw)]) + raw)
    return b"".join(parts)


def deserialize_proto_string_slice(data: bytes) -> list[str]:
    """Decode protobuf-like length-delimited string fields."""
    data = bytes(data)
    result = []
    position = 0
    while position < len(data):
        if position + 1 >= len(data):
            raise ValueError("truncated property data")
        length = data[position + 1]
        start = position + 2
        result.append(_decode(_take(data, start, length)))
        position = start + length
    return result


def serialize_string_map(mapping: Mapping[str, str]) -> bytes:
    """Encode a map of strings to strings."""
    return _encode_pairs([(_encode(key), _encode(value)) for key, value in mapping.items()])


def deserialize_string_map(data: bytes) -> dict[str, str]:
    """Decode a map of strings to strings."""
    return {_decode(key): _decode(value) for key, value in _decode_pairs(bytes(data))}


def serialize_string_slice(strings: Iterable[str]) -> bytes:
    """Encode a list of strings, each prefixed by its 64-bit length."""
    return _encode_items([_encode(text) for text in strings])


def deserialize_string_slice(data: bytes) -> list[str]:
    """Decode a list of strings."""
    return [_decode(item) for item in _decode_items(bytes(data))]


def serialize_timestamp(timestamp: datetime) -> bytes:
    """Encode a datetime as nanoseconds since the Unix epoch; naive values are UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    nanos = (timestamp - _EPOCH) // _MICROSECOND * 1000
    try:
        return _I64.pack(nanos)
    except struct.error as exc:
        raise ValueError(f"timestamp out of range: {timestamp!r}") from exc


def deserialize_timestamp(data: bytes) -> datetime:
    """Decode nanoseconds since the Unix epoch as an aware UTC datetime."""
    nanos = _unpack(_I64, bytes(data))
    return _EPOCH + timedelta(microseconds=nanos // 1000)


def serialize_uint64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as 8 little-endian bytes."""
    if not 0 <= value < 1 << 64:
        raise ValueError(f"value out of range for uint64: {value}")
    return _U64.pack(value)


def deserialize_uint64(data: bytes) -> int:
    """Decode an unsigned 64-bit integer from 8 little-endian bytes."""
    return _unpack(_U64, bytes(data))