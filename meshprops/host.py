"""Property lookup against a pluggable host source, with typed decoders.

No property is guaranteed to be present: availability depends on the proxy
version and configuration.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from typing import Protocol

from .serialization import (
    deserialize_bool,
    deserialize_byte_slice_map,
    deserialize_byte_slice_slice,
    deserialize_float64,
    deserialize_string_map,
    deserialize_string_slice,
    deserialize_timestamp,
    deserialize_uint64,
)
from .types import IstioFilterMetadata, IstioService


class PropertyNotFoundError(LookupError):
    """Raised when a property path has no value."""

    def __init__(self, path: Iterable[str]) -> None:
        self.path = tuple(path)
        super().__init__(f"property not found: {'.'.join(self.path)}")


class PropertySource(Protocol):
    def get(self, path: Iterable[str]) -> bytes: ...


class PropertyStore:
    """In-memory property source keyed by path."""

    def __init__(self, properties: Mapping[Iterable[str], bytes] | None = None) -> None:
        self._values: dict[tuple[str, ...], bytes] = {}
        for path, value in (properties or {}).items():
            self.set(path, value)

    def set(self, path: Iterable[str], value: bytes) -> PropertyStore:
        """Store a raw value under a path; returns the store for chaining."""
        self._values[tuple(path)] = bytes(value)
        return self

    def get(self, path: Iterable[str]) -> bytes:
        """Return the raw value at a path or raise PropertyNotFoundError."""
        key = tuple(path)
        try:
            return self._values[key]
        except KeyError:
            raise PropertyNotFoundError(key) from None


_current_source: ContextVar[PropertySource | None] = ContextVar(
    "meshprops_property_source", default=None
)
_EMPTY = PropertyStore()


def set_property_source(source: PropertySource) -> PropertySource:
    """Install the source used for lookups and return the one it replaces."""
    previous = _current_source.get() or _EMPTY
    _current_source.set(source)
    return previous


@contextmanager
def use_property_source(source: PropertySource) -> Iterator[PropertySource]:
    """Use a source for the duration of the block."""
    token = _current_source.set(source)
    try:
        yield source
    finally:
        _current_source.reset(token)


def get_property(path: Iterable[str]) -> bytes:
    """Fetch the raw bytes of a property from the current source."""
    source = _current_source.get() or _EMPTY
    return source.get(tuple(path))


def get_property_bool(path: Iterable[str]) -> bool:
    return deserialize_bool(get_property(path))


def get_property_byte_slice_map(path: Iterable[str]) -> dict[str, bytes]:
    return deserialize_byte_slice_map(get_property(path))


def get_property_byte_slice_slice(path: Iterable[str]) -> list[bytes]:
    return deserialize_byte_slice_slice(get_property(path))


def get_property_float64(path: Iterable[str]) -> float:
    return deserialize_float64(get_property(path))


def get_property_string(path: Iterable[str]) -> str:
    return get_property(path).decode("utf-8", "surrogateescape")


def get_property_string_map(path: Iterable[str]) -> dict[str, str]:
    return deserialize_string_map(get_property(path))


def get_property_string_slice(path: Iterable[str]) -> list[str]:
    return deserialize_string_slice(get_property(path))


def get_property_timestamp(path: Iterable[str]) -> datetime:
    return deserialize_timestamp(get_property(path))


def get_property_uint64(path: Iterable[str]) -> int:
    return deserialize_uint64(get_property(path))


def get_istio_filter_metadata(path: Iterable[str]) -> IstioFilterMetadata:
    """Read filter metadata under a path; missing parts give empty fields."""
    base = tuple(path)
    try:
        config = get_property_string(base + ("config",))
    except PropertyNotFoundError:
        return IstioFilterMetadata()
    result = IstioFilterMetadata(config=config)

    try:
        services = get_property_byte_slice_slice(base + ("services",))
    except PropertyNotFoundError:
        return result

    for raw in services:
        if not raw:
            continue
        fields = deserialize_string_map(raw)
        result.services.append(
            IstioService(
                host=fields.get("host", ""),
                name=fields.get("name", ""),
                namespace=fields.get("namespace", ""),
            )
        )
    return result