"""Request properties."""

from __future__ import annotations

from datetime import datetime

from .host import (
    get_property_string,
    get_property_string_map,
    get_property_timestamp,
    get_property_uint64,
)

REQUEST_PATH = ("request", "path")
REQUEST_URL_PATH = ("request", "url_path")
REQUEST_HOST = ("request", "host")
REQUEST_SCHEME = ("request", "scheme")
REQUEST_METHOD = ("request", "method")
REQUEST_HEADERS = ("request", "headers")
REQUEST_REFERER = ("request", "referer")
REQUEST_USER_AGENT = ("request", "useragent")
REQUEST_TIME = ("request", "time")
REQUEST_ID = ("request", "id")
REQUEST_PROTOCOL = ("request", "protocol")
REQUEST_QUERY = ("request", "query")
REQUEST_DURATION = ("request", "duration")
REQUEST_SIZE = ("request", "size")
REQUEST_TOTAL_SIZE = ("request", "total_size")


def get_request_path() -> str:
    """Path portion of the URL."""
    return get_property_string(REQUEST_PATH)


def get_request_url_path() -> str:
    """Path portion of the URL without the query string."""
    return get_property_string(REQUEST_URL_PATH)


def get_request_host() -> str:
    """Host portion of the URL."""
    return get_property_string(REQUEST_HOST)


def get_request_scheme() -> str:
    """Scheme portion of the URL."""
    return get_property_string(REQUEST_SCHEME)


def get_request_method() -> str:
    """Request method."""
    return get_property_string(REQUEST_METHOD)


def get_request_headers() -> dict[str, str]:
    """All request headers keyed by lower-cased name."""
    return get_property_string_map(REQUEST_HEADERS)


def get_request_referer() -> str:
    """Referer request header."""
    return get_property_string(REQUEST_REFERER)


def get_request_user_agent() -> str:
    """User agent request header."""
    return get_property_string(REQUEST_USER_AGENT)


def get_request_time() -> datetime:
    """UTC time of the first byte received."""
    return get_property_timestamp(REQUEST_TIME)


def get_request_id() -> str:
    """Request ID from the x-request-id header."""
    return get_property_string(REQUEST_ID)


def get_request_protocol() -> str:
    """Request protocol such as HTTP/1.1."""
    return get_property_string(REQUEST_PROTOCOL)


def get_request_query() -> str:
    """Query portion of the URL."""
    return get_property_string(REQUEST_QUERY)


def get_request_duration() -> int:
    """Total duration of the request in nanoseconds."""
    return get_property_uint64(REQUEST_DURATION)


def get_request_size() -> int:
    """Size of the request body."""
    return get_property_uint64(REQUEST_SIZE)


def get_request_total_size() -> int:
    """Total size of the request including headers."""
    return get_property_uint64(REQUEST_TOTAL_SIZE)