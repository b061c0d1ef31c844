import pytest

from meshprops import response
from meshprops.host import PropertyNotFoundError, PropertyStore, use_property_source
from meshprops.serialization import serialize_string_map, serialize_uint64

HEADERS = {
    ":status": "200",
    "access-control-allow-credentials": "true",
    "access-control-allow-origin": "*",
    "connection": "keep-alive",
    "content-length": "1383",
    "content-type": "application/json",
    "date": "Fri, 13 Oct 2023 11:38:01 GMT",
    "server": "gunicorn/19.9.0",
    "x-envoy-upstream-service-time": "199",
}

TRAILERS = {"Expires:": "Wed, 21 Oct 2015 07:28:00 GMT"}


def _with(key, value):
    return use_property_source(PropertyStore().set(("response", key), value))


@pytest.mark.parametrize(
    "key, raw, func, expected",
    [
        ("code", serialize_uint64(200), response.get_response_code, 200),
        ("code_details", b"Not Found", response.get_response_code_details, "Not Found"),
        ("flags", serialize_uint64(123), response.get_response_flags, 123),
        ("grpc_status", serialize_uint64(200), response.get_response_grpc_status_code, 200),
        ("size", serialize_uint64(512), response.get_response_size, 512),
        ("total_size", serialize_uint64(2048), response.get_response_total_size, 2048),
    ],
)
def test_response_properties(key, raw, func, expected):
    with _with(key, raw):
        assert func() == expected


@pytest.mark.parametrize("headers", [HEADERS, {}])
def test_get_response_headers(headers):
    with _with("headers", serialize_string_map(headers)):
        assert response.get_response_headers() == dict(headers)


@pytest.mark.parametrize("trailers", [TRAILERS, {}])
def test_get_response_trailers(trailers):
    with _with("trailers", serialize_string_map(trailers)):
        assert response.get_response_trailers() == dict(trailers)


def test_missing_response_code_raises():
    with use_property_source(PropertyStore()):
        with pytest.raises(PropertyNotFoundError) as info:
            response.get_response_code()
    assert info.value.path == ("response", "code")