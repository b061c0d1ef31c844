import pytest

from meshprops import upstream as up
from meshprops.host import PropertyNotFoundError, PropertyStore, use_property_source
from meshprops.serialization import serialize_uint64

SUBJECT = "CN=example.com,OU=IT,O=example,L=San Francisco,ST=California,C=US"


@pytest.mark.parametrize(
    "path, getter, expected",
    [
        (up.UPSTREAM_ADDRESS, up.get_upstream_address, "127.0.0.1"),
        (up.UPSTREAM_TLS_VERSION, up.get_upstream_tls_version, "TLSv1.3"),
        (up.UPSTREAM_SUBJECT_LOCAL_CERTIFICATE, up.get_upstream_subject_local_certificate, SUBJECT),
        (up.UPSTREAM_SUBJECT_PEER_CERTIFICATE, up.get_upstream_subject_peer_certificate, SUBJECT),
        (up.UPSTREAM_DNS_SAN_LOCAL_CERTIFICATE, up.get_upstream_dns_san_local_certificate, "example.com"),
        (up.UPSTREAM_DNS_SAN_PEER_CERTIFICATE, up.get_upstream_dns_san_peer_certificate, "example.com"),
        (up.UPSTREAM_URI_SAN_LOCAL_CERTIFICATE, up.get_upstream_uri_san_local_certificate, "example.com"),
        (up.UPSTREAM_URI_SAN_PEER_CERTIFICATE, up.get_upstream_uri_san_peer_certificate, "example.com"),
        (
            up.UPSTREAM_SHA256_PEER_CERTIFICATE_DIGEST,
            up.get_upstream_sha256_peer_certificate_digest,
            "b714f3d6f83efc2fddf80b8feda3e3b21b3e27b5",
        ),
        (up.UPSTREAM_LOCAL_ADDRESS, up.get_upstream_local_address, "192.168.1.1"),
        (up.UPSTREAM_TRANSPORT_FAILURE_REASON, up.get_upstream_transport_failure_reason, "connection closed"),
    ],
)
def test_string_properties(path, getter, expected):
    with use_property_source(PropertyStore({path: expected.encode()})):
        assert getter() == expected


def test_upstream_port():
    with use_property_source(PropertyStore({up.UPSTREAM_PORT: serialize_uint64(8080)})):
        assert up.get_upstream_port() == 8080


def test_missing_upstream_port_raises():
    with use_property_source(PropertyStore()):
        with pytest.raises(PropertyNotFoundError) as info:
            up.get_upstream_port()
    assert info.value.path == up.UPSTREAM_PORT