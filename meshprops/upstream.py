"""Upstream connection properties."""

from __future__ import annotations

from .host import get_property_string, get_property_uint64

UPSTREAM_ADDRESS = ("upstream", "address")
UPSTREAM_PORT = ("upstream", "port")
UPSTREAM_TLS_VERSION = ("upstream", "tls_version")
UPSTREAM_SUBJECT_LOCAL_CERTIFICATE = ("upstream", "subject_local_certificate")
UPSTREAM_SUBJECT_PEER_CERTIFICATE = ("upstream", "subject_peer_certificate")
UPSTREAM_DNS_SAN_LOCAL_CERTIFICATE = ("upstream", "dns_san_local_certificate")
UPSTREAM_DNS_SAN_PEER_CERTIFICATE = ("upstream", "dns_san_peer_certificate")
UPSTREAM_URI_SAN_LOCAL_CERTIFICATE = ("upstream", "uri_san_local_certificate")
UPSTREAM_URI_SAN_PEER_CERTIFICATE = ("upstream", "uri_san_peer_certificate")
UPSTREAM_SHA256_PEER_CERTIFICATE_DIGEST = ("upstream", "sha256_peer_certificate_digest")
UPSTREAM_LOCAL_ADDRESS = ("upstream", "local_address")
UPSTREAM_TRANSPORT_FAILURE_REASON = ("upstream", "transport_failure_reason")


def get_upstream_address() -> str:
    """Remote address of the upstream connection."""
    return get_property_string(UPSTREAM_ADDRESS)


def get_upstream_port() -> int:
    """Remote port of the upstream connection."""
    return get_property_uint64(UPSTREAM_PORT)


def get_upstream_tls_version() -> str:
    """TLS version of the upstream connection."""
    return get_property_string(UPSTREAM_TLS_VERSION)


def get_upstream_subject_local_certificate() -> str:
    """Subject of the local certificate in the upstream TLS connection."""
    return get_property_string(UPSTREAM_SUBJECT_LOCAL_CERTIFICATE)


def get_upstream_subject_peer_certificate() -> str:
    """Subject of the peer certificate in the upstream TLS connection."""
    return get_property_string(UPSTREAM_SUBJECT_PEER_CERTIFICATE)


def get_upstream_dns_san_local_certificate() -> str:
    """First DNS SAN entry of the local certificate upstream."""
    return get_property_string(UPSTREAM_DNS_SAN_LOCAL_CERTIFICATE)


def get_upstream_dns_san_peer_certificate() -> str:
    """First DNS SAN entry of the peer certificate upstream."""
    return get_property_string(UPSTREAM_DNS_SAN_PEER_CERTIFICATE)


def get_upstream_uri_san_local_certificate() -> str:
    """First URI SAN entry of the local certificate upstream."""
    return get_property_string(UPSTREAM_URI_SAN_LOCAL_CERTIFICATE)


def get_upstream_uri_san_peer_certificate() -> str:
    """First URI SAN entry of the peer certificate upstream."""
    return get_property_string(UPSTREAM_URI_SAN_PEER_CERTIFICATE)


def get_upstream_sha256_peer_certificate_digest() -> str:
    """SHA256 digest of the upstream peer certificate."""
    return get_property_string(UPSTREAM_SHA256_PEER_CERTIFICATE_DIGEST)


def get_upstream_local_address() -> str:
    """Local address of the upstream connection."""
    return get_property_string(UPSTREAM_LOCAL_ADDRESS)


def get_upstream_transport_failure_reason() -> str:
    """Reason the upstream transport failed."""
    return get_property_string(UPSTREAM_TRANSPORT_FAILURE_REASON)