"""Downstream connection properties."""

from __future__ import annotations

from .host import get_property_bool, get_property_string, get_property_uint64

SOURCE_ADDRESS = ("source", "address")
SOURCE_PORT = ("source", "port")
DESTINATION_ADDRESS = ("destination", "address")
DESTINATION_PORT = ("destination", "port")
CONNECTION_ID = ("connection", "id")
CONNECTION_MTLS = ("connection", "mtls")
CONNECTION_REQUESTED_SERVER_NAME = ("connection", "requested_server_name")
CONNECTION_TLS_VERSION = ("connection", "tls_version")
CONNECTION_SUBJECT_LOCAL_CERT = ("connection", "subject_local_certificate")
CONNECTION_SUBJECT_PEER_CERT = ("connection", "subject_peer_certificate")
CONNECTION_DNS_SAN_LOCAL_CERT = ("connection", "dns_san_local_certificate")
CONNECTION_DNS_SAN_PEER_CERT = ("connection", "dns_san_peer_certificate")
CONNECTION_URI_SAN_LOCAL_CERT = ("connection", "uri_san_local_certificate")
CONNECTION_URI_SAN_PEER_CERT = ("connection", "uri_san_peer_certificate")
CONNECTION_SHA256_PEER_CERT_DIGEST = ("connection", "sha256_peer_certificate_digest")
CONNECTION_TERMINATION_DETAILS = ("connection", "termination_details")


def get_downstream_remote_address() -> str:
    """Remote address of the downstream connection."""
    return get_property_string(SOURCE_ADDRESS)


def get_downstream_remote_port() -> int:
    """Remote port of the downstream connection."""
    return get_property_uint64(SOURCE_PORT)


def get_downstream_local_address() -> str:
    """Local address of the downstream connection."""
    return get_property_string(DESTINATION_ADDRESS)


def get_downstream_local_port() -> int:
    """Local port of the downstream connection."""
    return get_property_uint64(DESTINATION_PORT)


def get_downstream_connection_id() -> int:
    """Identifier of the downstream connection."""
    return get_property_uint64(CONNECTION_ID)


def is_downstream_connection_tls() -> bool:
    """Whether the downstream connection uses TLS."""
    return get_property_bool(CONNECTION_MTLS)


def get_downstream_requested_server_name() -> str:
    """Requested server name of the downstream connection."""
    return get_property_string(CONNECTION_REQUESTED_SERVER_NAME)


def get_downstream_tls_version() -> str:
    """TLS version of the downstream connection."""
    return get_property_string(CONNECTION_TLS_VERSION)


def get_downstream_subject_local_certificate() -> str:
    """Subject of the local certificate in the downstream TLS connection."""
    return get_property_string(CONNECTION_SUBJECT_LOCAL_CERT)


def get_downstream_subject_peer_certificate() -> str:
    """Subject of the peer certificate in the downstream TLS connection."""
    return get_property_string(CONNECTION_SUBJECT_PEER_CERT)


def get_downstream_dns_san_local_certificate() -> str:
    """First DNS SAN entry of the local certificate downstream."""
    return get_property_string(CONNECTION_DNS_SAN_LOCAL_CERT)


def get_downstream_dns_san_peer_certificate() -> str:
    """First DNS SAN entry of the peer certificate downstream."""
    return get_property_string(CONNECTION_DNS_SAN_PEER_CERT)


def get_downstream_uri_san_local_certificate() -> str:
    """First URI SAN entry of the local certificate downstream."""
    return get_property_string(CONNECTION_URI_SAN_LOCAL_CERT)


def get_downstream_uri_san_peer_certificate() -> str:
    """First URI SAN entry of the peer certificate downstream."""
    return get_property_string(CONNECTION_URI_SAN_PEER_CERT)


def get_downstream_sha256_peer_certificate_digest() -> str:
    """SHA256 digest of the downstream peer certificate."""
    return get_property_string(CONNECTION_SHA256_PEER_CERT_DIGEST)


def get_downstream_termination_details() -> str:
    """Internal termination details of the connection."""
    return get_property_string(CONNECTION_TERMINATION_DETAILS)