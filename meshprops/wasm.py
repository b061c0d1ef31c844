"""Plugin, node and filter-metadata properties."""

from __future__ import annotations

from .host import (
    PropertyNotFoundError,
    get_istio_filter_metadata,
    get_property,
    get_property_byte_slice_slice,
    get_property_string,
    get_property_string_slice,
    get_property_uint64,
)
from .serialization import deserialize_proto_string_slice
from .types import EnvoyExtension, EnvoyLocality, EnvoyTrafficDirection, IstioFilterMetadata

PLUGIN_NAME = ("plugin_name",)
PLUGIN_ROOT_ID = ("plugin_root_id",)
PLUGIN_VM_ID = ("plugin_vm_id",)
CLUSTER_NAME = ("cluster_name",)
ROUTE_NAME = ("route_name",)
LISTENER_DIRECTION = ("listener_direction",)
NODE_ID = ("node", "id")
NODE_CLUSTER = ("node", "cluster")
NODE_DYNAMIC_PARAMS = ("node", "dynamic_parameters", "params")
NODE_LOCALITY_REGION = ("node", "locality", "region")
NODE_LOCALITY_ZONE = ("node", "locality", "zone")
NODE_LOCALITY_SUBZONE = ("node", "locality", "subzone")
NODE_USER_AGENT_NAME = ("node", "user_agent_name")
NODE_USER_AGENT_VERSION = ("node", "user_agent_version")
NODE_USER_AGENT_BUILD_VERSION = ("node", "user_agent_build_version", "metadata")
NODE_EXTENSIONS = ("node", "extensions")
NODE_CLIENT_FEATURES = ("node", "client_features")
NODE_LISTENING_ADDRESSES = ("node", "listening_addresses")
CLUSTER_METADATA = ("node", "cluster_metadata", "filter_metadata", "istio")
LISTENER_METADATA = ("node", "listener_metadata", "filter_metadata", "istio")
ROUTE_METADATA = ("node", "route_metadata", "filter_metadata", "istio")
UPSTREAM_HOST_METADATA = ("node", "upstream_host_metadata", "filter_metadata", "istio")


def get_plugin_name() -> str:
    """Plugin name, <metadata.name>.<metadata.namespace> of the plugin resource."""
    return get_property_string(PLUGIN_NAME)


def get_plugin_root_id() -> str:
    """Plugin root id."""
    return get_property_string(PLUGIN_ROOT_ID)


def get_plugin_vm_id() -> str:
    """Plugin VM id."""
    return get_property_string(PLUGIN_VM_ID)


def get_cluster_name() -> str:
    """Upstream cluster name, e.g. "outbound|80||httpbin.org"."""
    return get_property_string(CLUSTER_NAME)


def get_route_name() -> str:
    """Route name; only available in the response path."""
    return get_property_string(ROUTE_NAME)


def get_listener_direction() -> EnvoyTrafficDirection:
    """Listener direction; unknown values map to UNSPECIFIED."""
    return EnvoyTrafficDirection(get_property_uint64(LISTENER_DIRECTION))


def get_node_id() -> str:
    """Opaque identifier of the proxy node."""
    return get_property_string(NODE_ID)


def get_node_cluster() -> str:
    """Local service cluster name of the proxy node."""
    return get_property_string(NODE_CLUSTER)


def get_node_dynamic_params() -> str:
    """Dynamic parameters of the node."""
    return get_property_string(NODE_DYNAMIC_PARAMS)


def get_node_locality() -> EnvoyLocality:
    """Node locality; raises LookupError only if no component is present."""
    values = {}
    errors = []
    for name, path in (
        ("region", NODE_LOCALITY_REGION),
        ("zone", NODE_LOCALITY_ZONE),
        ("subzone", NODE_LOCALITY_SUBZONE),
    ):
        try:
            values[name] = get_property_string(path)
        except PropertyNotFoundError as exc:
            errors.append(str(exc))
    if not values:
        raise LookupError("; ".join(errors))
    return EnvoyLocality(**values)


def get_node_user_agent_name() -> str:
    """User agent name of the node, e.g. "envoy"."""
    return get_property_string(NODE_USER_AGENT_NAME)


def get_node_user_agent_version() -> str:
    """User agent version of the node."""
    return get_property_string(NODE_USER_AGENT_VERSION)


def get_node_user_agent_build_version() -> str:
    """User agent build version of the node."""
    return get_property_string(NODE_USER_AGENT_BUILD_VERSION)


def get_node_extensions() -> list[EnvoyExtension]:
    """Extensions supported by the node."""
    extensions = []
    for raw in get_property_byte_slice_slice(NODE_EXTENSIONS):
        fields = deserialize_proto_string_slice(raw)
        extension = EnvoyExtension()
        if fields:
            extension.name = fields[0]
        if len(fields) > 1:
            extension.category = fields[1]
        if len(fields) > 2:
            extension.type_urls = list(fields[2:])
        extensions.append(extension)
    return extensions


def get_node_client_features() -> list[str]:
    """Well-known client features of the node."""
    return deserialize_proto_string_slice(get_property(NODE_CLIENT_FEATURES))


def get_node_listening_addresses() -> list[str]:
    """Listening addresses of the node."""
    return get_property_string_slice(NODE_LISTENING_ADDRESSES)


def get_cluster_metadata() -> IstioFilterMetadata:
    """Cluster filter metadata."""
    return get_istio_filter_metadata(CLUSTER_METADATA)


def get_listener_metadata() -> IstioFilterMetadata:
    """Listener filter metadata."""
    return get_istio_filter_metadata(LISTENER_METADATA)


def get_route_metadata() -> IstioFilterMetadata:
    """Route filter metadata."""
    return get_istio_filter_metadata(ROUTE_METADATA)


def get_upstream_host_metadata() -> IstioFilterMetadata:
    """Upstream host filter metadata."""
    return get_istio_filter_metadata(UPSTREAM_HOST_METADATA)