"""Node metadata properties populated by the mesh control plane."""

from __future__ import annotations

from .host import (
    get_property_float64,
    get_property_string,
    get_property_string_map,
    get_property_string_slice,
)
from .types import IstioTrafficInterceptionMode, parse_istio_traffic_interception_mode

_META = ("node", "metadata")

NODE_META_ANNOTATIONS = _META + ("ANNOTATIONS",)
NODE_META_APP_CONTAINERS = _META + ("APP_CONTAINERS",)
NODE_META_CLUSTER_ID = _META + ("CLUSTER_ID",)
NODE_META_ENVOY_PROMETHEUS_PORT = _META + ("ENVOY_PROMETHEUS_PORT",)
NODE_META_ENVOY_STATUS_PORT = _META + ("ENVOY_STATUS_PORT",)
NODE_META_INSTANCE_IPS = _META + ("INSTANCE_IPS",)
NODE_META_INTERCEPTION_MODE = _META + ("INTERCEPTION_MODE",)
NODE_META_ISTIO_PROXY_SHA = _META + ("ISTIO_PROXY_SHA",)
NODE_META_ISTIO_VERSION = _META + ("ISTIO_VERSION",)
NODE_META_LABELS = _META + ("LABELS",)
NODE_META_MESH_ID = _META + ("MESH_ID",)
NODE_META_NAME = _META + ("NAME",)
NODE_META_NAMESPACE = _META + ("NAMESPACE",)
NODE_META_NODE_NAME = _META + ("NODE_NAME",)
NODE_META_OWNER = _META + ("OWNER",)
NODE_META_PILOT_SAN = _META + ("PILOT_SAN",)
NODE_META_POD_PORTS = _META + ("POD_PORTS",)
NODE_META_SERVICE_ACCOUNT = _META + ("SERVICE_ACCOUNT",)
NODE_META_WORKLOAD_NAME = _META + ("WORKLOAD_NAME",)


def get_node_meta_annotations() -> dict[str, str]:
    """Annotations of the node."""
    return get_property_string_map(NODE_META_ANNOTATIONS)


def get_node_meta_app_containers() -> str:
    """App containers of the node."""
    return get_property_string(NODE_META_APP_CONTAINERS)


def get_node_meta_cluster_id() -> str:
    """Cluster the node belongs to."""
    return get_property_string(NODE_META_CLUSTER_ID)


def get_node_meta_envoy_prometheus_port() -> float:
    """Prometheus port of the proxy."""
    return get_property_float64(NODE_META_ENVOY_PROMETHEUS_PORT)


def get_node_meta_envoy_status_port() -> float:
    """Status port of the proxy."""
    return get_property_float64(NODE_META_ENVOY_STATUS_PORT)


def get_node_meta_instance_ips() -> str:
    """Instance IPs of the node."""
    return get_property_string(NODE_META_INSTANCE_IPS)


def get_node_meta_interception_mode() -> IstioTrafficInterceptionMode:
    """Traffic interception mode; raises ValueError for an unknown mode."""
    return parse_istio_traffic_interception_mode(get_property_string(NODE_META_INTERCEPTION_MODE))


def get_node_meta_istio_proxy_sha() -> str:
    """Proxy build SHA of the node."""
    return get_property_string(NODE_META_ISTIO_PROXY_SHA)


def get_node_meta_istio_version() -> str:
    """Mesh version of the node."""
    return get_property_string(NODE_META_ISTIO_VERSION)


def get_node_meta_labels() -> dict[str, str]:
    """Labels of the node."""
    return get_property_string_map(NODE_META_LABELS)


def get_node_meta_mesh_id() -> str:
    """Mesh ID of the node."""
    return get_property_string(NODE_META_MESH_ID)


def get_node_meta_name() -> str:
    """Name of the node."""
    return get_property_string(NODE_META_NAME)


def get_node_meta_namespace() -> str:
    """Namespace of the node."""
    return get_property_string(NODE_META_NAMESPACE)


def get_node_meta_node_name() -> str:
    """Node name of the node."""
    return get_property_string(NODE_META_NODE_NAME)


def get_node_meta_owner() -> str:
    """Owning controller of the workload instance."""
    return get_property_string(NODE_META_OWNER)


def get_node_meta_pilot_san() -> list[str]:
    """Subject alternate names of the node's xDS server."""
    return get_property_string_slice(NODE_META_PILOT_SAN)


def get_node_meta_pod_ports() -> str:
    """Pod ports of the node, used to look up named ports."""
    return get_property_string(NODE_META_POD_PORTS)


def get_node_meta_service_account() -> str:
    """Service account of the node."""
    return get_property_string(NODE_META_SERVICE_ACCOUNT)


def get_node_meta_workload_name() -> str:
    """Workload name of the node."""
    return get_property_string(NODE_META_WORKLOAD_NAME)