"""Proxy configuration properties carried in the node metadata."""

from __future__ import annotations

from .host import (
    PropertyNotFoundError,
    get_property_bool,
    get_property_float64,
    get_property_string,
    get_property_string_slice,
)
from .types import IstioProxyStatsMatcher

_PROXY_CONFIG = ("node", "metadata", "PROXY_CONFIG")

NODE_META_PROXY_CONFIG_BINARY_PATH = _PROXY_CONFIG + ("binaryPath",)
NODE_META_PROXY_CONFIG_CONCURRENCY = _PROXY_CONFIG + ("concurrency",)
NODE_META_PROXY_CONFIG_CONFIG_PATH = _PROXY_CONFIG + ("configPath",)
NODE_PROXY_CONFIG_CONTROL_PLANE_AUTH_POLICY = _PROXY_CONFIG + ("controlPlaneAuthPolicy",)
NODE_PROXY_CONFIG_DISCOVERY_ADDRESS = _PROXY_CONFIG + ("discoveryAddress",)
NODE_PROXY_CONFIG_DRAIN_DURATION = _PROXY_CONFIG + ("drainDuration",)
NODE_PROXY_CONFIG_EXTRA_STAT_TAGS = _PROXY_CONFIG + ("extraStatTags",)
NODE_PROXY_CONFIG_HOLD_APPLICATION_UNTIL_PROXY_STARTS = _PROXY_CONFIG + (
    "holdApplicationUntilProxyStarts",
)
NODE_PROXY_CONFIG_PROXY_ADMIN_PORT = _PROXY_CONFIG + ("proxyAdminPort",)
NODE_PROXY_CONFIG_PROXY_STATS_MATCHER_INCLUSION_PREFIXES = _PROXY_CONFIG + (
    "proxyStatsMatcher",
    "inclusionPrefixes",
)
NODE_PROXY_CONFIG_PROXY_STATS_MATCHER_INCLUSION_REGEXPS = _PROXY_CONFIG + (
    "proxyStatsMatcher",
    "inclusionRegexps",
)
NODE_PROXY_CONFIG_PROXY_STATS_MATCHER_INCLUSION_SUFFIXES = _PROXY_CONFIG + (
    "proxyStatsMatcher",
    "inclusionSuffixes",
)
NODE_PROXY_CONFIG_SERVICE_CLUSTER = _PROXY_CONFIG + ("serviceCluster",)
NODE_PROXY_CONFIG_STAT_NAME_LENGTH = _PROXY_CONFIG + ("statNameLength",)
NODE_PROXY_CONFIG_STATUS_PORT = _PROXY_CONFIG + ("statusPort",)
NODE_PROXY_CONFIG_TERMINATION_DRAIN_DURATION = _PROXY_CONFIG + ("terminationDrainDuration",)
NODE_PROXY_CONFIG_TRACING_DATADOG_ADDRESS = _PROXY_CONFIG + ("tracing", "datadog", "address")
NODE_PROXY_CONFIG_TRACING_OPEN_CENSUS_AGENT_ADDRESS = _PROXY_CONFIG + (
    "tracing",
    "opencensusagent",
    "address",
)
NODE_PROXY_CONFIG_TRACING_ZIPKIN_ADDRESS = _PROXY_CONFIG + ("tracing", "zipkin", "address")


def get_node_meta_proxy_config_binary_path() -> str:
    """Path to the proxy binary."""
    return get_property_string(NODE_META_PROXY_CONFIG_BINARY_PATH)


def get_node_meta_proxy_config_concurrency() -> float:
    """Number of proxy worker threads."""
    return get_property_float64(NODE_META_PROXY_CONFIG_CONCURRENCY)


def get_node_meta_proxy_config_config_path() -> str:
    """Directory holding the generated proxy configuration."""
    return get_property_string(NODE_META_PROXY_CONFIG_CONFIG_PATH)


def get_node_proxy_config_control_plane_auth_policy() -> str:
    """How the proxy authenticates to the control plane."""
    return get_property_string(NODE_PROXY_CONFIG_CONTROL_PLANE_AUTH_POLICY)


def get_node_proxy_config_discovery_address() -> str:
    """Address of the discovery service."""
    return get_property_string(NODE_PROXY_CONFIG_DISCOVERY_ADDRESS)


def get_node_proxy_config_drain_duration() -> str:
    """Time the proxy drains connections during a hot restart."""
    return get_property_string(NODE_PROXY_CONFIG_DRAIN_DURATION)


def get_node_proxy_config_extra_stat_tags() -> list[str]:
    """Extra stat tags extracted from in-proxy telemetry."""
    return get_property_string_slice(NODE_PROXY_CONFIG_EXTRA_STAT_TAGS)


def get_node_proxy_config_hold_application_until_proxy_starts() -> bool:
    """Whether application start waits for the proxy to be ready."""
    return get_property_bool(NODE_PROXY_CONFIG_HOLD_APPLICATION_UNTIL_PROXY_STARTS)


def get_node_proxy_config_proxy_admin_port() -> float:
    """Admin port of the proxy."""
    return get_property_float64(NODE_PROXY_CONFIG_PROXY_ADMIN_PORT)


def get_node_proxy_config_proxy_stats_matcher() -> IstioProxyStatsMatcher:
    """Stats inclusion matchers; raises LookupError if no component is present."""
    components = {}
    for name, path in (
        ("inclusion_prefixes", NODE_PROXY_CONFIG_PROXY_STATS_MATCHER_INCLUSION_PREFIXES),
        ("inclusion_regexps", NODE_PROXY_CONFIG_PROXY_STATS_MATCHER_INCLUSION_REGEXPS),
        ("inclusion_suffixes", NODE_PROXY_CONFIG_PROXY_STATS_MATCHER_INCLUSION_SUFFIXES),
    ):
        try:
            components[name] = get_property_string_slice(path)
        except PropertyNotFoundError:
            continue
    if not components:
        raise LookupError("failed to fetch any components of IstioProxyStatsMatcher")
    return IstioProxyStatsMatcher(**components)


def get_node_proxy_config_service_cluster() -> str:
    """Service cluster name shared by all proxy instances."""
    return get_property_string(NODE_PROXY_CONFIG_SERVICE_CLUSTER)


def get_node_proxy_config_stat_name_length() -> float:
    """Maximum stat name length."""
    return get_property_float64(NODE_PROXY_CONFIG_STAT_NAME_LENGTH)


def get_node_proxy_config_status_port() -> float:
    """Port the agent listens on for administrative commands."""
    return get_property_float64(NODE_PROXY_CONFIG_STATUS_PORT)


def get_node_proxy_config_termination_drain_duration() -> str:
    """Time allowed for connections to complete on proxy shutdown."""
    return get_property_string(NODE_PROXY_CONFIG_TERMINATION_DRAIN_DURATION)


def get_node_proxy_config_tracing_datadog_address() -> str:
    """Address of the Datadog tracing service."""
    return get_property_string(NODE_PROXY_CONFIG_TRACING_DATADOG_ADDRESS)


def get_node_proxy_config_tracing_open_census_agent_address() -> str:
    """gRPC address of the OpenCensus agent."""
    return get_property_string(NODE_PROXY_CONFIG_TRACING_OPEN_CENSUS_AGENT_ADDRESS)


def get_node_proxy_config_tracing_zipkin_address() -> str:
    """Address of the Zipkin service."""
    return get_property_string(NODE_PROXY_CONFIG_TRACING_ZIPKIN_ADDRESS)