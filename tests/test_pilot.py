import pytest

from meshprops import pilot
from meshprops.host import PropertyNotFoundError, PropertyStore, use_property_source
from meshprops.serialization import serialize_float64, serialize_string_map, serialize_string_slice
from meshprops.types import IstioTrafficInterceptionMode

META = ("node", "metadata")

OVERRIDES = '{"containers":[{"name":"istio-proxy","ports":[{"name":"http-envoy-prom","containerPort":15090,"protocol":"TCP"}],"resources":{"limits":{"cpu":"2","memory":"1Gi"},"requests":{"cpu":"100m","memory":"128Mi"}},"volumeMounts":[{"name":"kube-api-access-6mm2z","readOnly":true,"mountPath":"/var/run/secrets/kubernetes.io/serviceaccount"}],"terminationMessagePath":"/dev/termination-log","terminationMessagePolicy":"File","imagePullPolicy":"Always","securityContext":{"capabilities":{"drop":["ALL"]},"privileged":false,"runAsUser":1337,"runAsGroup":1337,"runAsNonRoot":true,"readOnlyRootFilesystem":true,"allowPrivilegeEscalation":false}}]} sidecar.istio.io/componentLogLevel:wasm:debug sidecar.istio.io/inject:true sidecar.istio.io/status:{"initContainers":null,"containers":["istio-proxy"],"volumes":["workload-socket","credential-socket","workload-certs","istio-envoy","istio-data","istio-podinfo","istio-token","istiod-ca-cert"],"imagePullSecrets":null,"revision":"default"}]'

ANNOTATIONS = {
    "inject.istio.io/templates": "gateway",
    "istio.io/rev": "default",
    "kubernetes.io/config.seen": "2023-10-13T10:39:01.174733724Z",
    "kubernetes.io/config.source": "api",
    "prometheus.io/path": "/stats/prometheus",
    "prometheus.io/port": "15020",
    "prometheus.io/scrape": "true",
    "proxy.istio.io/overrides": OVERRIDES,
}

LABELS = {
    "app": "istio-ingress",
    "istio": "ingress",
    "istio-locality": "region1",
    "service.istio.io/canonical-name": "istio-ingress",
    "service.istio.io/canonical-revision": "latest",
    "sidecar.istio.io/inject": "true",
}

OWNER = "kubernetes://apis/apps/v1/namespaces/istio-ingress/deployments/istio-ingress"
POD_PORTS = '[{"name":"http-envoy-prom","containerPort":15090,"protocol":"TCP"}]'


def _with(key, value):
    return use_property_source(PropertyStore().set(META + (key,), value))


@pytest.mark.parametrize("mapping", [ANNOTATIONS, {}])
def test_get_node_meta_annotations(mapping):
    with _with("ANNOTATIONS", serialize_string_map(mapping)):
        assert pilot.get_node_meta_annotations() == dict(mapping)


@pytest.mark.parametrize("mapping", [LABELS, {}])
def test_get_node_meta_labels(mapping):
    with _with("LABELS", serialize_string_map(mapping)):
        assert pilot.get_node_meta_labels() == dict(mapping)


@pytest.mark.parametrize(
    "key, raw, func, expected",
    [
        ("APP_CONTAINERS", b"metadata", pilot.get_node_meta_app_containers, "metadata"),
        ("CLUSTER_ID", b"Kubernetes", pilot.get_node_meta_cluster_id, "Kubernetes"),
        ("ENVOY_PROMETHEUS_PORT", serialize_float64(15090), pilot.get_node_meta_envoy_prometheus_port, 15090.0),
        ("ENVOY_STATUS_PORT", serialize_float64(15021), pilot.get_node_meta_envoy_status_port, 15021.0),
        ("INSTANCE_IPS", b"10.244.0.13", pilot.get_node_meta_instance_ips, "10.244.0.13"),
        ("ISTIO_PROXY_SHA", b"3c27a1b0cf381ca854ccc3a2034e88c206928da2",
         pilot.get_node_meta_istio_proxy_sha, "3c27a1b0cf381ca854ccc3a2034e88c206928da2"),
        ("ISTIO_VERSION", b"1.18.2-tetrate-v0", pilot.get_node_meta_istio_version, "1.18.2-tetrate-v0"),
        ("MESH_ID", b"cluster.local", pilot.get_node_meta_mesh_id, "cluster.local"),
        ("NAME", b"istio-ingress-67cddc6d57-kk2cr", pilot.get_node_meta_name, "istio-ingress-67cddc6d57-kk2cr"),
        ("NAMESPACE", b"istio-ingress", pilot.get_node_meta_namespace, "istio-ingress"),
        ("NODE_NAME", b"istio-wasm-control-plane", pilot.get_node_meta_node_name, "istio-wasm-control-plane"),
        ("OWNER", OWNER.encode(), pilot.get_node_meta_owner, OWNER),
        ("POD_PORTS", POD_PORTS.encode(), pilot.get_node_meta_pod_ports, POD_PORTS),
        ("SERVICE_ACCOUNT", b"istio-ingress", pilot.get_node_meta_service_account, "istio-ingress"),
        ("WORKLOAD_NAME", b"istio-ingress", pilot.get_node_meta_workload_name, "istio-ingress"),
    ],
)
def test_scalar_properties(key, raw, func, expected):
    with _with(key, raw):
        assert func() == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"TPROXY", IstioTrafficInterceptionMode.TPROXY),
        (b"REDIRECT", IstioTrafficInterceptionMode.REDIRECT),
        (b"NONE", IstioTrafficInterceptionMode.NONE),
    ],
)
def test_get_node_meta_interception_mode(raw, expected):
    with _with("INTERCEPTION_MODE", raw):
        assert pilot.get_node_meta_interception_mode() is expected


def test_get_node_meta_interception_mode_invalid():
    with _with("INTERCEPTION_MODE", b"INVALID_MODE"):
        with pytest.raises(ValueError, match="invalid IstioTrafficInterceptionMode: INVALID_MODE"):
            pilot.get_node_meta_interception_mode()


@pytest.mark.parametrize(
    "sans",
    [
        ["istiod.istio-system.svc"],
        ["istiod.istio-system.svc", "istiod.istio-system.svc.cluster.local"],
    ],
)
def test_get_node_meta_pilot_san(sans):
    with _with("PILOT_SAN", serialize_string_slice(sans)):
        assert pilot.get_node_meta_pilot_san() == sans


def test_missing_labels_raise():
    with use_property_source(PropertyStore()):
        with pytest.raises(PropertyNotFoundError):
            pilot.get_node_meta_labels()